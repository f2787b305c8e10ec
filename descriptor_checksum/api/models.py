"""
Pydantic models for the descriptor API requests and responses.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class DescriptorRequest(BaseModel):
    """Request body carrying a descriptor string."""
    descriptor: str = Field(description="Descriptor, optionally with '#checksum' suffix")


class ServiceResponse(BaseModel):
    """
    Standard response envelope.

    All API endpoints return this format.
    """
    Value: Any = Field(description="Response value (type varies by endpoint)")
    ErrorNumber: int = Field(0, description="Error code (0 = success, non-zero = error)")
    ErrorMessage: str = Field("", description="Error message (empty string if no error)")


def make_response(value: Any, error: Optional[Exception] = None) -> ServiceResponse:
    """
    Helper to create a response envelope.

    Args:
        value: Response value (None if error).
        error: Exception (if any).

    Returns:
        ServiceResponse instance.
    """
    if error is None:
        return ServiceResponse(Value=value, ErrorNumber=0, ErrorMessage="")

    from descriptor_checksum.api.error_mapper import map_exception

    error_number, error_message = map_exception(error)
    return ServiceResponse(Value=None, ErrorNumber=error_number, ErrorMessage=error_message)
