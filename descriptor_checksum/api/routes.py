"""
API endpoints for descriptor checksums.
"""

import logging
from fastapi import APIRouter, Depends, Request
from descriptor_checksum.api.models import DescriptorRequest, ServiceResponse, make_response
from descriptor_checksum.checksum.checksum import compute_checksum
from descriptor_checksum.checksum.encoder import add_checksum, verify_checksum
from descriptor_checksum.config.models import AppConfig
from descriptor_checksum.utils.exceptions import DescriptorChecksumException


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/descriptor", tags=["descriptor"])


def get_config(request: Request) -> AppConfig:
    """Dependency to get configuration from app.state."""
    config = getattr(request.app.state, "config", None)
    if config is None:
        raise RuntimeError("Configuration not initialized")
    return config


@router.get("/health")
async def health_check():
    """Simple health check endpoint (no dependencies)."""
    return {"status": "ok", "message": "Server is running"}


@router.post("/checksum", response_model=ServiceResponse)
async def post_checksum(body: DescriptorRequest):
    """Compute the checksum of a descriptor without suffix."""
    try:
        value = compute_checksum(body.descriptor)
        logger.debug(f"POST /checksum -> {value}")
        return make_response(value)
    except DescriptorChecksumException as e:
        logger.info(f"Rejected in /checksum: {e}")
        return make_response(None, e)


@router.post("/add", response_model=ServiceResponse)
async def post_add(body: DescriptorRequest):
    """Append the checksum suffix to a descriptor."""
    try:
        value = add_checksum(body.descriptor)
        logger.debug(f"POST /add -> {value[-9:]}")
        return make_response(value)
    except DescriptorChecksumException as e:
        logger.info(f"Rejected in /add: {e}")
        return make_response(None, e)


@router.post("/verify", response_model=ServiceResponse)
async def post_verify(body: DescriptorRequest, config: AppConfig = Depends(get_config)):
    """Verify a checksummed descriptor and return it without suffix."""
    try:
        value = verify_checksum(body.descriptor, require_checksum=config.checksum.require_checksum)
        logger.debug("POST /verify -> ok")
        return make_response(value)
    except DescriptorChecksumException as e:
        logger.info(f"Rejected in /verify: {e}")
        return make_response(None, e)
