"""
FastAPI application factory.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from descriptor_checksum import __version__
from descriptor_checksum.config.models import AppConfig
from descriptor_checksum.api.models import make_response
from descriptor_checksum.api.routes import router as descriptor_router


logger = logging.getLogger(__name__)


def create_app(config: AppConfig) -> FastAPI:
    """
    Create FastAPI application instance.

    Args:
        config: Application configuration.

    Returns:
        Configured FastAPI app with descriptor routes included.
    """
    app = FastAPI(
        title="Descriptor Checksum Service",
        description="Compute and verify output descriptor checksums",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.state.config = config

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch all unhandled exceptions and return an error envelope."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        response = make_response(value=None, error=exc)

        # Errors are reported in the envelope, not in the HTTP status
        return JSONResponse(status_code=200, content=response.model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report malformed request bodies in the response envelope."""
        logger.info(f"Invalid request to {request.url.path}: {exc.errors()}")

        response = make_response(value=None, error=exc)
        return JSONResponse(status_code=200, content=response.model_dump())

    @app.get("/management/description")
    async def get_server_description():
        """Return server description."""
        return {
            "Value": {
                "ServerName": "Descriptor Checksum Service",
                "Version": __version__,
                "RequireChecksum": config.checksum.require_checksum,
            }
        }

    app.include_router(descriptor_router)

    return app
