"""FastAPI application entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from media_api.api.router import api_router
from media_api.config import get_settings
from media_api.core.exceptions import UpstreamError, upstream_error_handler
from media_api.schemas.system import ServiceInfoResponse
from media_api.services.cloudinary_service import configure_cloudinary

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    logger.info("Starting %s (env=%s)", settings.app_name, settings.environment)
    configure_cloudinary(settings)
    base = f"http://localhost:{settings.port}{settings.api_prefix}"
    logger.info("Test endpoint: %s/test", base)
    logger.info("Videos endpoint: %s/cloudinary/videos", base)
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="List and delete Cloudinary-hosted videos for the frontend",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", response_model=ServiceInfoResponse)
    def service_info():
        """Name, version and environment of the running service."""
        return ServiceInfoResponse(
            name=settings.app_name,
            version=settings.app_version,
            status="running",
            environment=settings.environment,
        )

    return app


app = create_app()
