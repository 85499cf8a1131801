"""Connectivity check for the frontend."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from media_api.schemas.system import ConnectionTestResponse

router = APIRouter(tags=["health"])

logger = logging.getLogger(__name__)


@router.get("/test", response_model=ConnectionTestResponse)
def test_connection():
    logger.debug("Test endpoint hit")
    return ConnectionTestResponse(
        success=True,
        message="Server is running!",
        cloudinary="Connected",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
