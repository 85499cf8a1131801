"""Cloudinary search and delete for video assets."""

import logging
from typing import Any, Optional

import cloudinary
import cloudinary.uploader
from cloudinary.search import Search

from media_api.config import Settings, get_settings
from media_api.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

VIDEO_RESOURCE_TYPE = "video"


def configure_cloudinary(settings: Optional[Settings] = None) -> None:
    """Set process-wide SDK credentials. Call once at startup."""
    settings = settings or get_settings()
    if not settings.cloudinary_configured:
        logger.warning(
            "Cloudinary credentials are incomplete; set CLOUDINARY_CLOUD_NAME, "
            "CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET"
        )
    cloudinary.config(
        cloud_name=settings.cloudinary_cloud_name or None,
        api_key=settings.cloudinary_api_key or None,
        api_secret=settings.cloudinary_api_secret or None,
        secure=True,
    )
    logger.info("Configured Cloudinary (cloud=%s)", settings.cloudinary_cloud_name or "<unset>")


class CloudinaryAssetClient:
    def __init__(
        self,
        resource_type: str = VIDEO_RESOURCE_TYPE,
        max_results: int = 50,
    ):
        self.resource_type = resource_type
        self.max_results = max_results

    def search_videos(self) -> list[dict[str, Any]]:
        """Newest first, capped at max_results. Returns raw resource records."""
        logger.info("Fetching videos from Cloudinary...")
        try:
            result = (
                Search()
                .expression(f"resource_type:{self.resource_type}")
                .sort_by("created_at", "desc")
                .with_field("context")
                .max_results(self.max_results)
                .execute()
            )
        except Exception as e:
            logger.error("Cloudinary fetch error: %s", e, exc_info=True)
            raise UpstreamError.from_exception(e) from e
        resources = list(result.get("resources") or [])
        logger.info("Found %d videos", len(resources))
        return resources

    def delete_video(self, public_id: str) -> dict[str, Any]:
        """Destroy one asset; the SDK result is returned unmodified."""
        logger.info("Deleting video: %s", public_id)
        try:
            result = cloudinary.uploader.destroy(public_id, resource_type=self.resource_type)
        except Exception as e:
            logger.error("Delete failed for %s: %s", public_id, e, exc_info=True)
            raise UpstreamError.from_exception(e) from e
        logger.info("Delete result for %s: %s", public_id, result)
        return dict(result)
