"""FastAPI dependency injection: Cloudinary asset client."""

from typing import Annotated

from fastapi import Depends

from media_api.config import get_settings
from media_api.services.cloudinary_service import CloudinaryAssetClient


def get_asset_client() -> CloudinaryAssetClient:
    """Client for video resources; SDK credentials are set once in the app lifespan."""
    settings = get_settings()
    return CloudinaryAssetClient(max_results=settings.video_search_max_results)


AssetClient = Annotated[CloudinaryAssetClient, Depends(get_asset_client)]
