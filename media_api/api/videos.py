"""Cloudinary video library: list and delete."""

import logging

from fastapi import APIRouter
from pydantic import ValidationError

from media_api.core.exceptions import UpstreamError
from media_api.dependencies import AssetClient
from media_api.schemas.video import (
    ErrorResponse,
    VideoDeleteResponse,
    VideoListResponse,
    normalize_assets,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/cloudinary/videos",
    tags=["videos"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=VideoListResponse)
def list_videos(client: AssetClient):
    """Newest 50 videos mapped to the frontend view shape."""
    resources = client.search_videos()
    try:
        videos = normalize_assets(resources)
    except ValidationError as e:
        logger.error("Malformed Cloudinary record: %s", e)
        raise UpstreamError.from_exception(e) from e
    return VideoListResponse(success=True, videos=videos)


@router.delete("/{publicId:path}", response_model=VideoDeleteResponse)
def delete_video(publicId: str, client: AssetClient):
    """Delete a video by public id (may include folders); Cloudinary's result is passed through."""
    result = client.delete_video(publicId)
    return VideoDeleteResponse(success=True, result=result)
