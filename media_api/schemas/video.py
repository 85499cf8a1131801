"""Video listing schemas and the Cloudinary-to-view mapping."""

from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

UPLOAD_MARKER = "/upload/"
THUMBNAIL_TRANSFORMATION = "w_400,h_300,c_fill"


class AssetContext(BaseModel):
    model_config = ConfigDict(extra="ignore")

    custom: Optional[dict[str, Any]] = None


class RawAsset(BaseModel):
    """Cloudinary resource record as returned by the search API."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    public_id: str
    secure_url: str
    context: Optional[AssetContext] = None
    created_at: Optional[str] = None
    duration: Optional[Union[int, float]] = None
    byte_size: Optional[int] = Field(None, alias="bytes")
    format: Optional[str] = None

    @property
    def caption(self) -> Optional[str]:
        """Custom caption from context metadata; None when missing or empty."""
        if self.context is None or not self.context.custom:
            return None
        caption = self.context.custom.get("caption")
        if not caption:
            return None
        return str(caption)


class AssetView(BaseModel):
    id: str
    title: str
    url: str
    thumbnail: str
    publicId: str
    createdAt: Optional[str] = None
    durationSeconds: Union[int, float] = 0
    byteSize: Optional[int] = None
    format: Optional[str] = None


class VideoListResponse(BaseModel):
    success: bool = True
    videos: list[AssetView]


class VideoDeleteResponse(BaseModel):
    success: bool = True
    result: dict[str, Any]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


def derive_title(raw: RawAsset) -> str:
    """Caption if set, else the last path segment of public_id with underscores as spaces."""
    caption = raw.caption
    if caption:
        return caption
    return raw.public_id.split("/")[-1].replace("_", " ")


def derive_thumbnail(url: str) -> str:
    """
    Insert the 400x300 fill-crop transformation right after /upload/.
    URLs without the marker are returned unchanged; with several markers only
    the first one gets the transformation.
    """
    head, marker, tail = url.partition(UPLOAD_MARKER)
    if not marker:
        return url
    return f"{head}{marker}{THUMBNAIL_TRANSFORMATION}/{tail}"


def asset_to_view(raw: Union[RawAsset, Mapping[str, Any]]) -> AssetView:
    if not isinstance(raw, RawAsset):
        raw = RawAsset.model_validate(raw)
    return AssetView(
        id=raw.public_id,
        title=derive_title(raw),
        url=raw.secure_url,
        thumbnail=derive_thumbnail(raw.secure_url),
        publicId=raw.public_id,
        createdAt=raw.created_at,
        durationSeconds=raw.duration or 0,
        byteSize=raw.byte_size,
        format=raw.format,
    )


def normalize_assets(resources: Iterable[Union[RawAsset, Mapping[str, Any]]]) -> list[AssetView]:
    """Map search results to views, preserving order and length."""
    return [asset_to_view(r) for r in resources]
