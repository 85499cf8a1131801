"""Tests for mapping Cloudinary records to the frontend video view."""

import copy

from media_api.schemas.video import (
    RawAsset,
    asset_to_view,
    derive_thumbnail,
    derive_title,
    normalize_assets,
)
from tests.fakes import make_resource


class TestDeriveTitle:
    """Title comes from the caption, else from the public id."""

    def test_uses_last_segment_with_spaces(self):
        raw = RawAsset.model_validate(make_resource("folder/my_clip"))
        assert derive_title(raw) == "my clip"

    def test_replaces_every_underscore(self):
        raw = RawAsset.model_validate(make_resource("a/b/summer_trip_day_2"))
        assert derive_title(raw) == "summer trip day 2"

    def test_id_without_folder(self):
        raw = RawAsset.model_validate(make_resource("intro_video"))
        assert derive_title(raw) == "intro video"

    def test_caption_used_verbatim(self):
        raw = RawAsset.model_validate(make_resource("folder/my_clip", caption="  My_Caption "))
        assert derive_title(raw) == "  My_Caption "

    def test_empty_caption_falls_back(self):
        raw = RawAsset.model_validate(make_resource("folder/my_clip", caption=""))
        assert derive_title(raw) == "my clip"

    def test_context_without_custom_falls_back(self):
        raw = RawAsset.model_validate(make_resource("folder/my_clip", context={}))
        assert raw.caption is None
        assert derive_title(raw) == "my clip"

    def test_custom_without_caption_falls_back(self):
        raw = RawAsset.model_validate(
            make_resource("folder/my_clip", context={"custom": {"alt": "x"}})
        )
        assert derive_title(raw) == "my clip"


class TestDeriveThumbnail:
    """Thumbnail inserts the crop transformation after /upload/."""

    def test_inserts_transformation(self):
        url = "https://res.cloudinary.com/demo/video/upload/v123/folder/clip.mp4"
        thumb = derive_thumbnail(url)
        assert "/upload/w_400,h_300,c_fill/v123/folder/clip.mp4" in thumb
        assert thumb.startswith("https://res.cloudinary.com/demo/video")

    def test_without_marker_returns_url_unchanged(self):
        url = "https://cdn.example.com/videos/clip.mp4"
        assert derive_thumbnail(url) == url

    def test_multiple_markers_only_first_transformed(self):
        url = "https://res.cloudinary.com/demo/video/upload/v1/upload/clip.mp4"
        thumb = derive_thumbnail(url)
        assert thumb == "https://res.cloudinary.com/demo/video/upload/w_400,h_300,c_fill/v1/upload/clip.mp4"

    def test_empty_url(self):
        assert derive_thumbnail("") == ""


class TestAssetToView:
    """Single record mapping."""

    def test_copies_fields(self):
        view = asset_to_view(make_resource("folder/my_clip"))
        assert view.id == "folder/my_clip"
        assert view.publicId == "folder/my_clip"
        assert view.url == "https://res.cloudinary.com/demo/video/upload/v123/folder/my_clip.mp4"
        assert view.createdAt == "2024-05-01T10:00:00Z"
        assert view.durationSeconds == 12.5
        assert view.byteSize == 204800
        assert view.format == "mp4"

    def test_duration_defaults_to_zero_when_missing(self):
        resource = make_resource()
        del resource["duration"]
        assert asset_to_view(resource).durationSeconds == 0

    def test_duration_defaults_to_zero_when_null(self):
        assert asset_to_view(make_resource(duration=None)).durationSeconds == 0

    def test_accepts_raw_asset_instance(self):
        raw = RawAsset.model_validate(make_resource(caption="Demo"))
        assert asset_to_view(raw).title == "Demo"

    def test_serializes_camel_case_keys(self):
        data = asset_to_view(make_resource()).model_dump()
        assert set(data) == {
            "id",
            "title",
            "url",
            "thumbnail",
            "publicId",
            "createdAt",
            "durationSeconds",
            "byteSize",
            "format",
        }


class TestNormalizeAssets:
    """Whole result set mapping."""

    def test_preserves_length_and_order(self):
        resources = [make_resource(f"folder/clip_{i}") for i in range(5)]
        views = normalize_assets(resources)
        assert len(views) == 5
        assert [v.id for v in views] == [r["public_id"] for r in resources]

    def test_empty_input(self):
        assert normalize_assets([]) == []

    def test_does_not_mutate_input(self):
        resources = [make_resource(caption="Demo"), make_resource("x/y_z")]
        snapshot = copy.deepcopy(resources)
        normalize_assets(resources)
        assert resources == snapshot

    def test_same_input_gives_same_output(self):
        resources = [make_resource("a/one"), make_resource("b/two", caption="Two")]
        assert normalize_assets(resources) == normalize_assets(resources)


class TestDurationSerialization:
    """Durations keep the numeric type Cloudinary sent."""

    def test_missing_duration_serializes_as_integer_zero(self):
        view = asset_to_view(make_resource(duration=None))
        assert '"durationSeconds":0,' in view.model_dump_json()

    def test_integer_duration_stays_integer(self):
        view = asset_to_view(make_resource(duration=30))
        assert view.durationSeconds == 30
        assert isinstance(view.durationSeconds, int)

    def test_fractional_duration_kept(self):
        assert asset_to_view(make_resource(duration=12.5)).durationSeconds == 12.5
