"""
Asset Model Tests

Tests cover:
1. Asset id extraction from entity URNs
2. Defensive decoding of registration and status responses
3. MediaSource behaviour (size, peek, names, closing, download)
"""

import io

import pytest

from assets.constants import UPLOAD_MECHANISM, AssetStatus
from assets.exceptions import ResponseDecodeError
from assets.models import media_source as media_source_module
from assets.models.asset import (
    AssetStatusResponse,
    RegisteredUpload,
    UploadHeaders,
    asset_id_from_entity,
)
from assets.models.media_source import MediaSource, open_media_source

# =============================================================================
# ASSET ENTITY
# =============================================================================


class TestAssetEntity:
    def test_numeric_suffix(self):
        assert asset_id_from_entity("urn:li:digitalmediaAsset:123") == "123"

    def test_opaque_suffix(self):
        assert asset_id_from_entity("urn:li:digitalmediaAsset:C5522AQHn46") == "C5522AQHn46"


# =============================================================================
# RESPONSE DECODING
# =============================================================================


class TestRegisteredUpload:
    def test_snake_case_upload_url_and_headers(self):
        payload = {
            "value": {
                "asset": "urn:li:digitalmediaAsset:5",
                "uploadMechanism": {
                    UPLOAD_MECHANISM: {
                        "upload_url": "https://upload.test/5",
                        "headers": {
                            "content_type": "image/png",
                            "x_amz_server_side_encryption": "AES256",
                        },
                    },
                },
            },
        }

        registered = RegisteredUpload.from_dict(payload)

        assert registered.destination.upload_url == "https://upload.test/5"
        assert registered.destination.headers == UploadHeaders(
            content_type="image/png",
            x_amz_server_side_encryption="AES256",
        )

    def test_other_mechanism_only_is_an_error(self):
        payload = {
            "value": {
                "asset": "urn:li:digitalmediaAsset:5",
                "uploadMechanism": {"com.example.Other": {"uploadUrl": "x"}},
            },
        }

        with pytest.raises(ResponseDecodeError):
            RegisteredUpload.from_dict(payload)

    def test_non_object_payload(self):
        with pytest.raises(ResponseDecodeError):
            RegisteredUpload.from_dict(["not", "an", "object"])


class TestAssetStatusResponse:
    def test_unknown_fields_ignored(self):
        response = AssetStatusResponse.from_dict(
            {
                "recipes": [{"status": "AVAILABLE", "recipe": "r", "extra": 1}],
                "serviceRelationships": [],
                "mediaTypeFamily": "VIDEO",
            },
        )

        assert response.asset_status is AssetStatus.AVAILABLE
        assert response.media_type_family == "VIDEO"
        assert "serviceRelationships" in response.raw

    def test_unknown_status_value(self):
        response = AssetStatusResponse.from_dict({"recipes": [{"status": "NEW_STATE"}]})

        assert response.status == "NEW_STATE"
        assert response.asset_status is None

    def test_empty_status_is_unrecognized(self):
        response = AssetStatusResponse.from_dict({"recipes": [{"status": ""}]})

        assert response.status == ""
        assert response.asset_status is None

    def test_only_first_recipe_needs_a_status(self):
        response = AssetStatusResponse.from_dict(
            {
                "recipes": [
                    {"recipe": "r1", "status": "AVAILABLE"},
                    {"recipe": "r2"},
                    "unexpected",
                ],
            },
        )

        assert response.asset_status is AssetStatus.AVAILABLE
        assert response.recipes[1].status is None
        assert response.recipes[1].recipe == "r2"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"recipes": []},
            {"recipes": "AVAILABLE"},
            {"recipes": [{"recipe": "r"}]},
            {"recipes": [{"status": None}]},
            {"recipes": ["AVAILABLE"]},
        ],
    )
    def test_missing_status_is_an_error(self, payload):
        with pytest.raises(ResponseDecodeError):
            AssetStatusResponse.from_dict(payload)


# =============================================================================
# MEDIA SOURCE
# =============================================================================


class TestMediaSource:
    def test_from_path(self, png_file, png_bytes):
        with MediaSource.from_path(png_file) as source:
            assert source.filename == "photo.png"
            assert source.size == len(png_bytes)
            assert source.uri.startswith("file://")

        assert source.closed

    def test_open_file_url(self, png_file):
        with MediaSource.open(png_file.as_uri()) as source:
            assert source.filename == "photo.png"

    def test_peek_and_size_preserve_position(self, png_bytes):
        source = MediaSource(io.BytesIO(png_bytes), uri="https://cdn.test/a.png")
        source.stream.seek(3)

        assert source.peek(4) == png_bytes[:4]
        assert source.size == len(png_bytes)
        assert source.stream.tell() == 3

    def test_rewind(self, png_bytes):
        source = MediaSource(io.BytesIO(png_bytes), uri="https://cdn.test/a.png")
        source.stream.read()

        assert source.rewind().read() == png_bytes

    def test_filename_ignores_query(self):
        source = MediaSource(io.BytesIO(b""), uri="https://cdn.test/a/b%20c.jpg?x=1")

        assert source.filename == "b c.jpg"

    def test_open_media_source_passes_through_open_source(self, png_source):
        assert open_media_source(png_source) is png_source

    def test_from_url_downloads_without_credentials(self, monkeypatch, png_bytes):
        calls = {}

        class FakeResponse:
            def __enter__(self):
                return self

            def __exit__(self, *exc_info):
                return False

            def raise_for_status(self):
                pass

            def iter_content(self, chunk_size):
                yield png_bytes[:10]
                yield png_bytes[10:]

        def fake_get(url, **kwargs):
            calls["url"] = url
            calls["kwargs"] = kwargs
            return FakeResponse()

        monkeypatch.setattr(media_source_module.requests, "get", fake_get)

        with MediaSource.open("https://cdn.test/media/photo.png", timeout=7) as source:
            assert source.rewind().read() == png_bytes
            assert source.filename == "photo.png"

        assert calls["url"] == "https://cdn.test/media/photo.png"
        assert calls["kwargs"]["timeout"] == 7
        assert "headers" not in calls["kwargs"]
