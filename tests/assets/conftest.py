"""
Assets Test Configuration and Fixtures

This file contains pytest fixtures shared across the assets tests.

To use pytest:
    pip install -e ".[test]"
    pytest tests/assets/
"""

import io

import pytest

from assets.controllers.upload_orchestrator import UploadOrchestrator
from assets.implementations.mock_clock import MockClock
from assets.implementations.mock_transport import MockTransport
from assets.models.media_source import MediaSource

API_BASE = "https://api.linkedin.test/v2"
ASSET_ENTITY = "urn:li:digitalmediaAsset:123"
OWNER = "urn:li:organization:5590506"

# Smallest header filetype recognizes as PNG
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 64

SIGNED_HEADERS = {
    "Content-Type": "application/octet-stream",
    "x-amz-server-side-encryption": "aws:kms",
    "x-amz-server-side-encryption-aws-kms-key-id": "arn:aws:kms:us-east-1:1:key/abc",
}


# =============================================================================
# TRANSPORT AND CLOCK FIXTURES
# =============================================================================


@pytest.fixture
def mock_transport():
    """
    Provide a MockTransport whose first poll reports AVAILABLE.

    Usage:
        def test_something(mock_transport):
            mock_transport.statuses = ["PROCESSING", "AVAILABLE"]
    """
    return MockTransport(asset_entity=ASSET_ENTITY)


@pytest.fixture
def mock_clock():
    """Provide a virtual clock starting at t=0"""
    return MockClock()


@pytest.fixture
def make_orchestrator(mock_clock):
    """
    Build an orchestrator around a transport with a virtual clock.

    Usage:
        def test_upload(make_orchestrator):
            orchestrator = make_orchestrator(MockTransport(...))
    """

    def _make(transport, poll_interval=5, poll_timeout=300, clock=mock_clock):
        return UploadOrchestrator(
            transport=transport,
            api_base=API_BASE,
            poll_interval=poll_interval,
            poll_timeout=poll_timeout,
            clock=clock,
        )

    return _make


# =============================================================================
# MEDIA FIXTURES
# =============================================================================


@pytest.fixture
def png_bytes():
    """Raw PNG header bytes"""
    return PNG_BYTES


@pytest.fixture
def png_file(tmp_path):
    """Create a small PNG file on disk"""
    path = tmp_path / "photo.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def png_source():
    """In-memory PNG source with a URL-style URI"""
    source = MediaSource(io.BytesIO(PNG_BYTES), uri="https://cdn.test/media/photo.png")
    yield source
    source.close()
