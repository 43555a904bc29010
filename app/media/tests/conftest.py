"""
Test fixtures for media app.

Provides fixtures for:
- An isolated uploads directory per test
- Sample uploads (PNG, JPEG, plain text, oversized)
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from media.conf import get_media_settings

if TYPE_CHECKING:
    from pathlib import Path

    from media.conf import MediaSettings


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def uploads_dir(settings, tmp_path) -> Path:
    """Point the media pipeline at an empty per-test uploads directory."""
    directory = tmp_path / "uploads"
    settings.MEDIA_UPLOADS_DIR = directory
    settings.BACKEND_URL = "http://testserver/api"
    get_media_settings.cache_clear()
    yield directory
    get_media_settings.cache_clear()


@pytest.fixture
def media_settings(uploads_dir: Path) -> MediaSettings:
    """Return MediaSettings for the per-test uploads directory."""
    return get_media_settings()


# =============================================================================
# File Fixtures
# =============================================================================


def _image_bytes(image_format: str, size: tuple[int, int] = (16, 16)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(200, 30, 30)).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def make_upload():
    """
    Factory for uploaded files.

    Usage:
        upload = make_upload("photo.png")
        upload = make_upload("notes.txt", content=b"hi", content_type="text/plain")
    """

    def _make(
        name: str = "photo.png",
        content: bytes | None = None,
        content_type: str = "image/png",
    ) -> SimpleUploadedFile:
        if content is None:
            content = _image_bytes("PNG")
        return SimpleUploadedFile(name, content, content_type=content_type)

    return _make


@pytest.fixture
def png_upload(make_upload) -> SimpleUploadedFile:
    """A small valid PNG image."""
    return make_upload("photo.png")


@pytest.fixture
def jpeg_upload(make_upload) -> SimpleUploadedFile:
    """A small valid JPEG image with an upper-case extension."""
    return make_upload("Holiday.JPG", content=_image_bytes("JPEG"), content_type="image/jpeg")


@pytest.fixture
def text_upload(make_upload) -> SimpleUploadedFile:
    """A plain-text file."""
    return make_upload("notes.txt", content=b"not an image", content_type="text/plain")


@pytest.fixture
def oversized_upload(make_upload) -> SimpleUploadedFile:
    """A 6 MiB file declared as PNG."""
    return make_upload("big.png", content=b"\x89PNG" + b"\0" * (6 * 1024 * 1024))
