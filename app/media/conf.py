"""
Immutable media configuration.

MediaSettings is built once from Django settings and handed explicitly to the
namer, upload filter, upload service and directory service. Nothing in the
media app reads django.conf.settings after construction.

Usage:
    from media.conf import get_media_settings

    media_settings = get_media_settings()
    service = MediaUploadService(media_settings)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path

from django.conf import settings

ALLOWED_IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {"png", "jpg", "jpeg", "gif", "webp", "svg"}
)

_API_SUFFIX_RE = re.compile(r"/api/?$")


def normalize_public_base_url(url: str) -> str:
    """
    Strip a trailing /api (or /api/) suffix and trailing slashes.

    Example:
        normalize_public_base_url("https://api.example.com/api/")  # "https://api.example.com"
    """
    return _API_SUFFIX_RE.sub("", (url or "").strip()).rstrip("/")


@dataclass(frozen=True)
class MediaSettings:
    """
    Configuration for the media pipeline.

    Attributes:
        uploads_dir: Flat directory holding every stored asset
        public_base_url: Base URL for asset links, without /api suffix
        url_path: Path segment under which assets are publicly served
        max_file_size: Per-file size limit in bytes
        max_files: Maximum number of files per upload request
        upload_field: Multipart field carrying batch uploads
        single_upload_field: Multipart field carrying single uploads
        allowed_extensions: Lower-case extensions considered images
    """

    uploads_dir: Path
    public_base_url: str = ""
    url_path: str = "uploads"
    max_file_size: int = 5 * 1024 * 1024
    max_files: int = 5
    upload_field: str = "images"
    single_upload_field: str = "image"
    allowed_extensions: frozenset[str] = ALLOWED_IMAGE_EXTENSIONS

    @classmethod
    def from_settings(cls) -> MediaSettings:
        """Build from the active Django settings."""
        return cls(
            uploads_dir=Path(settings.MEDIA_UPLOADS_DIR),
            public_base_url=normalize_public_base_url(settings.BACKEND_URL),
            max_file_size=settings.MEDIA_MAX_FILE_SIZE,
            max_files=settings.MEDIA_MAX_FILES,
        )

    @property
    def max_file_size_mb(self) -> int:
        return self.max_file_size // (1024 * 1024)

    def with_overrides(self, **changes) -> MediaSettings:
        """Return a copy with some fields replaced."""
        return replace(self, **changes)


@lru_cache(maxsize=1)
def get_media_settings() -> MediaSettings:
    """Return the process-wide MediaSettings, built on first call."""
    return MediaSettings.from_settings()
