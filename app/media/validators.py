"""
Media upload and filename validators.

Provides:
- UploadFilter: accept/reject decision for an incoming file before any bytes
  are written
- validate_stored_filename: strict allowlist for names addressed by clients
- is_listable: extension allowlist applied when listing the uploads directory

Error messages here are client-safe and rendered verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from media.conf import ALLOWED_IMAGE_EXTENSIONS
from media.naming import get_extension

if TYPE_CHECKING:
    from collections.abc import Iterable

    from django.core.files.uploadedfile import UploadedFile


# =============================================================================
# Configuration
# =============================================================================

NOT_AN_IMAGE_MESSAGE = "Not an image! Please upload an image."
INVALID_FILENAME_MESSAGE = "Invalid filename"

IMAGE_CONTENT_TYPE_PREFIX = "image/"

_STORED_FILENAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class FilterResult:
    """Result of running the upload filter on one file.

    Attributes:
        is_valid: Whether the file may be stored.
        mime_type: Declared content type of the file.
        extension: Lower-cased extension the stored file will carry.
        error: Human-readable error message if rejected.
        error_code: Machine-readable error code if rejected.
    """

    is_valid: bool
    mime_type: str | None = None
    extension: str | None = None
    error: str | None = None
    error_code: str | None = None


# =============================================================================
# Validator Class
# =============================================================================


class UploadFilter:
    """Accepts only image uploads.

    A file passes when its declared content type starts with ``image/`` and
    its extension is one the directory listing recognises, so every stored
    file is also listed.

    Example:
        upload_filter = UploadFilter()
        result = upload_filter.check(uploaded_file)
        if not result.is_valid:
            print(result.error)
    """

    def __init__(self, allowed_extensions: Iterable[str] | None = None) -> None:
        self._allowed_extensions = frozenset(
            allowed_extensions if allowed_extensions is not None else ALLOWED_IMAGE_EXTENSIONS
        )

    def check(self, file: UploadedFile) -> FilterResult:
        """Decide whether a single uploaded file is acceptable.

        Args:
            file: Uploaded file exposing ``name`` and ``content_type``.

        Returns:
            FilterResult describing the decision.
        """
        mime_type = (getattr(file, "content_type", None) or "").lower()
        extension = get_extension(getattr(file, "name", "") or "")

        if not mime_type.startswith(IMAGE_CONTENT_TYPE_PREFIX):
            return FilterResult(
                is_valid=False,
                mime_type=mime_type or None,
                extension=extension,
                error=NOT_AN_IMAGE_MESSAGE,
                error_code="NOT_AN_IMAGE",
            )

        if extension not in self._allowed_extensions:
            return FilterResult(
                is_valid=False,
                mime_type=mime_type,
                extension=extension,
                error=NOT_AN_IMAGE_MESSAGE,
                error_code="NOT_AN_IMAGE",
            )

        return FilterResult(is_valid=True, mime_type=mime_type, extension=extension)


# =============================================================================
# Convenience Functions
# =============================================================================


def validate_stored_filename(filename: str) -> bool:
    """Check that a client-addressed filename is a plain, flat name.

    Letters, digits, underscore, hyphen and dot only; "." and ".." are
    rejected, so no path separator or traversal can reach the filesystem.
    """
    if not filename or filename in {".", ".."}:
        return False
    return bool(_STORED_FILENAME_RE.fullmatch(filename))


def is_listable(filename: str, allowed_extensions: Iterable[str] | None = None) -> bool:
    """Check whether a directory entry is an image by extension (case-insensitive)."""
    allowed = ALLOWED_IMAGE_EXTENSIONS if allowed_extensions is None else allowed_extensions
    _, dot, ext = filename.rpartition(".")
    return bool(dot) and ext.lower() in allowed
