"""
Asset value types.

An Asset exists only as a file in the uploads directory; these dataclasses
describe a file at the moment it was stored or listed and are never cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Asset:
    """A file written by the upload pipeline.

    Attributes:
        filename: Generated name, unique within the uploads directory.
        original_name: Client-supplied name. Untrusted, never used as a path.
        mime_type: Declared content type.
        size_bytes: Size of the stored file.
        stored_path: Absolute path of the stored file.
        url: Public URL of the stored file.
    """

    filename: str
    original_name: str
    mime_type: str
    size_bytes: int
    stored_path: Path
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"filename": self.filename, "url": self.url}


@dataclass(frozen=True)
class AssetListing:
    """A listed file: its name and public URL."""

    filename: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"filename": self.filename, "url": self.url}
