"""
Media directory service: the asset collection as a live view of the
uploads directory.

Every call scans or touches the filesystem directly; nothing is cached, so
results always reflect the directory at call time. Concurrent writes or
deletes may or may not be observed by a listing already in progress.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from core.exceptions import NotFoundError
from core.helpers import join_url
from core.services import BaseService, ServiceResult
from media.assets import AssetListing
from media.validators import INVALID_FILENAME_MESSAGE, is_listable, validate_stored_filename

if TYPE_CHECKING:
    from pathlib import Path

    from media.conf import MediaSettings


class MediaDirectoryService(BaseService):
    """
    Lists, resolves and deletes stored assets.

    Usage:
        service = MediaDirectoryService(get_media_settings())
        result = service.list_assets()
        result = service.delete_asset("images-1718035200123-482913377.png")
    """

    def __init__(self, media_settings: MediaSettings) -> None:
        self.settings = media_settings

    @property
    def uploads_dir(self) -> Path:
        return self.settings.uploads_dir

    def build_url(self, filename: str) -> str:
        """Public URL of a stored file: <base>/uploads/<filename>."""
        return join_url(self.settings.public_base_url, self.settings.url_path, filename)

    def list_assets(self) -> ServiceResult[list[AssetListing]]:
        """
        Enumerate image files in the uploads directory.

        Order follows filesystem enumeration and is not guaranteed.
        A missing directory lists as empty.

        Returns:
            ServiceResult with one AssetListing per image file
        """
        try:
            with os.scandir(self.uploads_dir) as entries:
                names = [
                    entry.name
                    for entry in entries
                    if entry.is_file()
                    and is_listable(entry.name, self.settings.allowed_extensions)
                ]
        except FileNotFoundError:
            return ServiceResult.success([])
        except OSError as e:
            return self.handle_exception(
                e,
                "Failed to list media",
                "MEDIA_LIST_FAILED",
                context={"uploads_dir": str(self.uploads_dir)},
            )

        return ServiceResult.success(
            [AssetListing(filename=name, url=self.build_url(name)) for name in names]
        )

    def resolve(self, filename: str) -> Path | None:
        """
        Map a client-supplied filename to an existing stored file.

        Returns:
            Path of the file, or None if the name is invalid or absent
        """
        if not validate_stored_filename(filename):
            return None
        path = self.uploads_dir / filename
        return path if path.is_file() else None

    def delete_asset(self, filename: str) -> ServiceResult[None]:
        """
        Delete a stored file by name.

        The name is validated before the filesystem is touched. Concurrent
        deletes of the same name resolve through unlink: one caller succeeds,
        the other gets FILE_NOT_FOUND.

        Returns:
            Success, or INVALID_FILENAME / FILE_NOT_FOUND / MEDIA_DELETE_FAILED
        """
        if not validate_stored_filename(filename):
            self.get_logger().warning(f"Delete rejected: invalid filename {filename!r}")
            return ServiceResult.failure(INVALID_FILENAME_MESSAGE, error_code="INVALID_FILENAME")

        try:
            os.unlink(self.uploads_dir / filename)
        except FileNotFoundError:
            return ServiceResult.failure(
                "File not found",
                error_code="FILE_NOT_FOUND",
                error_class=NotFoundError,
            )
        except OSError as e:
            return self.handle_exception(
                e,
                "Failed to delete media",
                "MEDIA_DELETE_FAILED",
                context={"asset_filename": filename},
            )

        self.get_logger().info(f"Deleted {filename}")
        return ServiceResult.success(None)
