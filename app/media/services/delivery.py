"""
Public asset delivery.

Serves stored files at /uploads/<filename> to anyone, without
authentication. Responses carry Cross-Origin-Resource-Policy: cross-origin
so pages on other origins can embed the images.

Name validation happens before any filesystem access; invalid and absent
names are indistinguishable to the client (both 404).
"""

from __future__ import annotations

import mimetypes
from typing import TYPE_CHECKING

from django.http import FileResponse, Http404

from media.services.directory import MediaDirectoryService

if TYPE_CHECKING:
    from media.conf import MediaSettings


class PublicAssetDelivery:
    """Build file responses for stored assets."""

    cors_resource_policy = "cross-origin"
    default_content_type = "application/octet-stream"

    def __init__(self, media_settings: MediaSettings) -> None:
        self.directory = MediaDirectoryService(media_settings)

    def serve_file_response(self, filename: str) -> FileResponse:
        """
        Create a streaming response for a stored file.

        Raises:
            Http404: If the name is invalid or no such file is stored
        """
        path = self.directory.resolve(filename)
        if path is None:
            raise Http404("File not found")

        try:
            stream = path.open("rb")
        except FileNotFoundError:
            # Deleted between resolve and open
            raise Http404("File not found") from None

        content_type, _ = mimetypes.guess_type(path.name)
        response = FileResponse(
            stream,
            content_type=content_type or self.default_content_type,
        )
        response["Cross-Origin-Resource-Policy"] = self.cors_resource_policy
        response["Content-Disposition"] = f'inline; filename="{path.name}"'
        return response
