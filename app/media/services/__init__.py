"""
Media services.

- MediaUploadService: validate and store image uploads
- MediaDirectoryService: list and delete stored assets
- PublicAssetDelivery: serve stored assets publicly
"""

from media.services.delivery import PublicAssetDelivery
from media.services.directory import MediaDirectoryService
from media.services.upload import MediaUploadService

__all__ = [
    "MediaDirectoryService",
    "MediaUploadService",
    "PublicAssetDelivery",
]
