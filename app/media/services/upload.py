"""
Upload pipeline: validate a batch of uploaded images, then store it.

The pipeline is all-or-nothing:
    1. Reject files sent under an unexpected multipart field
    2. Reject the batch if it holds more than max_files files
    3. Run every file through the upload filter, then the size limit
    4. Only when every file passed, write each under a generated name

If a write fails part-way, files already written for the same batch are
removed again, so a failed request never leaves stored files behind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.core.files.storage import FileSystemStorage

from core.exceptions import InternalError
from core.helpers import join_url
from core.services import BaseService, ServiceResult
from media.assets import Asset
from media.naming import generate_filename
from media.validators import UploadFilter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from django.core.files.uploadedfile import UploadedFile
    from django.utils.datastructures import MultiValueDict

    from media.conf import MediaSettings


class MediaUploadService(BaseService):
    """
    Stores uploaded images in the flat uploads directory.

    Usage:
        service = MediaUploadService(get_media_settings())
        result = service.upload_from_multipart(request.FILES)
        result.raise_for_error()
        return Response({"status": "success", "data": [a.to_dict() for a in result.data]})
    """

    def __init__(
        self,
        media_settings: MediaSettings,
        upload_filter: UploadFilter | None = None,
    ) -> None:
        self.settings = media_settings
        self.upload_filter = upload_filter or UploadFilter(media_settings.allowed_extensions)
        self.storage = FileSystemStorage(
            location=str(media_settings.uploads_dir),
            file_permissions_mode=0o644,
        )

    def upload_from_multipart(
        self,
        files: MultiValueDict,
        field_name: str | None = None,
        max_files: int | None = None,
    ) -> ServiceResult[list[Asset]]:
        """
        Run the pipeline on a request's parsed multipart files.

        Args:
            files: request.FILES
            field_name: Expected field (defaults to the batch upload field)
            max_files: Count limit (defaults to the configured limit)

        Returns:
            ServiceResult with the stored assets, or the first failure
        """
        field_name = field_name or self.settings.upload_field
        unexpected = sorted(key for key in files.keys() if key != field_name)
        if unexpected:
            self.get_logger().warning(
                f"Upload rejected: unexpected file field(s) {unexpected}",
                extra={"expected_field": field_name},
            )
            return ServiceResult.failure(
                f"Unexpected file field. Upload files under '{field_name}'.",
                error_code="UNEXPECTED_FIELD",
            )
        return self.upload(files.getlist(field_name), field_name=field_name, max_files=max_files)

    def upload(
        self,
        files: Sequence[UploadedFile],
        field_name: str | None = None,
        max_files: int | None = None,
    ) -> ServiceResult[list[Asset]]:
        """
        Validate and store a batch of files.

        Args:
            files: Uploaded files, in request order
            field_name: Field the files arrived under (prefixes generated names)
            max_files: Count limit (defaults to the configured limit)

        Returns:
            ServiceResult with one Asset per stored file
        """
        field_name = field_name or self.settings.upload_field
        max_files = self.settings.max_files if max_files is None else max_files

        validation = self.validate_batch(files, max_files)
        if not validation:
            return validation

        stored: list[Asset] = []
        for file in files:
            try:
                stored.append(self._store(file, field_name))
            except Exception as e:
                self._discard(stored)
                return self.handle_exception(
                    e,
                    "Failed to upload media",
                    "MEDIA_UPLOAD_FAILED",
                    context={
                        "original_name": file.name,
                        "stored_before_failure": len(stored),
                    },
                )

        self.get_logger().info(
            f"Stored {len(stored)} uploaded file(s)",
            extra={"stored_files": [asset.filename for asset in stored]},
        )
        return ServiceResult.success(stored)

    def validate_batch(
        self, files: Sequence[UploadedFile], max_files: int
    ) -> ServiceResult[None]:
        """
        Check count, type and size of every file without touching disk.

        Returns:
            Success, or the first failure found (count first, then per file:
            type, then size)
        """
        if len(files) > max_files:
            return self.too_many_files(max_files, received=len(files))

        for file in files:
            verdict = self.upload_filter.check(file)
            if not verdict.is_valid:
                self.get_logger().warning(
                    f"Upload rejected: {file.name!r} declared as {verdict.mime_type!r}",
                    extra={"error_code": verdict.error_code},
                )
                return ServiceResult.failure(verdict.error, error_code=verdict.error_code)

            if file.size > self.settings.max_file_size:
                self.get_logger().warning(
                    f"Upload rejected: {file.name!r} is {file.size} bytes",
                    extra={"max_file_size": self.settings.max_file_size},
                )
                return ServiceResult.failure(
                    f"File too large. Maximum size is {self.settings.max_file_size_mb}MB.",
                    error_code="FILE_TOO_LARGE",
                )

        return ServiceResult.success(None)

    def too_many_files(
        self, max_files: int | None = None, received: int | None = None
    ) -> ServiceResult:
        """
        Failure for a request carrying more files than allowed.

        Also used when the multipart parser itself refuses the request for
        exceeding DATA_UPLOAD_MAX_NUMBER_FILES, in which case the count is
        unknown.
        """
        max_files = self.settings.max_files if max_files is None else max_files
        self.get_logger().warning(
            f"Upload rejected: {received if received is not None else 'too many'} "
            f"files exceeds limit of {max_files}"
        )
        noun = "file" if max_files == 1 else "files"
        return ServiceResult.failure(
            f"Too many files. Maximum is {max_files} {noun}.",
            error_code="TOO_MANY_FILES",
        )

    def _store(self, file: UploadedFile, field_name: str) -> Asset:
        """Write one validated file under a generated name."""
        filename = self.storage.save(generate_filename(file.name, field_name), file)
        stored_path = self.settings.uploads_dir / filename
        if not stored_path.is_file():
            raise InternalError(f"Stored file missing after write: {filename}")
        return Asset(
            filename=filename,
            original_name=file.name,
            mime_type=file.content_type,
            size_bytes=file.size,
            stored_path=stored_path,
            url=join_url(self.settings.public_base_url, self.settings.url_path, filename),
        )

    def _discard(self, assets: list[Asset]) -> None:
        """Remove files written earlier in a batch that failed."""
        for asset in assets:
            try:
                self.storage.delete(asset.filename)
            except OSError:
                self.get_logger().exception(
                    f"Could not remove partially uploaded file {asset.filename}"
                )
