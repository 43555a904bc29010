"""
Tests for MediaDirectoryService.

These tests verify:
- Listing reflects the uploads directory at call time
- Only image files are listed
- Deletion validates the name before touching the filesystem
- Filesystem faults are reported generically
"""

import pytest

from core.exceptions import InternalError, NotFoundError, ValidationError
from media.services import MediaDirectoryService


@pytest.fixture
def service(media_settings):
    return MediaDirectoryService(media_settings)


class TestBuildUrl:
    """Tests for build_url."""

    def test_joins_base_and_uploads_path(self, service):
        assert service.build_url("a.png") == "http://testserver/uploads/a.png"

    def test_empty_base_is_root_relative(self, media_settings):
        service = MediaDirectoryService(media_settings.with_overrides(public_base_url=""))

        assert service.build_url("a.png") == "/uploads/a.png"


class TestListAssets:
    """Tests for list_assets."""

    def test_missing_directory_lists_empty(self, service, uploads_dir):
        assert not uploads_dir.exists()

        result = service.list_assets()

        assert result.success is True
        assert result.data == []

    def test_lists_only_image_files(self, service, uploads_dir):
        uploads_dir.mkdir()
        (uploads_dir / "images-1-1.png").write_bytes(b"png")
        (uploads_dir / "images-1-2.JPG").write_bytes(b"jpg")
        (uploads_dir / "notes.txt").write_text("hello")
        (uploads_dir / "folder.png").mkdir()

        result = service.list_assets()

        listed = sorted(asset.to_dict()["filename"] for asset in result.data)
        assert listed == ["images-1-1.png", "images-1-2.JPG"]

    def test_listing_includes_urls(self, service, uploads_dir):
        uploads_dir.mkdir()
        (uploads_dir / "a.webp").write_bytes(b"x")

        [asset] = service.list_assets().data

        assert asset.url == "http://testserver/uploads/a.webp"

    def test_listing_is_live(self, service, uploads_dir):
        uploads_dir.mkdir()
        assert service.list_assets().data == []

        (uploads_dir / "late.gif").write_bytes(b"gif")

        assert [a.filename for a in service.list_assets().data] == ["late.gif"]

    def test_unreadable_directory_is_internal_failure(self, media_settings, tmp_path):
        not_a_dir = tmp_path / "file-instead-of-dir"
        not_a_dir.write_text("x")
        service = MediaDirectoryService(media_settings.with_overrides(uploads_dir=not_a_dir))

        result = service.list_assets()

        assert result.success is False
        assert result.error == "Failed to list media"
        assert result.error_code == "MEDIA_LIST_FAILED"
        assert result.error_class is InternalError


class TestDeleteAsset:
    """Tests for delete_asset."""

    def test_deletes_existing_file(self, service, uploads_dir):
        uploads_dir.mkdir()
        target = uploads_dir / "a.png"
        target.write_bytes(b"x")

        result = service.delete_asset("a.png")

        assert result.success is True
        assert not target.exists()

    def test_missing_file_is_not_found(self, service, uploads_dir):
        uploads_dir.mkdir()

        result = service.delete_asset("ghost.png")

        assert result.success is False
        assert result.error == "File not found"
        assert result.error_code == "FILE_NOT_FOUND"
        assert result.error_class is NotFoundError

    def test_second_delete_is_not_found(self, service, uploads_dir):
        uploads_dir.mkdir()
        (uploads_dir / "a.png").write_bytes(b"x")

        assert service.delete_asset("a.png").success is True
        assert service.delete_asset("a.png").error_code == "FILE_NOT_FOUND"

    @pytest.mark.parametrize("filename", ["../etc/passwd", "..", "a/b.png", "", "a b.png"])
    def test_unsafe_name_is_rejected(self, service, filename):
        result = service.delete_asset(filename)

        assert result.success is False
        assert result.error == "Invalid filename"
        assert result.error_code == "INVALID_FILENAME"
        assert result.error_class is ValidationError

    def test_traversal_never_reaches_outside_file(self, service, uploads_dir, tmp_path):
        uploads_dir.mkdir()
        outside = tmp_path / "secret.png"
        outside.write_bytes(b"secret")

        service.delete_asset("../secret.png")

        assert outside.exists()

    def test_filesystem_fault_is_internal_failure(self, service, uploads_dir):
        uploads_dir.mkdir()
        (uploads_dir / "folder.png").mkdir()

        result = service.delete_asset("folder.png")

        assert result.success is False
        assert result.error == "Failed to delete media"
        assert result.error_code == "MEDIA_DELETE_FAILED"
        assert result.error_class is InternalError


class TestResolve:
    """Tests for resolve."""

    def test_existing_file(self, service, uploads_dir):
        uploads_dir.mkdir()
        (uploads_dir / "a.png").write_bytes(b"x")

        assert service.resolve("a.png") == uploads_dir / "a.png"

    def test_missing_or_invalid(self, service, uploads_dir):
        uploads_dir.mkdir()
        (uploads_dir / "folder.png").mkdir()

        assert service.resolve("ghost.png") is None
        assert service.resolve("../a.png") is None
        assert service.resolve("folder.png") is None
