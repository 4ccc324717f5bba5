"""Tests for FileSystemAdapter implementation."""

import os
from pathlib import Path
from unittest.mock import mock_open, patch

import pytest

from cibox.adapters.file_adapter import FileSystemAdapter, create_file_adapter
from cibox.core.errors import CiboxError, FileSystemError
from cibox.protocols.file_adapter_protocol import FileAdapterProtocol


@pytest.fixture
def adapter():
    return FileSystemAdapter()


@pytest.fixture
def origin(tmp_path):
    """Source tree with nested files."""
    root = tmp_path / "origin"
    (root / "src" / "lib").mkdir(parents=True)
    (root / "README").write_text("readme\n")
    (root / "src" / "main.txt").write_text("main\n")
    (root / "src" / "lib" / "util.txt").write_text("util\n")
    return root


class TestFileSystemAdapterBasics:
    """Test read, write and listing operations."""

    def test_create_file_adapter(self):
        """The factory returns a protocol implementation."""
        assert isinstance(create_file_adapter(), FileAdapterProtocol)

    def test_write_then_read(self, adapter, tmp_path):
        """write_text creates parent directories."""
        path = tmp_path / "a" / "b" / "file.txt"

        adapter.write_text(path, "content")

        assert adapter.read_text(path) == "content"
        assert adapter.is_file(path)
        assert adapter.is_dir(path.parent)

    def test_read_text_file_not_found(self, adapter):
        """read_text raises FileSystemError when the file doesn't exist."""
        with (
            patch("pathlib.Path.open", side_effect=FileNotFoundError("File not found")),
            pytest.raises(
                FileSystemError,
                match="File operation 'read_text' failed on '/nonexistent/file.txt': File not found",
            ),
        ):
            adapter.read_text(Path("/nonexistent/file.txt"))

    def test_read_text_permission_error(self, adapter):
        """read_text wraps permission errors with context."""
        with (
            patch("pathlib.Path.open", side_effect=PermissionError("Permission denied")),
            pytest.raises(FileSystemError) as exc_info,
        ):
            adapter.read_text(Path("/restricted/file.txt"))

        assert isinstance(exc_info.value, CiboxError)
        assert exc_info.value.context["operation"] == "read_text"
        assert exc_info.value.context["error_type"] == "PermissionError"

    def test_read_text_with_encoding(self, adapter):
        """The encoding is passed through to open."""
        with patch("pathlib.Path.open", mock_open(read_data="data")) as mock_path_open:
            assert adapter.read_text(Path("/test/file.txt"), encoding="utf-16") == "data"

        mock_path_open.assert_called_once_with(mode="r", encoding="utf-16")

    def test_list_directory_sorted(self, adapter, tmp_path):
        """Entries are returned sorted."""
        for name in ("b", "a", "c"):
            (tmp_path / name).touch()

        assert [p.name for p in adapter.list_directory(tmp_path)] == ["a", "b", "c"]

    def test_list_directory_not_a_directory(self, adapter, tmp_path):
        """Listing a file raises FileSystemError."""
        path = tmp_path / "file"
        path.touch()

        with pytest.raises(FileSystemError, match="list_directory"):
            adapter.list_directory(path)

    def test_copy_file(self, adapter, tmp_path):
        """copy_file creates the destination directory."""
        src = tmp_path / "src.txt"
        src.write_text("copy me")

        adapter.copy_file(src, tmp_path / "out" / "dst.txt")

        assert (tmp_path / "out" / "dst.txt").read_text() == "copy me"

    def test_copy_missing_file(self, adapter, tmp_path):
        """Copying a missing file raises FileSystemError."""
        with pytest.raises(FileSystemError, match="copy_file"):
            adapter.copy_file(tmp_path / "missing", tmp_path / "dst")


class TestFileSystemAdapterMirror:
    """Test directory mirroring."""

    def test_mirror_copies_tree(self, adapter, origin, tmp_path):
        """Every file of the origin exists in the target."""
        target = tmp_path / "target"

        adapter.mirror(origin, target)

        assert (target / "README").read_text() == "readme\n"
        assert (target / "src" / "main.txt").read_text() == "main\n"
        assert (target / "src" / "lib" / "util.txt").read_text() == "util\n"

    def test_mirror_deletes_stale_entries(self, adapter, origin, tmp_path):
        """Target files and directories missing from origin are removed."""
        target = tmp_path / "target"
        (target / "old" / "nested").mkdir(parents=True)
        (target / "old" / "nested" / "file").write_text("stale")
        (target / "stale.txt").write_text("stale")

        adapter.mirror(origin, target, delete=True)

        assert not (target / "old").exists()
        assert not (target / "stale.txt").exists()
        assert (target / "README").exists()

    def test_mirror_without_delete_keeps_stale_entries(self, adapter, origin, tmp_path):
        """With delete=False extra target files survive."""
        target = tmp_path / "target"
        target.mkdir()
        (target / "extra.txt").write_text("extra")

        adapter.mirror(origin, target, delete=False)

        assert (target / "extra.txt").exists()
        assert (target / "README").exists()

    def test_mirror_overrides_existing_files(self, adapter, origin, tmp_path):
        """Existing target files are replaced by default."""
        target = tmp_path / "target"
        target.mkdir()
        (target / "README").write_text("old")

        adapter.mirror(origin, target)

        assert (target / "README").read_text() == "readme\n"

    def test_mirror_without_override_keeps_existing_files(
        self, adapter, origin, tmp_path
    ):
        """With override=False existing target files are left untouched."""
        target = tmp_path / "target"
        target.mkdir()
        (target / "README").write_text("old")

        adapter.mirror(origin, target, override=False)

        assert (target / "README").read_text() == "old"
        assert (target / "src" / "main.txt").exists()

    def test_mirror_replaces_file_with_directory(self, adapter, origin, tmp_path):
        """A target file where origin has a directory is replaced."""
        target = tmp_path / "target"
        target.mkdir()
        (target / "src").write_text("not a directory")

        adapter.mirror(origin, target)

        assert (target / "src" / "main.txt").read_text() == "main\n"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_mirror_copies_symlinks_as_links(self, adapter, origin, tmp_path):
        """Symlinks are recreated, not followed."""
        (origin / "link").symlink_to("README")
        target = tmp_path / "target"

        adapter.mirror(origin, target)

        assert (target / "link").is_symlink()
        assert os.readlink(target / "link") == "README"

    def test_mirror_target_inside_origin_raises(self, adapter, origin):
        """Mirroring into the origin itself is refused."""
        with pytest.raises(FileSystemError, match="must not be inside the origin"):
            adapter.mirror(origin, origin / "build")

    def test_mirror_missing_origin_raises(self, adapter, tmp_path):
        """A missing origin raises FileSystemError."""
        with pytest.raises(FileSystemError) as exc_info:
            adapter.mirror(tmp_path / "missing", tmp_path / "target")

        assert exc_info.value.context["operation"] == "mirror"
        assert exc_info.value.context["delete"] is True
