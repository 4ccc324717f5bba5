"""File adapter for abstracting file system operations."""

import logging
import os
import shutil
from pathlib import Path

from cibox.core.errors import FileSystemError
from cibox.protocols.file_adapter_protocol import FileAdapterProtocol
from cibox.utils.error_utils import create_file_error


logger = logging.getLogger(__name__)


class FileSystemAdapter:
    """File system adapter implementation."""

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        try:
            logger.debug("Reading text file: %s", path)
            with path.open(mode="r", encoding=encoding) as f:
                content = f.read()
            logger.debug("Successfully read %d characters from %s", len(content), path)
            return content
        except FileNotFoundError as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("File not found: %s", path)
            raise error from e
        except PermissionError as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("Permission denied reading file: %s", path)
            raise error from e
        except Exception as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("Error reading file %s: %s", path, e)
            raise error from e

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        try:
            self.mkdir(path.parent)

            logger.debug("Writing text file: %s", path)
            with path.open(mode="w", encoding=encoding) as f:
                f.write(content)
            logger.debug("Successfully wrote %d characters to %s", len(content), path)
        except FileSystemError:
            # Let FileSystemError from mkdir pass through
            raise
        except Exception as e:
            error = create_file_error(
                path,
                "write_text",
                e,
                {"encoding": encoding, "content_length": len(content)},
            )
            logger.error("Error writing file %s: %s", path, e)
            raise error from e

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a file."""
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def mkdir(self, path: Path, parents: bool = True, exist_ok: bool = True) -> None:
        """Create a directory."""
        try:
            path.mkdir(parents=parents, exist_ok=exist_ok)
        except Exception as e:
            error = create_file_error(
                path, "mkdir", e, {"parents": parents, "exist_ok": exist_ok}
            )
            logger.error("Error creating directory %s: %s", path, e)
            raise error from e

    def list_directory(self, path: Path) -> list[Path]:
        """List all items in a directory."""
        try:
            logger.debug("Listing directory contents: %s", path)
            if not self.is_dir(path):
                error = create_file_error(
                    path, "list_directory", NotADirectoryError("Not a directory"), {}
                )
                logger.error("Path is not a directory: %s", path)
                raise error

            items = sorted(path.iterdir())
            logger.debug("Found %d items in %s", len(items), path)
            return items
        except FileSystemError:
            raise
        except Exception as e:
            error = create_file_error(path, "list_directory", e, {})
            logger.error("Error listing directory %s: %s", path, e)
            raise error from e

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file from source to destination."""
        try:
            self.mkdir(dst.parent)

            logger.debug("Copying file: %s -> %s", src, dst)
            shutil.copy2(src, dst)
        except FileSystemError:
            raise
        except Exception as e:
            error = create_file_error(
                src, "copy_file", e, {"source": str(src), "destination": str(dst)}
            )
            logger.error("Error copying file %s to %s: %s", src, dst, e)
            raise error from e

    def mirror(
        self,
        origin: Path,
        target: Path,
        delete: bool = True,
        override: bool = True,
    ) -> None:
        """Mirror the origin directory into the target directory.

        Files are copied with metadata and symlinks are copied as links.
        With ``delete`` every target entry missing from origin is removed;
        with ``override`` existing target files are replaced, otherwise they
        are left untouched. A failure leaves the target partially mirrored.

        Args:
            origin: Source directory
            target: Destination directory, created if missing
            delete: Remove target entries that do not exist in origin
            override: Overwrite target files that already exist

        Raises:
            FileSystemError: If any copy or removal fails
        """
        options = {
            "origin": str(origin),
            "target": str(target),
            "delete": delete,
            "override": override,
        }
        try:
            if not origin.is_dir():
                raise NotADirectoryError(f"Origin is not a directory: {origin}")

            resolved_origin = origin.resolve()
            resolved_target = target.resolve()
            if resolved_target == resolved_origin or resolved_target.is_relative_to(
                resolved_origin
            ):
                raise ValueError("Mirror target must not be inside the origin")

            logger.debug("Mirroring %s -> %s", origin, target)
            self.mkdir(target)

            if delete:
                removed = self._delete_extraneous(origin, target)
                logger.debug("Removed %d stale entries from %s", removed, target)

            copied = 0
            for src_item in sorted(origin.rglob("*")):
                dst_item = target / src_item.relative_to(origin)

                if src_item.is_dir() and not src_item.is_symlink():
                    if os.path.lexists(dst_item) and not (
                        dst_item.is_dir() and not dst_item.is_symlink()
                    ):
                        dst_item.unlink()
                    dst_item.mkdir(exist_ok=True)
                    continue

                if os.path.lexists(dst_item):
                    if not override:
                        continue
                    self._remove_path(dst_item)

                shutil.copy2(src_item, dst_item, follow_symlinks=False)
                copied += 1

            logger.debug("Mirrored %d files from %s to %s", copied, origin, target)
        except FileSystemError:
            raise
        except Exception as e:
            error = create_file_error(origin, "mirror", e, options)
            logger.error("Error mirroring %s to %s: %s", origin, target, e)
            raise error from e

    def _delete_extraneous(self, origin: Path, target: Path) -> int:
        """Remove target entries with no counterpart in origin.

        Entries are visited deepest first so directories are emptied before
        they are removed.
        """
        removed = 0
        for dst_item in sorted(target.rglob("*"), reverse=True):
            src_item = origin / dst_item.relative_to(target)
            if os.path.lexists(src_item):
                continue
            self._remove_path(dst_item)
            removed += 1
        return removed

    def _remove_path(self, path: Path) -> None:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()


def create_file_adapter() -> FileAdapterProtocol:
    """Create a file adapter with default implementation."""
    return FileSystemAdapter()
