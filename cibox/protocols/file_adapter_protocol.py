"""Protocol definition for file system operations."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileAdapterProtocol(Protocol):
    """Protocol for file system operations."""

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file.

        Raises:
            FileSystemError: If file cannot be read
        """
        ...

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file, creating parent directories.

        Raises:
            FileSystemError: If file cannot be written
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def list_directory(self, path: Path) -> list[Path]:
        """List all items in a directory, sorted by name.

        Raises:
            FileSystemError: If directory cannot be accessed
        """
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file from source to destination.

        Raises:
            FileSystemError: If file cannot be copied
        """
        ...

    def mirror(
        self,
        origin: Path,
        target: Path,
        delete: bool = True,
        override: bool = True,
    ) -> None:
        """Mirror the origin directory into the target directory.

        Args:
            origin: Source directory
            target: Destination directory, created if missing
            delete: Remove target entries that do not exist in origin
            override: Overwrite target files that already exist

        Raises:
            FileSystemError: If any copy or removal fails
        """
        ...
