"""Protocol definition for structured configuration file loading."""

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigFileAdapterProtocol(Protocol):
    """Protocol for decoding configuration documents into mappings."""

    def load_config(self, config_path: Path) -> dict[str, Any]:
        """Load a configuration file as a mapping.

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigParseError: If the file is not a valid mapping document
        """
        ...

    def search_config_files(
        self, config_paths: list[Path]
    ) -> tuple[dict[str, Any], Path | None]:
        """Load the first existing configuration file from a list of candidates.

        Returns:
            Tuple of (configuration mapping, path it was loaded from). When no
            candidate exists the mapping is empty and the path is None.
        """
        ...
