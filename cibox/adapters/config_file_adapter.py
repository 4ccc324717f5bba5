"""Config file adapter for loading YAML configuration documents."""

import logging
from pathlib import Path
from typing import Any

import yaml

from cibox.core.errors import ConfigNotFoundError, ConfigParseError
from cibox.protocols.config_file_adapter_protocol import ConfigFileAdapterProtocol


logger = logging.getLogger(__name__)


class ConfigFileAdapter:
    """YAML implementation of configuration file loading."""

    def load_config(self, config_path: Path) -> dict[str, Any]:
        """Load and decode a YAML configuration file.

        An empty document decodes to an empty mapping.

        Args:
            config_path: Path to the YAML file

        Returns:
            dict: Parsed configuration

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigParseError: If the file is not valid YAML or not a mapping
        """
        try:
            logger.debug("Loading configuration from %s", config_path)
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            msg = f"Configuration file not found: {config_path}"
            logger.error(msg)
            raise ConfigNotFoundError(msg, {"config_path": str(config_path)}) from e
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            msg = f"Failed to parse {config_path.name}: {e}"
            logger.error(msg)
            raise ConfigParseError(msg, {"config_path": str(config_path)}) from e
        except OSError as e:
            msg = f"Failed to read {config_path}: {e}"
            logger.error(msg)
            raise ConfigParseError(msg, {"config_path": str(config_path)}) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            msg = (
                f"Expected a mapping at the top of {config_path.name}, "
                f"got {type(data).__name__}"
            )
            logger.error(msg)
            raise ConfigParseError(msg, {"config_path": str(config_path)})
        return data

    def search_config_files(
        self, config_paths: list[Path]
    ) -> tuple[dict[str, Any], Path | None]:
        """Load the first existing configuration file from a list of candidates."""
        for config_path in config_paths:
            if config_path.is_file():
                return self.load_config(config_path), config_path
        logger.debug("No configuration file found in %d candidates", len(config_paths))
        return {}, None


def create_config_file_adapter() -> ConfigFileAdapterProtocol:
    """Create a config file adapter with default implementation."""
    return ConfigFileAdapter()
