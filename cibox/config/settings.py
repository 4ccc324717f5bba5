"""Settings management for cibox.

Settings are loaded from multiple sources with the following precedence:
1. Environment variables prefixed with ``CIBOX_`` (highest precedence)
2. The YAML settings file given on the command line, or the first of
   ``./cibox.yaml`` and ``$XDG_CONFIG_HOME/cibox/config.yaml`` that exists
3. Default values (lowest precedence)
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cibox.adapters.config_file_adapter import create_config_file_adapter
from cibox.adapters.template_adapter import default_template_path
from cibox.core.errors import ConfigError


logger = logging.getLogger(__name__)

ENV_PREFIX = "CIBOX_"


def _default_build_path() -> Path:
    if "XDG_CACHE_HOME" in os.environ:
        return Path(os.environ["XDG_CACHE_HOME"]) / "cibox" / "builds"
    return Path.home() / ".cache" / "cibox" / "builds"


class CiboxSettings(BaseSettings):
    """cibox settings with automatic environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override file data passed to the constructor."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    build_path: Path = Field(
        default_factory=_default_build_path,
        description="Directory where build contexts are prepared",
    )
    template_path: Path = Field(
        default_factory=default_template_path,
        description="Root directory of the Dockerfile templates",
    )
    timezone: str = Field(
        default="UTC",
        description="Timezone passed to every build",
    )
    log_level: str = "WARNING"

    @field_validator("build_path", "template_path", mode="after")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Timezone cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a recognized value."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v


def _settings_search_paths(config_file: str | Path | None) -> list[Path]:
    if config_file:
        return [Path(config_file).expanduser().resolve()]

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    config_home = (
        Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    )
    return [Path.cwd() / "cibox.yaml", config_home / "cibox" / "config.yaml"]


def load_settings(config_file: str | Path | None = None) -> CiboxSettings:
    """Load settings from a YAML file and the environment.

    Args:
        config_file: Explicit settings file; it must exist when given

    Returns:
        CiboxSettings: Validated settings

    Raises:
        ConfigError: If the settings file is invalid
    """
    adapter = create_config_file_adapter()
    search_paths = _settings_search_paths(config_file)

    if config_file:
        data = adapter.load_config(search_paths[0])
        found_path: Path | None = search_paths[0]
    else:
        data, found_path = adapter.search_config_files(search_paths)

    if found_path:
        logger.debug("Loaded settings from %s", found_path)
    else:
        logger.debug("No settings file found, using defaults and environment")

    try:
        return CiboxSettings(**data)
    except ValidationError as e:
        msg = f"Invalid settings: {e}"
        logger.error(msg)
        raise ConfigError(
            msg, {"config_file": str(found_path) if found_path else None}
        ) from e
