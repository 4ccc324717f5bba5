"""Exception hierarchy for cibox.

Every error raised by cibox derives from :class:`CiboxError` and carries an
optional ``context`` mapping with the structured details that produced it.
"""

from typing import Any


class CiboxError(Exception):
    """Base exception for all cibox errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        return self.message


class ConfigError(CiboxError):
    """Error in a project's CI configuration or in cibox settings."""


class ConfigNotFoundError(ConfigError):
    """The CI configuration file does not exist."""


class ConfigParseError(ConfigError):
    """The CI configuration file cannot be decoded into a mapping."""


class MatrixDimensionError(ConfigError):
    """A required matrix dimension is missing or empty."""


class EnvironmentLineFormatError(ConfigError):
    """An environment line contains a token without ``=``."""


class TemplateError(CiboxError):
    """Error while loading or rendering a manifest template."""


class TemplateNotFoundError(TemplateError):
    """No manifest template exists for the requested name."""


class FileSystemError(CiboxError):
    """Error while reading, writing or mirroring files."""


class BuildError(CiboxError):
    """Error while preparing a build."""


class StrategyNotFoundError(CiboxError):
    """No build strategy matches the request."""

    def __init__(self, subject: str, available_strategies: list[str]) -> None:
        super().__init__(
            f"No build strategy found for '{subject}'. "
            f"Available strategies: {', '.join(available_strategies) or 'none'}",
            {"subject": subject, "available_strategies": available_strategies},
        )
        self.subject = subject
        self.available_strategies = available_strategies
