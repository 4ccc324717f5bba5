from .errors import (
    BuildError,
    CiboxError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    EnvironmentLineFormatError,
    FileSystemError,
    MatrixDimensionError,
    StrategyNotFoundError,
    TemplateError,
    TemplateNotFoundError,
)
from .logging import setup_logging


__all__ = [
    "setup_logging",
    "CiboxError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "MatrixDimensionError",
    "EnvironmentLineFormatError",
    "TemplateError",
    "TemplateNotFoundError",
    "FileSystemError",
    "BuildError",
    "StrategyNotFoundError",
]
