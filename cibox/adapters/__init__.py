"""Adapters wrapping external libraries behind cibox protocols."""

from .config_file_adapter import ConfigFileAdapter, create_config_file_adapter
from .file_adapter import FileSystemAdapter, create_file_adapter
from .template_adapter import (
    TemplateAdapter,
    create_template_adapter,
    default_template_path,
)


__all__ = [
    "ConfigFileAdapter",
    "FileSystemAdapter",
    "TemplateAdapter",
    "create_config_file_adapter",
    "create_file_adapter",
    "create_template_adapter",
    "default_template_path",
]
