"""Shared utility functions for cibox."""

from cibox.utils.error_utils import create_file_error, create_template_error


__all__ = ["create_file_error", "create_template_error"]
