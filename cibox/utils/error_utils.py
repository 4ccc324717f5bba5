"""Helpers that build cibox errors with consistent structured context."""

from pathlib import Path
from typing import Any

from cibox.core.errors import FileSystemError, TemplateError


def create_file_error(
    file_path: Path | str,
    operation: str,
    original_error: Exception,
    additional_context: dict[str, Any] | None = None,
) -> FileSystemError:
    """Create a FileSystemError for a failed file operation.

    Args:
        file_path: Path involved in the failed operation
        operation: Name of the operation (e.g. "read_text", "mirror")
        original_error: The underlying exception
        additional_context: Extra key/value details for the error context

    Returns:
        FileSystemError with message and context populated
    """
    context: dict[str, Any] = {
        "file_path": str(file_path),
        "operation": operation,
        "original_error": str(original_error),
        "error_type": original_error.__class__.__name__,
    }
    if additional_context:
        context.update(additional_context)

    message = f"File operation '{operation}' failed on '{file_path}': {original_error}"
    return FileSystemError(message, context)


def create_template_error(
    template: Path | str,
    operation: str,
    original_error: Exception,
    additional_context: dict[str, Any] | None = None,
    error_cls: type[TemplateError] = TemplateError,
) -> TemplateError:
    """Create a TemplateError (or subclass) for a failed template operation.

    Args:
        template: Template name or path
        operation: Name of the operation (e.g. "render_template")
        original_error: The underlying exception
        additional_context: Extra key/value details for the error context
        error_cls: TemplateError subclass to instantiate

    Returns:
        TemplateError instance with message and context populated
    """
    context: dict[str, Any] = {
        "template": str(template),
        "operation": operation,
        "original_error": str(original_error),
        "error_type": original_error.__class__.__name__,
    }
    if additional_context:
        context.update(additional_context)

    message = f"Template operation '{operation}' failed for '{template}': {original_error}"
    return error_cls(message, context)
