"""Protocol definition for template rendering operations."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemplateAdapterProtocol(Protocol):
    """Protocol for rendering named templates from a template root."""

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a named template with the given context.

        Args:
            template_name: Template name relative to the template root
            context: Variables bound in the template

        Returns:
            Rendered content

        Raises:
            TemplateNotFoundError: If no template has this name
            TemplateError: If rendering fails
        """
        ...

