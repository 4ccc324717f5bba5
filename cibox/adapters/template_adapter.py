"""Template adapter for abstracting template rendering operations."""

import json
import shlex
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplatesNotFound,
)

from cibox.core.errors import TemplateNotFoundError
from cibox.core.structlog_logger import get_struct_logger, traceback_enabled
from cibox.protocols.template_adapter_protocol import TemplateAdapterProtocol
from cibox.utils.error_utils import create_template_error


logger = get_struct_logger(__name__)


class TemplateAdapter:
    """Jinja2 template adapter implementation.

    Templates are looked up by name relative to ``template_path``.
    Undefined variables raise instead of rendering as empty strings.
    """

    def __init__(
        self,
        template_path: Path,
        trim_blocks: bool = True,
        lstrip_blocks: bool = True,
    ):
        """Initialize the Jinja2 template adapter.

        Args:
            template_path: Root directory templates are loaded from
            trim_blocks: Remove newlines after block tags
            lstrip_blocks: Strip leading whitespace from block tags
        """
        self.template_path = template_path
        self.trim_blocks = trim_blocks
        self.lstrip_blocks = lstrip_blocks
        self.env = Environment(
            loader=FileSystemLoader(template_path),
            trim_blocks=self.trim_blocks,
            lstrip_blocks=self.lstrip_blocks,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["shell_quote"] = _shell_quote
        self.env.filters["json"] = _to_json

    def list_templates(self) -> list[str]:
        """List all template names under the template root."""
        return sorted(self.env.list_templates())

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a named Jinja2 template with the given context."""
        try:
            logger.debug("rendering_template", template_name=template_name)
            template = self.env.get_template(template_name)
            return template.render(context)

        except (TemplateNotFound, TemplatesNotFound) as e:
            error = create_template_error(
                template_name,
                "render_template",
                e,
                {
                    "template_path": str(self.template_path),
                    "context_keys": sorted(context.keys()),
                },
                error_cls=TemplateNotFoundError,
            )
            logger.error(
                "template_not_found",
                template_name=template_name,
                template_path=str(self.template_path),
            )
            raise error from e
        except Exception as e:
            error = create_template_error(
                template_name,
                "render_template",
                e,
                {"context_keys": sorted(context.keys())},
            )
            exc_info = traceback_enabled(logger)
            logger.error(
                "template_render_error",
                template_name=template_name,
                error=str(e),
                exc_info=exc_info,
            )
            raise error from e


def _shell_quote(value: Any) -> str:
    return shlex.quote(str(value))


# Unlike the builtin tojson filter, no HTML escaping of <, >, & and '
def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def default_template_path() -> Path:
    """Return the directory of the templates bundled with cibox."""
    return Path(__file__).resolve().parent.parent / "templates"


def create_template_adapter(
    template_path: Path | None = None,
) -> TemplateAdapterProtocol:
    """Create a template adapter, using bundled templates by default."""
    return TemplateAdapter(template_path or default_template_path())
