"""Protocol definitions for cibox adapters.

These protocols use ``typing.Protocol`` with ``@runtime_checkable`` so they
serve both static type checking and ``isinstance()`` checks.
"""

from .config_file_adapter_protocol import ConfigFileAdapterProtocol
from .file_adapter_protocol import FileAdapterProtocol
from .template_adapter_protocol import TemplateAdapterProtocol


__all__ = [
    "ConfigFileAdapterProtocol",
    "FileAdapterProtocol",
    "TemplateAdapterProtocol",
]
