"""Build descriptor model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from cibox.builds.naming import get_naming


def freeze(value: Any) -> Any:
    """Return a read-only copy of nested parameter data.

    Mappings become ``MappingProxyType`` over a fresh dict and lists or tuples
    become tuples, at every level.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Return a plain, mutable copy of data produced by :func:`freeze`."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class Build:
    """One concrete, fully parameterized build derived from a matrix cell.

    A build is created by a strategy's discovery step and only read
    afterwards. ``parameters`` is a read-only copy of the mapping it was
    created with: nested mappings are read-only views and lists are stored
    as tuples, so nothing reachable from a build can drift away from its
    unique key. Use :meth:`parameters_dict` for plain data.
    """

    project_name: str
    strategy_name: str
    unique_key: str
    parameters: Mapping[str, Any] = field(hash=False)
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", freeze(self.parameters))

    @property
    def directory(self) -> Path:
        """Relative directory this build is prepared in."""
        return get_naming().get_build_directory(
            self.project_name, self.strategy_name, self.unique_key
        )

    @property
    def docker_name(self) -> str:
        """Image reference for this build."""
        return get_naming().get_docker_name(
            self.project_name, self.strategy_name, self.unique_key
        )

    def parameters_dict(self) -> dict[str, Any]:
        """Plain dict copy of the parameters, with lists and dicts."""
        return thaw(self.parameters)  # type: ignore[no-any-return]

    def to_dict(self) -> dict[str, Any]:
        """Convert the build to a JSON-compatible dictionary."""
        return {
            "project_name": self.project_name,
            "strategy_name": self.strategy_name,
            "unique_key": self.unique_key,
            "description": self.description,
            "directory": self.directory.as_posix(),
            "docker_name": self.docker_name,
            "parameters": self.parameters_dict(),
        }
