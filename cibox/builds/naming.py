"""Stable names and keys for projects and builds."""

import hashlib
import json
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any


DEFAULT_PROJECT_NAME = "project"
IMAGE_NAMESPACE = "cibox"
KEY_LENGTH = 16

_UNSAFE_CHARS = re.compile(r"[^a-z0-9]")


class Naming:
    """Derive project names, unique build keys and build locations.

    Unique keys are the identity of a build: build directories, image names
    and re-run checks all depend on them, so a key only depends on the
    structure of its parameters and never on mapping insertion order.
    """

    def get_project_name(self, directory: Path | str) -> str:
        """Derive a filesystem-safe project name from a directory.

        The basename of the resolved directory is lower-cased and stripped of
        every character outside ``[a-z0-9]``.

        Args:
            directory: Project directory

        Returns:
            str: Project name, ``"project"`` if nothing usable remains
        """
        basename = Path(directory).resolve().name
        name = _UNSAFE_CHARS.sub("", basename.lower())
        return name or DEFAULT_PROJECT_NAME

    def get_unique_key(self, parameters: Mapping[str, Any]) -> str:
        """Derive a stable key from a parameter mapping.

        The mapping is serialized as canonical JSON (sorted keys at every
        level, compact separators) and hashed with SHA-256. Non-string keys
        and non-JSON values are tagged with their type name.

        Args:
            parameters: Identity-bearing parameters

        Returns:
            str: Hex key of ``KEY_LENGTH`` characters
        """
        canonical = _dumps(_to_canonical(parameters))
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:KEY_LENGTH]

    def get_build_directory(
        self, project_name: str, strategy_name: str, unique_key: str
    ) -> Path:
        """Relative directory a build is prepared in."""
        return Path(project_name) / strategy_name.lower() / unique_key

    def get_docker_name(
        self, project_name: str, strategy_name: str, unique_key: str
    ) -> str:
        """Image reference for a build, ``cibox/<project>:<strategy>-<key>``."""
        return f"{IMAGE_NAMESPACE}/{project_name}:{strategy_name.lower()}-{unique_key}"


def _dumps(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _to_canonical(value: Any) -> Any:
    """Convert parameters to JSON data that keeps their types apart.

    Lists and tuples are both sequences. Mappings with non-string keys and
    values JSON cannot represent are tagged with their type, so ``{1: "a"}``
    and ``{"1": "a"}`` or ``Path("x")`` and ``"x"`` never share a key.
    """
    if isinstance(value, Mapping):
        if all(isinstance(key, str) for key in value):
            return {key: _to_canonical(item) for key, item in value.items()}
        items = [[_to_canonical(k), _to_canonical(v)] for k, v in value.items()]
        return {"__mapping__": sorted(items, key=_dumps)}
    if isinstance(value, list | tuple):
        return [_to_canonical(item) for item in value]
    if value is None or isinstance(value, str | int | float):
        return value
    return {"__type__": type(value).__name__, "value": str(value)}


_default_naming: Naming | None = None


def get_naming() -> Naming:
    """Get the shared naming service instance."""
    global _default_naming
    if _default_naming is None:
        _default_naming = Naming()
    return _default_naming
