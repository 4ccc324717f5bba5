"""Build strategy protocol.

A build strategy reads one CI configuration dialect. It turns a project
directory into builds and later prepares an on-disk build context for one of
them. Strategies are interchangeable through this protocol and are probed in
order by the strategy factory.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from cibox.models.build import Build


MANIFEST_NAME = "Dockerfile"


@runtime_checkable
class BuildStrategyProtocol(Protocol):
    """Protocol for build strategies."""

    @property
    def name(self) -> str:
        """Strategy name, used as a namespace in keys and directories."""
        ...

    def get_name(self) -> str:
        """Return the strategy name."""
        ...

    def support_project(self, directory: Path) -> bool:
        """Check whether the project directory uses this strategy's dialect."""
        ...

    def get_builds(self, directory: Path, timezone: str | None = None) -> list[Build]:
        """Derive one build per matrix cell of the project configuration."""
        ...

    def prepare_build(self, build: Build) -> Path:
        """Mirror the build origin and write its manifest.

        Returns:
            Path: The prepared build directory
        """
        ...
