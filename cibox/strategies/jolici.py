"""Dockerfile directory build strategy.

A project opts in with a ``.jolici`` directory. Each sub-directory holding a
``Dockerfile`` is one build, so the matrix has a single ``build`` dimension.
"""

from pathlib import Path

from cibox.adapters.file_adapter import create_file_adapter
from cibox.builds.matrix import Matrix
from cibox.builds.naming import Naming, get_naming
from cibox.core.errors import BuildError, ConfigNotFoundError
from cibox.core.structlog_logger import get_struct_logger
from cibox.models.build import Build
from cibox.protocols import FileAdapterProtocol
from cibox.strategies.base import MANIFEST_NAME


logger = get_struct_logger(__name__)

BUILDS_DIRNAME = ".jolici"
STRATEGY_NAME = "JoliCi"


class JoliCiBuildStrategy:
    """Build strategy for projects shipping their own Dockerfiles."""

    def __init__(
        self,
        build_path: Path,
        naming: Naming | None = None,
        file_adapter: FileAdapterProtocol | None = None,
        timezone: str = "UTC",
    ) -> None:
        self.build_path = Path(build_path)
        self.naming = naming or get_naming()
        self.file_adapter = file_adapter or create_file_adapter()
        self.timezone = timezone

    @property
    def name(self) -> str:
        return STRATEGY_NAME

    def get_name(self) -> str:
        return STRATEGY_NAME

    def support_project(self, directory: Path) -> bool:
        return self.file_adapter.is_dir(Path(directory) / BUILDS_DIRNAME)

    def get_builds(self, directory: Path, timezone: str | None = None) -> list[Build]:
        """Derive one build per ``.jolici/<name>/Dockerfile``.

        Raises:
            ConfigNotFoundError: If the project has no ``.jolici`` directory
        """
        directory = Path(directory)
        builds_dir = directory / BUILDS_DIRNAME
        if not self.file_adapter.is_dir(builds_dir):
            raise ConfigNotFoundError(
                f"Build directory not found: {builds_dir}",
                {"directory": str(builds_dir)},
            )

        names = [
            entry.name
            for entry in self.file_adapter.list_directory(builds_dir)
            if self.file_adapter.is_file(entry / MANIFEST_NAME)
        ]

        matrix = Matrix()
        matrix.set_dimension("build", names)

        project_name = self.naming.get_project_name(directory)
        origin = str(directory.resolve())
        build_timezone = timezone or self.timezone

        builds = [
            Build(
                project_name=project_name,
                strategy_name=self.name,
                unique_key=self.naming.get_unique_key(
                    {"build": combination["build"]}
                ),
                parameters={
                    "build": combination["build"],
                    "dockerfile": f"{BUILDS_DIRNAME}/{combination['build']}/{MANIFEST_NAME}",
                    "timezone": build_timezone,
                    "origin": origin,
                },
                description=f"Dockerfile = {combination['build']}",
            )
            for combination in matrix.compute()
        ]

        logger.info("jolici_builds_resolved", project=project_name, build_count=len(builds))
        return builds

    def prepare_build(self, build: Build) -> Path:
        """Mirror the build origin and copy its Dockerfile to the target root.

        Raises:
            BuildError: If the build was produced by another strategy
            FileSystemError: If mirroring or copying fails
        """
        if build.strategy_name != self.name:
            raise BuildError(
                f"Build '{build.unique_key}' belongs to strategy "
                f"'{build.strategy_name}', not '{self.name}'",
                {"unique_key": build.unique_key, "strategy": build.strategy_name},
            )

        origin = Path(build.parameters["origin"])
        target = self.build_path / build.directory

        self.file_adapter.mirror(origin, target, delete=True, override=True)
        self.file_adapter.copy_file(
            origin / build.parameters["dockerfile"], target / MANIFEST_NAME
        )

        logger.info("build_prepared", build_key=build.unique_key, target=str(target))
        return target


def create_jolici_strategy(build_path: Path, timezone: str = "UTC") -> JoliCiBuildStrategy:
    """Create a Dockerfile directory strategy with default adapters."""
    return JoliCiBuildStrategy(build_path=build_path, timezone=timezone)
