"""Travis CI build strategy.

Reads a project's ``.travis.yml`` and expands it into one build per
combination of language, runtime version and environment line.
"""

import json
from pathlib import Path
from typing import Any

from cibox.adapters.config_file_adapter import create_config_file_adapter
from cibox.adapters.file_adapter import create_file_adapter
from cibox.adapters.template_adapter import create_template_adapter
from cibox.builds.matrix import Matrix
from cibox.builds.naming import Naming, get_naming
from cibox.config.defaults import DEFAULT_TRAVIS_DEFAULTS, TravisDefaults
from cibox.core.errors import (
    BuildError,
    EnvironmentLineFormatError,
    MatrixDimensionError,
)
from cibox.core.structlog_logger import (
    get_struct_logger,
    get_struct_logger_with_context,
)
from cibox.models.build import Build
from cibox.protocols import (
    ConfigFileAdapterProtocol,
    FileAdapterProtocol,
    TemplateAdapterProtocol,
)
from cibox.strategies.base import MANIFEST_NAME


logger = get_struct_logger(__name__)

CONFIG_FILENAME = ".travis.yml"
STRATEGY_NAME = "TravisCi"
TEMPLATE_FAMILY = "Dockerfile"
PHASES = ("before_install", "install", "before_script", "script")


def parse_environment_line(line: str | None) -> dict[str, str]:
    """Parse a Travis environment line into a variable mapping.

    Transforms ``"A=B C=D"`` into ``{"A": "B", "C": "D"}``. Tokens are
    separated by whitespace and blank tokens are skipped. The value is
    everything after the first ``=``.

    Raises:
        EnvironmentLineFormatError: If a token has no ``=`` or no name
    """
    if line is not None and not isinstance(line, str):
        raise EnvironmentLineFormatError(
            f"Environment entries must be strings, got {type(line).__name__}",
            {"line": repr(line)},
        )

    variables: dict[str, str] = {}
    for token in (line or "").split():
        key, separator, value = token.partition("=")
        if not separator or not key:
            raise EnvironmentLineFormatError(
                f"Invalid environment variable '{token}' in line '{line}', "
                "expected KEY=VALUE",
                {"line": line, "token": token},
            )
        variables[key] = value
    return variables


class TravisCiBuildStrategy:
    """Build strategy for projects configured with ``.travis.yml``.

    The matrix has the dimensions language (one value), environment (one
    entry per parsed ``env`` line, or a single empty mapping), version (the
    language's version list) and one single-value dimension per script phase
    holding the whole resolved command list. Only language, version and
    environment identify a build; the phase lists are derived and do not take
    part in the unique key.
    """

    def __init__(
        self,
        build_path: Path,
        naming: Naming | None = None,
        file_adapter: FileAdapterProtocol | None = None,
        template_adapter: TemplateAdapterProtocol | None = None,
        config_adapter: ConfigFileAdapterProtocol | None = None,
        defaults: TravisDefaults | None = None,
        timezone: str = "UTC",
    ) -> None:
        """Initialize the Travis CI strategy.

        Args:
            build_path: Directory where build contexts are prepared
            naming: Naming service for project names and keys
            file_adapter: File adapter used to probe, mirror and write
            template_adapter: Template adapter rendering the Dockerfile
            config_adapter: Adapter decoding ``.travis.yml``
            defaults: Per-language default commands and version-key aliases
            timezone: Timezone used when ``get_builds`` is not given one
        """
        self.build_path = Path(build_path)
        self.naming = naming or get_naming()
        self.file_adapter = file_adapter or create_file_adapter()
        self.template_adapter = template_adapter or create_template_adapter()
        self.config_adapter = config_adapter or create_config_file_adapter()
        self.defaults = defaults or DEFAULT_TRAVIS_DEFAULTS
        self.timezone = timezone

    @property
    def name(self) -> str:
        return STRATEGY_NAME

    def get_name(self) -> str:
        return STRATEGY_NAME

    def support_project(self, directory: Path) -> bool:
        """A project is supported when it has a ``.travis.yml`` regular file."""
        config_path = Path(directory) / CONFIG_FILENAME
        return self.file_adapter.exists(config_path) and self.file_adapter.is_file(
            config_path
        )

    def get_builds(self, directory: Path, timezone: str | None = None) -> list[Build]:
        """Read ``.travis.yml`` and derive one build per matrix combination.

        Args:
            directory: Project directory
            timezone: Timezone bound into every build, defaults to the
                strategy's timezone

        Returns:
            list[Build]: Builds in matrix order

        Raises:
            ConfigNotFoundError: If ``.travis.yml`` does not exist
            ConfigParseError: If ``.travis.yml`` is not a YAML mapping
            MatrixDimensionError: If the version list is missing or empty
            EnvironmentLineFormatError: If an ``env`` line is malformed
        """
        directory = Path(directory)
        config = self.config_adapter.load_config(directory / CONFIG_FILENAME)
        matrix = self.create_matrix(config)

        project_name = self.naming.get_project_name(directory)
        origin = str(directory.resolve())
        build_timezone = timezone or self.timezone

        builds: list[Build] = []
        for combination in matrix.compute():
            language = combination["language"]
            version = combination["version"]
            environment = combination["environment"]

            unique_key = self.naming.get_unique_key(
                {
                    "language": language,
                    "version": version,
                    "environment": environment,
                }
            )

            description = f"{language} = {version}"
            if environment:
                description += f", Environment: {_render_environment(environment)}"

            parameters: dict[str, Any] = {
                "language": language,
                "version": version,
                **{phase: combination[phase] for phase in PHASES},
                "env": environment,
                "timezone": build_timezone,
                "origin": origin,
            }

            builds.append(
                Build(
                    project_name=project_name,
                    strategy_name=self.name,
                    unique_key=unique_key,
                    parameters=parameters,
                    description=description,
                )
            )

        logger.info(
            "travis_builds_resolved",
            project=project_name,
            build_count=len(builds),
            dimensions={
                name: len(values) for name, values in matrix.dimensions.items()
            },
        )
        return builds

    def prepare_build(self, build: Build) -> Path:
        """Mirror the build origin and render its Dockerfile.

        The target directory is mirrored destructively from the origin, then
        the template ``<language>/Dockerfile-<version>.j2`` is rendered with
        every build parameter and written as ``Dockerfile`` at its root.

        Returns:
            Path: The prepared build directory

        Raises:
            BuildError: If the build was produced by another strategy
            TemplateNotFoundError: If no template matches language and version
            FileSystemError: If mirroring or writing fails
        """
        if build.strategy_name != self.name:
            raise BuildError(
                f"Build '{build.unique_key}' belongs to strategy "
                f"'{build.strategy_name}', not '{self.name}'",
                {"unique_key": build.unique_key, "strategy": build.strategy_name},
            )

        parameters = build.parameters_dict()
        origin = Path(parameters["origin"])
        target = self.build_path / build.directory
        build_logger = get_struct_logger_with_context(
            __name__, build_key=build.unique_key
        )

        build_logger.debug("mirroring_origin", origin=str(origin), target=str(target))
        self.file_adapter.mirror(origin, target, delete=True, override=True)

        template_name = self.get_template_name(
            parameters["language"], parameters["version"]
        )
        content = self.template_adapter.render_template(template_name, parameters)
        self.file_adapter.write_text(target / MANIFEST_NAME, content)

        build_logger.info(
            "build_prepared", target=str(target), template_name=template_name
        )
        return target

    def get_template_name(self, language: str, version: str) -> str:
        """Template name for a language and version."""
        return f"{language}/{TEMPLATE_FAMILY}-{version}.j2"

    def create_matrix(self, config: dict[str, Any]) -> Matrix:
        """Create the build matrix of a decoded ``.travis.yml``."""
        language = str(config.get("language") or self.defaults.default_language)
        version_key = self.defaults.version_key(language)
        versions = self._get_versions(config, language, version_key)

        environment_lines = self.get_config_value(config, language, "env")
        environments = [parse_environment_line(line) for line in environment_lines]

        matrix = Matrix()
        matrix.set_dimension("language", [language])
        matrix.set_dimension("environment", environments or [{}])
        matrix.set_dimension("version", versions)
        for phase in PHASES:
            matrix.set_dimension(
                phase, [self.get_config_value(config, language, phase)]
            )

        logger.debug(
            "travis_matrix_created",
            language=language,
            version_key=version_key,
            versions=versions,
            environment_count=len(environments),
        )
        return matrix

    def get_config_value(
        self, config: dict[str, Any], language: str, key: str
    ) -> list[Any]:
        """Configured list for a key, or the language default when unset.

        A scalar value becomes a one-item list. An absent or empty value
        falls back to the language default, or an empty list for languages
        without defaults.
        """
        value = config.get(key)
        if not value:
            return self.defaults.get_default(language, key)
        if not isinstance(value, list):
            return [value]
        return list(value)

    def _get_versions(
        self, config: dict[str, Any], language: str, version_key: str
    ) -> list[str]:
        value = config.get(version_key)
        if not isinstance(value, list):
            value = [] if value is None or value == "" else [value]

        versions = [str(version) for version in value if version is not None]
        if not versions:
            msg = (
                f"No versions declared for language '{language}': "
                f"'{version_key}' is missing or empty"
            )
            logger.error("missing_version_dimension", language=language, key=version_key)
            raise MatrixDimensionError(
                msg, {"language": language, "version_key": version_key}
            )
        return versions


def _render_environment(environment: dict[str, str]) -> str:
    return json.dumps(environment, separators=(",", ":"), ensure_ascii=False)


def create_travis_ci_strategy(
    build_path: Path,
    template_path: Path | None = None,
    timezone: str = "UTC",
) -> TravisCiBuildStrategy:
    """Create a Travis CI strategy with default adapters."""
    return TravisCiBuildStrategy(
        build_path=build_path,
        template_adapter=create_template_adapter(template_path),
        timezone=timezone,
    )
