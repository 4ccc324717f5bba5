"""Strategy factory for build strategies."""

import logging
from pathlib import Path

from cibox.config.settings import CiboxSettings
from cibox.core.errors import StrategyNotFoundError
from cibox.models.build import Build
from cibox.strategies.base import BuildStrategyProtocol
from cibox.strategies.jolici import create_jolici_strategy
from cibox.strategies.travis_ci import create_travis_ci_strategy


logger = logging.getLogger(__name__)


class BuildStrategyFactory:
    """Registry of build strategies, probed in registration order."""

    def __init__(self, strategies: list[BuildStrategyProtocol] | None = None) -> None:
        """Initialize strategy factory.

        Args:
            strategies: Strategies to register, in probing order
        """
        self._strategies: dict[str, BuildStrategyProtocol] = {}
        for strategy in strategies or []:
            self.register_strategy(strategy)

    def register_strategy(self, strategy: BuildStrategyProtocol) -> None:
        """Register a strategy; a strategy with the same name is replaced."""
        self._strategies[strategy.name] = strategy
        logger.debug("Registered build strategy: %s", strategy.name)

    def list_strategies(self) -> list[str]:
        """List registered strategy names in probing order."""
        return list(self._strategies.keys())

    def get_strategy_by_name(self, name: str) -> BuildStrategyProtocol:
        """Get a strategy by name.

        Raises:
            StrategyNotFoundError: If no strategy has this name
        """
        if name not in self._strategies:
            raise StrategyNotFoundError(name, self.list_strategies())
        return self._strategies[name]

    def get_strategies_for_project(
        self, directory: Path
    ) -> list[BuildStrategyProtocol]:
        """All strategies supporting the project, in probing order."""
        supporting = [
            strategy
            for strategy in self._strategies.values()
            if strategy.support_project(directory)
        ]
        logger.debug(
            "Strategies supporting %s: %s",
            directory,
            [strategy.name for strategy in supporting],
        )
        return supporting

    def get_builds(self, directory: Path, timezone: str | None = None) -> list[Build]:
        """Builds from every strategy supporting the project.

        Raises:
            StrategyNotFoundError: If no strategy supports the project
        """
        strategies = self.get_strategies_for_project(directory)
        if not strategies:
            raise StrategyNotFoundError(str(directory), self.list_strategies())

        builds: list[Build] = []
        for strategy in strategies:
            builds.extend(strategy.get_builds(directory, timezone=timezone))
        return builds

    def prepare_build(self, build: Build) -> Path:
        """Prepare a build with the strategy that produced it."""
        return self.get_strategy_by_name(build.strategy_name).prepare_build(build)


def create_strategy_factory(settings: CiboxSettings) -> BuildStrategyFactory:
    """Create a factory with the default strategies configured from settings.

    Travis CI is probed before the Dockerfile directory strategy.
    """
    return BuildStrategyFactory(
        [
            create_travis_ci_strategy(
                build_path=settings.build_path,
                template_path=settings.template_path,
                timezone=settings.timezone,
            ),
            create_jolici_strategy(
                build_path=settings.build_path,
                timezone=settings.timezone,
            ),
        ]
    )
