"""Build strategies for CI configuration dialects."""

from cibox.strategies.base import MANIFEST_NAME, BuildStrategyProtocol
from cibox.strategies.factory import BuildStrategyFactory, create_strategy_factory
from cibox.strategies.jolici import JoliCiBuildStrategy, create_jolici_strategy
from cibox.strategies.travis_ci import (
    TravisCiBuildStrategy,
    create_travis_ci_strategy,
    parse_environment_line,
)


__all__ = [
    "MANIFEST_NAME",
    "BuildStrategyFactory",
    "BuildStrategyProtocol",
    "JoliCiBuildStrategy",
    "TravisCiBuildStrategy",
    "create_jolici_strategy",
    "create_strategy_factory",
    "create_travis_ci_strategy",
    "parse_environment_line",
]
