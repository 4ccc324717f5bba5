"""Core test fixtures for the cibox project."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import yaml
from typer.testing import CliRunner

from cibox.builds.naming import Naming
from cibox.protocols import FileAdapterProtocol, TemplateAdapterProtocol
from cibox.strategies.travis_ci import TravisCiBuildStrategy


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def naming() -> Naming:
    """Return a naming service."""
    return Naming()


@pytest.fixture
def mock_file_adapter() -> Mock:
    """Create a mock file adapter for testing."""
    adapter = Mock(spec=FileAdapterProtocol)
    return adapter


@pytest.fixture
def mock_template_adapter() -> Mock:
    """Create a mock template adapter for testing."""
    adapter = Mock(spec=TemplateAdapterProtocol)
    adapter.render_template.return_value = "FROM scratch\n"
    return adapter


# ---- Project Fixtures ----


@pytest.fixture
def make_travis_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a project directory with a .travis.yml.

    Usage:
        def test_something(make_travis_project):
            project = make_travis_project({"language": "php", "php": ["8.2"]})
    """

    def _make(
        config: dict[str, Any] | str,
        name: str = "demo-project",
        files: dict[str, str] | None = None,
    ) -> Path:
        project = tmp_path / name
        project.mkdir(parents=True, exist_ok=True)

        content = config if isinstance(config, str) else yaml.safe_dump(config)
        (project / ".travis.yml").write_text(content, encoding="utf-8")

        for relative, text in (files or {"src/app.txt": "hello\n"}).items():
            file_path = project / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(text, encoding="utf-8")

        return project

    return _make


@pytest.fixture
def build_path(tmp_path: Path) -> Path:
    """Directory builds are prepared in."""
    return tmp_path / "builds"


@pytest.fixture
def travis_strategy(build_path: Path) -> TravisCiBuildStrategy:
    """Travis CI strategy with real adapters and bundled templates."""
    return TravisCiBuildStrategy(build_path=build_path, timezone="Europe/Paris")


# ---- Test Isolation Fixtures ----


@pytest.fixture
def isolated_settings_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[dict[str, Path], None, None]:
    """Isolate settings from the user's environment and config files.

    - Clears every CIBOX_ environment variable
    - Points XDG_CONFIG_HOME and XDG_CACHE_HOME at temporary directories
    - Runs the test from an empty working directory
    """
    for key in list(os.environ.keys()):
        if key.startswith("CIBOX_"):
            monkeypatch.delenv(key)

    config_home = tmp_path / "xdg-config"
    cache_home = tmp_path / "xdg-cache"
    workdir = tmp_path / "workdir"
    for directory in (config_home, cache_home, workdir):
        directory.mkdir()

    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("XDG_CACHE_HOME", str(cache_home))
    monkeypatch.chdir(workdir)

    yield {
        "config_home": config_home,
        "cache_home": cache_home,
        "workdir": workdir,
    }
