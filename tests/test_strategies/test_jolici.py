"""Tests for the Dockerfile directory build strategy."""

import pytest

from cibox.core.errors import BuildError, ConfigNotFoundError
from cibox.models.build import Build
from cibox.strategies.jolici import JoliCiBuildStrategy, create_jolici_strategy


@pytest.fixture
def jolici_project(tmp_path):
    """Project with two Dockerfile builds and one directory without Dockerfile."""
    project = tmp_path / "Shop"
    for name in ("php7", "php8"):
        build_dir = project / ".jolici" / name
        build_dir.mkdir(parents=True)
        (build_dir / "Dockerfile").write_text(f"FROM {name}\n")
    (project / ".jolici" / "notes").mkdir()
    (project / "index.php").write_text("<?php\n")
    return project


@pytest.fixture
def jolici_strategy(build_path):
    return JoliCiBuildStrategy(build_path=build_path, timezone="UTC")


class TestJoliCiBuildStrategy:
    """Test JoliCiBuildStrategy."""

    def test_support_project(self, jolici_project, jolici_strategy, tmp_path):
        """Only projects with a .jolici directory are supported."""
        assert jolici_strategy.support_project(jolici_project) is True
        assert jolici_strategy.support_project(tmp_path) is False
        assert jolici_strategy.name == jolici_strategy.get_name() == "JoliCi"

    def test_get_builds(self, jolici_project, jolici_strategy, naming):
        """Every sub-directory with a Dockerfile is one build."""
        builds = jolici_strategy.get_builds(jolici_project)

        assert [b.parameters["build"] for b in builds] == ["php7", "php8"]
        assert builds[0].description == "Dockerfile = php7"
        assert builds[0].project_name == "shop"
        assert builds[0].parameters["dockerfile"] == ".jolici/php7/Dockerfile"
        assert builds[0].parameters["timezone"] == "UTC"
        assert builds[0].unique_key == naming.get_unique_key({"build": "php7"})

    def test_get_builds_without_directory_raises(self, tmp_path, jolici_strategy):
        """A project without .jolici has no builds."""
        with pytest.raises(ConfigNotFoundError):
            jolici_strategy.get_builds(tmp_path)

    def test_prepare_build(self, jolici_project, jolici_strategy, build_path):
        """The Dockerfile of the build is copied to the target root."""
        build = jolici_strategy.get_builds(jolici_project, timezone="Europe/Paris")[1]

        target = jolici_strategy.prepare_build(build)

        assert target == build_path / "shop" / "jolici" / build.unique_key
        assert (target / "Dockerfile").read_text() == "FROM php8\n"
        assert (target / "index.php").is_file()
        assert (target / ".jolici" / "php7" / "Dockerfile").is_file()

    def test_prepare_rejects_foreign_build(self, jolici_strategy):
        """Builds of another strategy are rejected."""
        with pytest.raises(BuildError):
            jolici_strategy.prepare_build(Build("demo", "TravisCi", "key", {}))

    def test_create_jolici_strategy(self, build_path):
        """The factory function wires the default adapters."""
        strategy = create_jolici_strategy(build_path, timezone="Asia/Tokyo")

        assert isinstance(strategy, JoliCiBuildStrategy)
        assert strategy.timezone == "Asia/Tokyo"
