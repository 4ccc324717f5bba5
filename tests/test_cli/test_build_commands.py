"""Tests for the builds and prepare CLI commands."""

import json

import pytest

from cibox.cli import app


TRAVIS_CONFIG = {
    "language": "php",
    "php": ["8.2", "8.3"],
    "env": ["DB=mysql"],
}


@pytest.fixture
def project(make_travis_project):
    return make_travis_project(TRAVIS_CONFIG)


@pytest.mark.usefixtures("cli_env")
class TestBuildsCommand:
    """Test `cibox builds`."""

    def test_table_output(self, cli_runner, project):
        result = cli_runner.invoke(app, ["builds", str(project)])

        assert result.exit_code == 0, result.output
        assert "TravisCi" in result.output
        assert "php = 8.2" in result.output
        assert "php = 8.3" in result.output

    def test_json_output(self, cli_runner, project):
        result = cli_runner.invoke(app, ["builds", str(project), "--format", "json"])

        assert result.exit_code == 0, result.output
        builds = json.loads(result.stdout)
        assert [b["parameters"]["version"] for b in builds] == ["8.2", "8.3"]
        assert builds[0]["parameters"]["timezone"] == "Europe/Paris"
        assert builds[0]["parameters"]["env"] == {"DB": "mysql"}
        assert builds[0]["directory"] == f"demoproject/travisci/{builds[0]['unique_key']}"

    def test_timezone_option(self, cli_runner, project):
        result = cli_runner.invoke(
            app, ["builds", str(project), "-f", "json", "--timezone", "Asia/Tokyo"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)[0]["parameters"]["timezone"] == "Asia/Tokyo"

    def test_unsupported_project(self, cli_runner, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()

        result = cli_runner.invoke(app, ["builds", str(empty)])

        assert result.exit_code == 1
        assert "No build strategy found" in result.output

    def test_invalid_environment_line(self, cli_runner, make_travis_project):
        project = make_travis_project({"language": "php", "php": ["8.2"], "env": ["DB"]})

        result = cli_runner.invoke(app, ["builds", str(project)])

        assert result.exit_code == 1
        assert "Error: Invalid environment variable 'DB'" in result.output

    def test_missing_versions(self, cli_runner, make_travis_project):
        project = make_travis_project({"language": "php"})

        result = cli_runner.invoke(app, ["builds", str(project)])

        assert result.exit_code == 1
        assert "No versions declared" in result.output


class TestPrepareCommand:
    """Test `cibox prepare`."""

    def test_prepare_all(self, cli_runner, project, cli_env):
        result = cli_runner.invoke(app, ["prepare", str(project)])

        assert result.exit_code == 0, result.output
        dockerfiles = sorted(cli_env["build_path"].glob("demoproject/travisci/*/Dockerfile"))
        assert len(dockerfiles) == 2
        assert "FROM php:8.2-cli" in "".join(p.read_text() for p in dockerfiles)
        assert result.output.count("Prepared") == 2

    def test_prepare_selected_key(self, cli_runner, project, cli_env):
        listing = cli_runner.invoke(app, ["builds", str(project), "-f", "json"])
        key = json.loads(listing.stdout)[1]["unique_key"]

        result = cli_runner.invoke(app, ["prepare", str(project), "--key", key])

        assert result.exit_code == 0, result.output
        prepared = [p.name for p in (cli_env["build_path"] / "demoproject" / "travisci").iterdir()]
        assert prepared == [key]
        assert key in result.output

    def test_prepare_unknown_key(self, cli_runner, project, cli_env):
        result = cli_runner.invoke(app, ["prepare", str(project), "-k", "deadbeef"])

        assert result.exit_code == 1
        assert "Unknown build key(s): deadbeef" in result.output

    def test_prepare_strategy_filter(self, cli_runner, project, cli_env):
        result = cli_runner.invoke(app, ["prepare", str(project), "-s", "JoliCi"])

        assert result.exit_code == 0, result.output
        assert not cli_env["build_path"].exists()

    def test_prepare_unknown_strategy(self, cli_runner, project, cli_env):
        result = cli_runner.invoke(app, ["prepare", str(project), "-s", "GitLab"])

        assert result.exit_code == 1
        assert "No build strategy found for 'GitLab'" in result.output
        assert "TravisCi, JoliCi" in result.output
        assert not cli_env["build_path"].exists()


class TestGlobalOptions:
    """Test options handled by the app callback."""

    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.output.startswith("cibox v")

    def test_missing_settings_file(self, cli_runner, project, cli_env, tmp_path):
        result = cli_runner.invoke(
            app, ["--config", str(tmp_path / "missing.yaml"), "builds", str(project)]
        )

        assert result.exit_code == 1
        assert "Configuration file not found" in result.output

    def test_settings_file(self, cli_runner, project, cli_env, tmp_path, monkeypatch):
        monkeypatch.delenv("CIBOX_TIMEZONE")
        settings = tmp_path / "settings.yaml"
        settings.write_text("timezone: America/Chicago\n")

        result = cli_runner.invoke(
            app, ["-c", str(settings), "builds", str(project), "-f", "json"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)[0]["parameters"]["timezone"] == "America/Chicago"
