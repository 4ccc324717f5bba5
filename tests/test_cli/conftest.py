"""Test fixtures for CLI tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI callback reconfigures the root logger on every invocation."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_env(isolated_settings_env, monkeypatch, tmp_path):
    """Isolated settings with builds prepared under tmp_path."""
    build_path = tmp_path / "builds"
    monkeypatch.setenv("CIBOX_BUILD_PATH", str(build_path))
    monkeypatch.setenv("CIBOX_TIMEZONE", "Europe/Paris")
    return {**isolated_settings_env, "build_path": build_path}
