"""Shared pytest fixtures for patternctl tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from patternctl.config.discovery import CONFIG_ENV_VAR
from patternctl.config.logging import configure_logging
from patternctl.config.settings import PatternSettings
from patternctl.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_process_state() -> Iterator[None]:
    """Route logs to stderr and undo logging/telemetry changes after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("patternctl")
    pkg_level = pkg.level
    configure_logging()
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary working directory with no config discovery overrides."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> PatternSettings:
    """Default settings, isolated from any patternctl.toml on the host."""
    return PatternSettings.from_cli(start=project_root)


@pytest.fixture
def _isolated_cwd(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI discovers only test config.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes. Tests that write a ``patternctl.toml`` can request
    ``tmp_path`` directly (pytest deduplicates: it's the same directory).
    """
    monkeypatch.chdir(project_root)
