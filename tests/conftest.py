"""Shared pytest fixtures for letcalc tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from letcalc.core.expression_lang.environment import Environment
from letcalc.core.session import CalcSession


@pytest.fixture
def env() -> Environment:
    """Return an empty environment."""
    return Environment()


@pytest.fixture
def session() -> CalcSession:
    """Return a session with no configured variables."""
    return CalcSession()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no config-related environment variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LETCALC_CONFIG", raising=False)
    monkeypatch.delenv("LETCALC_LOG_LEVEL", raising=False)
    return tmp_path
