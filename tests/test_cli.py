"""Test suite for the sales service CLI."""

import pytest
from typer.testing import CliRunner

from salesdemo import __version__
from salesdemo.cli import app
from salesdemo.config import reload_config

runner = CliRunner()


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("RATE_LIMIT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    reload_config()
    yield
    monkeypatch.delenv("RATE_LIMIT", raising=False)
    reload_config()


def test_cli_version():
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"salesdemo version {__version__}" in result.output


def test_cli_show_config():
    """Test show-config prints settings and validates them."""
    result = runner.invoke(app, ["show-config"])
    assert result.exit_code == 0
    assert "rate_limit" in result.output
    assert "Configuration is valid" in result.output


def test_cli_show_config_invalid(monkeypatch):
    """Test show-config exits non-zero for invalid settings."""
    monkeypatch.setenv("RATE_LIMIT", "whenever")
    reload_config()
    result = runner.invoke(app, ["show-config"])
    assert result.exit_code == 1
    assert "RATE_LIMIT has invalid format" in result.output


def test_cli_no_args_shows_help():
    """Test bare invocation shows help."""
    result = runner.invoke(app, [])
    assert "Sales Service CLI" in result.output
