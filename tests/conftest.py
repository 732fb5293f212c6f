"""Pytest fixtures for weztap tests."""

import sys
from unittest.mock import patch

import pytest

from weztap.config import WeztapConfig
from weztap.types import ExecResult


@pytest.fixture
def config():
    """Default configuration, independent of the environment and any weztap.toml."""
    return WeztapConfig(cli=("wezterm", "cli"))


@pytest.fixture
def mock_run():
    """Patch the executor behind every pane operation.

    Succeeds with empty output unless a test sets return_value or side_effect.
    """
    with patch("weztap.wezterm.pane.run_wezterm", return_value=ExecResult(stdout="")) as mock:
        yield mock


@pytest.fixture
def python_cli():
    """Build a config whose CLI is a Python one-liner."""

    def _make(code: str, **kwargs) -> WeztapConfig:
        return WeztapConfig(cli=(sys.executable, "-c", code), **kwargs)

    return _make


@pytest.fixture
def echo_argv():
    """CLI prefix that prints the argv it received as JSON."""
    return (sys.executable, "-c", "import json, sys; print(json.dumps(sys.argv[1:]))")
