"""Configuration management for weztap.

Settings come from the [default] table of weztap.toml, with the
WEZTERM_CLI_PATH environment variable taking precedence for the CLI prefix.

Example weztap.toml:

    [default]
    cli = ["/opt/wezterm/bin/wezterm", "cli"]
    timeout = 10.0
    max_output = 524288
"""

import logging
import os
import shlex
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CLI_PATH_ENV = "WEZTERM_CLI_PATH"

DEFAULT_CLI = ("wezterm", "cli")
DEFAULT_TIMEOUT = 30.0  # seconds
DEFAULT_MAX_OUTPUT = 1024 * 1024  # bytes, stdout + stderr combined


@dataclass(frozen=True)
class WeztapConfig:
    """Settings shared by every wezterm cli invocation.

    Attributes:
        cli: Program and fixed leading arguments, e.g. ("wezterm", "cli").
        timeout: Wall-clock limit per invocation, in seconds.
        max_output: Maximum captured output per invocation, in bytes.
    """

    cli: tuple[str, ...] = DEFAULT_CLI
    timeout: float = DEFAULT_TIMEOUT
    max_output: int = DEFAULT_MAX_OUTPUT

    def __post_init__(self):
        if not self.cli or not all(isinstance(token, str) and token for token in self.cli):
            raise ValueError(f"cli must be a non-empty list of non-empty strings, got: {self.cli!r}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got: {self.timeout}")
        if self.max_output <= 0:
            raise ValueError(f"max_output must be positive, got: {self.max_output}")


def _find_config_file() -> Optional[Path]:
    """Find weztap.toml in current or parent directories."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / "weztap.toml"
        if config_file.exists():
            return config_file

    return None


def _load_config(path: Optional[Path] = None) -> dict:
    """Load raw configuration from file."""
    if path is None:
        path = _find_config_file()

    if path is None or not path.exists():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def _parse_cli(value: str | list) -> tuple[str, ...]:
    """Turn a configured CLI prefix into argument tokens.

    Strings are split shell-style so a quoted path containing spaces stays one token.
    """
    if isinstance(value, str):
        return tuple(shlex.split(value))
    if isinstance(value, list):
        return tuple(value)
    raise ValueError(f"cli must be a string or list of strings, got: {value!r}")


def load_config(path: Optional[Path] = None) -> WeztapConfig:
    """Build configuration from weztap.toml and the environment.

    Args:
        path: Explicit config file. Defaults to searching upward from cwd.

    Returns:
        WeztapConfig with file values applied, then the environment override.

    Raises:
        ValueError: If a configured value is malformed.
    """
    defaults = _load_config(path).get("default", {})

    cli = _parse_cli(defaults["cli"]) if "cli" in defaults else DEFAULT_CLI
    env_cli = os.environ.get(CLI_PATH_ENV)
    if env_cli:
        cli = _parse_cli(env_cli)
        logger.debug(f"Using {CLI_PATH_ENV}: {cli}")

    return WeztapConfig(
        cli=cli,
        timeout=float(defaults.get("timeout", DEFAULT_TIMEOUT)),
        max_output=int(defaults.get("max_output", DEFAULT_MAX_OUTPUT)),
    )


# Global instance
_config: Optional[WeztapConfig] = None


def get_config() -> WeztapConfig:
    """Get or create the process-wide configuration."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
