"""Pane operations - every wezterm cli verb weztap uses."""

from typing import Optional

from ..config import WeztapConfig
from ..types import ExecResult, PaneID
from .core import run_wezterm


def send_text(config: WeztapConfig, text: str, pane_id: Optional[PaneID] = None, paste: bool = True) -> ExecResult:
    """Send text to a pane as if typed or pasted.

    Args:
        config: CLI settings
        text: Text to send, including any trailing newline or control byte
        pane_id: Target pane. Defaults to the active pane.
        paste: Use bracketed paste. Disable to have the text act like typing.

    Returns:
        ExecResult from wezterm cli

    Examples:
        send_text(config, "ls -la\\n", paste=False)    # Run a command
        send_text(config, "\\x03")                     # Ctrl+C
        send_text(config, "make\\n", pane_id=3, paste=False)
    """
    args = ["send-text"]
    if pane_id is not None:
        args.extend(["--pane-id", str(pane_id)])
    if not paste:
        args.append("--no-paste")
    args.append(text)
    return run_wezterm(args, config)


def get_text(config: WeztapConfig, lines: int = 0) -> ExecResult:
    """Capture pane text with escape sequences preserved.

    Args:
        config: CLI settings
        lines: Scrollback lines to include. Zero or less captures only the
            visible screen.

    Returns:
        ExecResult whose stdout is the captured text
    """
    args = ["get-text", "--escapes"]
    if lines > 0:
        args.extend(["--start-line", str(-lines)])
    return run_wezterm(args, config)


def list_panes(config: WeztapConfig) -> ExecResult:
    """List windows, tabs and panes known to the mux server."""
    return run_wezterm(["list"], config)


def activate_pane(config: WeztapConfig, pane_id: PaneID) -> ExecResult:
    """Make a pane the active one."""
    return run_wezterm(["activate-pane", "--pane-id", str(pane_id)], config)
