"""WezTerm pane control with MCP support.

Exposes `wezterm cli` as six tools - write text, read output, send control
characters, list and switch panes. Built on ReplKit2 for dual REPL/MCP
functionality.

PUBLIC API:
  - app: ReplKit2 application instance with weztap commands
  - dispatch: Run a tool by name and return its ToolResponse
"""

from .app import app
from .dispatch import dispatch

__version__ = "0.1.0"
__all__ = ["app", "dispatch"]
