"""weztap ReplKit2 application.

Main application entry point providing dual REPL/MCP functionality for
WezTerm pane control. Commands are thin wrappers around the dispatcher, which
turns each call into a single `wezterm cli` invocation.
"""

from dataclasses import dataclass, field

from replkit2 import App

from .config import WeztapConfig, get_config


@dataclass
class WezTapState:
    """Application state for weztap.

    Holds the configuration built once at startup; every tool call receives it
    by reference. No pane state is kept - that lives in the WezTerm mux server.
    """

    config: WeztapConfig = field(default_factory=get_config)


# Must be created before command imports for decorator registration
app = App(
    "weztap",
    WezTapState,
    uri_scheme="weztap",
    fastmcp={
        "description": "WezTerm pane control via wezterm cli",
        "tags": {"terminal", "automation", "wezterm"},
    },
)


# Command imports trigger @app.command decorator registration
from .commands import terminal  # noqa: E402, F401
from .commands import control  # noqa: E402, F401
from .commands import panes  # noqa: E402, F401


if __name__ == "__main__":
    import sys

    if "--mcp" in sys.argv:
        app.mcp.run()
    else:
        app.run(title="weztap")
