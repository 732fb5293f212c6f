"""Write commands to panes and read their output.

PUBLIC API:
  - write_to_terminal: Write text to the active pane
  - write_to_specific_pane: Write text to a pane by id
  - read_terminal_output: Read output from the active pane
"""

from ..app import app
from ..dispatch import dispatch
from ..errors import tool_result
from ..handlers.terminal import DEFAULT_OUTPUT_LINES


@app.command(
    fastmcp={
        "type": "tool",
        "tags": {"input"},
        "description": "Writes text to the active WezTerm pane - often used to run commands. "
        "WARNING: This executes commands with your user permissions. Only use with trusted input.",
    },
)
def write_to_terminal(state, command: str) -> str:
    """Write a command to the active pane followed by Enter.

    Args:
        state: Application state with configuration.
        command: The command to run or text to write.

    Returns:
        Confirmation or error text.
    """
    return tool_result(dispatch("write_to_terminal", {"command": command}, state.config))


@app.command(
    fastmcp={
        "type": "tool",
        "tags": {"input"},
        "description": "Writes text to a specific WezTerm pane by pane ID. "
        "WARNING: This executes commands with your user permissions. Only use with trusted input.",
    },
)
def write_to_specific_pane(state, command: str, pane_id: int) -> str:
    """Write a command to a pane by id followed by Enter.

    Args:
        state: Application state with configuration.
        command: The command to run or text to write.
        pane_id: Target pane ID (non-negative integer, see list_panes).

    Returns:
        Confirmation or error text.
    """
    return tool_result(dispatch("write_to_specific_pane", {"command": command, "pane_id": pane_id}, state.config))


@app.command(
    fastmcp={
        "type": "tool",
        "tags": {"inspection", "output"},
        "description": "Reads output from the active WezTerm pane. lines defaults to 50 (max 10000); "
        "use 0 or negative to get only the current screen content.",
    },
)
def read_terminal_output(state, lines: int = DEFAULT_OUTPUT_LINES) -> str:
    """Read screen or scrollback text from the active pane.

    Args:
        state: Application state with configuration.
        lines: Scrollback lines to read. Defaults to 50.

    Returns:
        Captured text, "(empty output)", or error text.
    """
    return tool_result(dispatch("read_terminal_output", {"lines": lines}, state.config))
