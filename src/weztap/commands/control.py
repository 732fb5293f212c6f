"""Send control characters to the active pane.

PUBLIC API:
  - send_control_character: Send Ctrl+<letter>
"""

from ..app import app
from ..dispatch import dispatch
from ..errors import tool_result
from ..wezterm import supported_characters


@app.command(
    fastmcp={
        "type": "tool",
        "tags": {"input", "control"},
        "description": "Sends control characters to the active WezTerm pane. "
        f"Supported: {supported_characters().replace(' ', '')}",
    },
)
def send_control_character(state, character: str) -> str:
    """Send a control character to the active pane.

    Args:
        state: Application state with configuration.
        character: Mnemonic letter, e.g. "c" for Ctrl+C, "r" for Ctrl+R.

    Returns:
        Confirmation or error text.

    Examples:
        send_control_character("c")    # Interrupt running program
        send_control_character("d")    # EOF, exit a REPL
        send_control_character("l")    # Clear screen
    """
    return tool_result(dispatch("send_control_character", {"character": character}, state.config))
