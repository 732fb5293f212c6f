"""List and switch WezTerm panes."""

from ..app import app
from ..dispatch import dispatch
from ..errors import tool_result


@app.command(
    fastmcp={"type": "tool", "tags": {"inspection"}, "description": "Lists all panes in the current WezTerm window"},
)
def list_panes(state) -> str:
    """List all panes with their window, tab and pane ids."""
    return tool_result(dispatch("list_panes", {}, state.config))


@app.command(
    fastmcp={"type": "tool", "tags": {"control"}, "description": "Switches to a specific pane in WezTerm"},
)
def switch_pane(state, pane_id: int) -> str:
    """Activate a pane by id (non-negative integer, see list_panes)."""
    return tool_result(dispatch("switch_pane", {"pane_id": pane_id}, state.config))
