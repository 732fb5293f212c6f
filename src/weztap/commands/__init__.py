"""weztap commands."""

from .terminal import write_to_terminal, write_to_specific_pane, read_terminal_output
from .control import send_control_character
from .panes import list_panes, switch_pane

__all__ = [
    "write_to_terminal",
    "write_to_specific_pane",
    "read_terminal_output",
    "send_control_character",
    "list_panes",
    "switch_pane",
]
