"""Operation handlers - one per tool.

Each handler validates its arguments, runs a single wezterm cli command and
returns a ToolResponse. Validation and execution errors never escape.

PUBLIC API:
  - write_to_terminal: Write a command to the active pane
  - write_to_specific_pane: Write a command to a pane by id
  - read_terminal_output: Read screen or scrollback text
  - send_control_character: Send Ctrl+<letter>
  - list_panes: List panes
  - switch_pane: Activate a pane by id
"""

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
