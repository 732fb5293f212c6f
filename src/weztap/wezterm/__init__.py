"""Pure wezterm cli operations.

PUBLIC API:
  - build_command: Quote tokens into one shell command string
  - run_wezterm: Run wezterm cli with timeout and output limits
  - send_text: Send text to a pane
  - get_text: Capture screen or scrollback text
  - list_panes: List panes
  - activate_pane: Switch the active pane
  - CONTROL_CHARACTERS: Mnemonic to control byte map
  - supported_characters: Supported mnemonics for messages
  - WeztermError, CommandFailedError, CommandTimeoutError, OutputLimitError
"""

from .core import build_command, run_wezterm
from .pane import send_text, get_text, list_panes, activate_pane
from .control import CONTROL_CHARACTERS, supported_characters
from .exceptions import WeztermError, CommandFailedError, CommandTimeoutError, OutputLimitError

__all__ = [
    "build_command",
    "run_wezterm",
    "send_text",
    "get_text",
    "list_panes",
    "activate_pane",
    "CONTROL_CHARACTERS",
    "supported_characters",
    "WeztermError",
    "CommandFailedError",
    "CommandTimeoutError",
    "OutputLimitError",
]
