"""Terminal text handlers - write commands and read output.

PUBLIC API:
  - write_to_terminal: Write a command line to the active pane
  - write_to_specific_pane: Write a command line to a pane by id
  - read_terminal_output: Read screen or scrollback text from the active pane
"""

import logging
from typing import Any

from ..config import WeztapConfig
from ..errors import ValidationError, failure_response, text_response
from ..types import ToolResponse
from ..wezterm import WeztermError, get_text, send_text
from ._helpers import build_mux_hints, build_pane_hints
from ._validation import require_lines, require_pane_id, require_string

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_LINES = 50
EMPTY_OUTPUT = "(empty output)"


def write_to_terminal(config: WeztapConfig, command: Any) -> ToolResponse:
    """Write a command to the active pane and press Enter.

    Text is sent without bracketed paste so the shell treats it as typed input.

    Args:
        config: CLI settings
        command: Text to write; a newline is appended

    Returns:
        Confirmation echoing the command, or a failure response
    """
    try:
        text = require_string(command, "Command")
        send_text(config, f"{text}\n", paste=False)
    except ValidationError as e:
        logger.info(f"Rejected write_to_terminal: {e}")
        return failure_response("Failed to write to terminal", e)
    except WeztermError as e:
        return failure_response(
            "Failed to write to terminal",
            e,
            build_mux_hints("Check that the command is valid and not excessively long"),
        )

    return text_response(f"Command sent to WezTerm: {text}")


def write_to_specific_pane(config: WeztapConfig, command: Any, pane_id: Any) -> ToolResponse:
    """Write a command to a pane by id and press Enter.

    Args:
        config: CLI settings
        command: Text to write; a newline is appended
        pane_id: Target pane, a non-negative integer

    Returns:
        Confirmation naming the pane, or a failure response
    """
    try:
        text = require_string(command, "Command")
        target = require_pane_id(pane_id)
        send_text(config, f"{text}\n", pane_id=target, paste=False)
    except ValidationError as e:
        logger.info(f"Rejected write_to_specific_pane: {e}")
        return failure_response(f"Failed to write to pane {pane_id}", e)
    except WeztermError as e:
        return failure_response(f"Failed to write to pane {target}", e, build_pane_hints(target))

    return text_response(f"Command sent to pane {target}: {text}")


def read_terminal_output(config: WeztapConfig, lines: Any = DEFAULT_OUTPUT_LINES) -> ToolResponse:
    """Read text from the active pane.

    Args:
        config: CLI settings
        lines: Scrollback lines to read, at most 10000. Zero or negative reads
            only what is currently on screen.

    Returns:
        Captured text with escape sequences intact, "(empty output)" when
        nothing was captured, or a failure response
    """
    try:
        count = require_lines(lines)
        result = get_text(config, lines=count)
    except ValidationError as e:
        logger.info(f"Rejected read_terminal_output: {e}")
        return failure_response("Failed to read terminal output", e)
    except WeztermError as e:
        return failure_response(
            "Failed to read terminal output",
            e,
            build_mux_hints(
                f"Check whether the requested lines ({lines}) exceed the available output",
                "Verify WEZTERM_CLI_PATH if WezTerm is installed in a custom location",
            ),
        )

    return text_response(result.stdout or EMPTY_OUTPUT)
