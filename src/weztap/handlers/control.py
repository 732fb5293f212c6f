"""Control character handler.

PUBLIC API:
  - send_control_character: Send Ctrl+<letter> to the active pane
"""

import logging
from typing import Any

from ..config import WeztapConfig
from ..errors import ValidationError, failure_response, text_response
from ..types import ToolResponse
from ..wezterm import CONTROL_CHARACTERS, WeztermError, send_text, supported_characters
from ._helpers import build_mux_hints

logger = logging.getLogger(__name__)


def _resolve_control_character(character: Any) -> str:
    """Map a mnemonic letter to its control byte.

    Raises:
        ValidationError: If character is empty, not a string, or unmapped
    """
    if not isinstance(character, str) or not character:
        raise ValidationError(f"Character must be a non-empty string. Supported: {supported_characters()}")

    control = CONTROL_CHARACTERS.get(character.lower())
    if control is None:
        raise ValidationError(f"Unknown control character: {character}. Supported: {supported_characters()}")
    return control


def send_control_character(config: WeztapConfig, character: Any) -> ToolResponse:
    """Send a control character to the active pane.

    Args:
        config: CLI settings
        character: Mnemonic letter, either case, e.g. "c" for Ctrl+C

    Returns:
        Confirmation like "Sent control character: Ctrl+C", or a failure response

    Examples:
        send_control_character(config, "c")    # Interrupt
        send_control_character(config, "D")    # EOF
        send_control_character(config, "r")    # Reverse history search
    """
    try:
        control = _resolve_control_character(character)
        send_text(config, control)
    except ValidationError as e:
        logger.info(f"Rejected send_control_character: {e}")
        return failure_response("Failed to send control character", e)
    except WeztermError as e:
        return failure_response("Failed to send control character", e, build_mux_hints())

    return text_response(f"Sent control character: Ctrl+{character.upper()}")
