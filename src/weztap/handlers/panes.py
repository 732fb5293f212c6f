"""Pane handlers - list and switch panes.

PUBLIC API:
  - list_panes: List all panes known to the mux server
  - switch_pane: Activate a pane by id
"""

import logging
from typing import Any

from ..config import WeztapConfig
from ..errors import ValidationError, failure_response, text_response
from ..types import ToolResponse
from ..wezterm import WeztermError, activate_pane, list_panes as wezterm_list_panes
from ._helpers import build_mux_hints, build_pane_hints
from ._validation import require_pane_id

logger = logging.getLogger(__name__)


def list_panes(config: WeztapConfig) -> ToolResponse:
    """List all panes as printed by `wezterm cli list`."""
    try:
        result = wezterm_list_panes(config)
    except WeztermError as e:
        return failure_response(
            "Failed to list panes",
            e,
            build_mux_hints(
                "Check that your WezTerm version supports the cli subcommand",
                "Verify WEZTERM_CLI_PATH if WezTerm is installed in a custom location",
            ),
        )

    return text_response(result.stdout)


def switch_pane(config: WeztapConfig, pane_id: Any) -> ToolResponse:
    """Make a pane the active one.

    Args:
        config: CLI settings
        pane_id: Pane to activate, a non-negative integer

    Returns:
        "Switched to pane {id}", or a failure response
    """
    try:
        target = require_pane_id(pane_id)
        activate_pane(config, target)
    except ValidationError as e:
        logger.info(f"Rejected switch_pane: {e}")
        return failure_response("Failed to switch pane", e)
    except WeztermError as e:
        return failure_response("Failed to switch pane", e, build_pane_hints(target))

    return text_response(f"Switched to pane {target}")
