"""Tool dispatch - the single entry point for tool calls.

Routes a tool name and argument map to its handler. Every path, including
malformed requests and unexpected exceptions, ends in a ToolResponse.

PUBLIC API:
  - OPERATIONS: Tool name to adapter mapping
  - dispatch: Validate the request envelope and run the named tool
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Optional

from . import handlers
from .config import WeztapConfig, get_config
from .errors import InvalidRequestError, error_response
from .handlers.terminal import DEFAULT_OUTPUT_LINES
from .types import ToolResponse

logger = logging.getLogger(__name__)

type Operation = Callable[[WeztapConfig, Mapping[str, Any]], ToolResponse]

OPERATIONS: Mapping[str, Operation] = {
    "write_to_terminal": lambda config, args: handlers.write_to_terminal(config, args.get("command")),
    "write_to_specific_pane": lambda config, args: handlers.write_to_specific_pane(
        config, args.get("command"), args.get("pane_id")
    ),
    "read_terminal_output": lambda config, args: handlers.read_terminal_output(
        config, DEFAULT_OUTPUT_LINES if args.get("lines") is None else args["lines"]
    ),
    "send_control_character": lambda config, args: handlers.send_control_character(config, args.get("character")),
    "list_panes": lambda config, args: handlers.list_panes(config),
    "switch_pane": lambda config, args: handlers.switch_pane(config, args.get("pane_id")),
}


def _validate_request(name: Any, arguments: Any) -> Mapping[str, Any]:
    """Check the request envelope before any tool-specific validation.

    Returns:
        The arguments mapping, empty if none was supplied

    Raises:
        InvalidRequestError: If the name is missing or arguments is not a mapping
    """
    if not isinstance(name, str) or not name:
        raise InvalidRequestError("Invalid request: missing tool name")
    if arguments is None:
        return {}
    if not isinstance(arguments, Mapping):
        raise InvalidRequestError("Invalid request: arguments must be an object")
    return arguments


def dispatch(name: Any, arguments: Any = None, config: Optional[WeztapConfig] = None) -> ToolResponse:
    """Run the named tool and return its response.

    Args:
        name: Tool name, e.g. "switch_pane"
        arguments: Tool arguments, e.g. {"pane_id": 2}. None means no arguments.
        config: CLI settings. Defaults to the process-wide configuration.

    Returns:
        ToolResponse; isError is True for envelope, validation and execution failures

    Examples:
        dispatch("switch_pane", {"pane_id": 2})
        dispatch("send_control_character", {"character": "C"})
        dispatch("read_terminal_output", {"lines": 100})
    """
    try:
        args = _validate_request(name, arguments)
        operation = OPERATIONS.get(name)
        if operation is None:
            raise InvalidRequestError(f"Unknown tool: {name}")
    except InvalidRequestError as e:
        logger.info(f"Rejected request: {e}")
        return error_response(f"Error: {e}")

    try:
        return operation(config or get_config(), args)
    except Exception as e:
        logger.exception(f"Tool {name} raised unexpectedly")
        return error_response(f"Error: {e}")
