"""Shared error handling utilities for weztap.

Every tool call resolves to the same response shape, so handlers and the
dispatcher build their results through these helpers rather than raising.

PUBLIC API:
  - ValidationError: Tool arguments have the wrong type or shape
  - InvalidRequestError: The request envelope itself is malformed
  - text_response: Create a successful response
  - error_response: Create a failed response
  - failure_response: Create a failed response from an exception with context
  - response_text: Extract the text of a response
  - tool_result: Extract the text of a response, raising ToolError on failure
"""

from fastmcp.exceptions import ToolError

from .types import ToolResponse
from .wezterm.exceptions import WeztermError


class ValidationError(ValueError):
    """Raised when a tool argument fails validation."""

    pass


class InvalidRequestError(ValidationError):
    """Raised when a request has no usable tool name or arguments."""

    pass


def text_response(text: str) -> ToolResponse:
    """Create a successful response.

    Args:
        text: Confirmation message or raw command output

    Returns:
        Response with a single text item and isError False
    """
    return {"content": [{"type": "text", "text": text}], "isError": False}


def error_response(message: str) -> ToolResponse:
    """Create a failed response.

    Args:
        message: The error message to display

    Returns:
        Response with a single text item and isError True
    """
    return {"content": [{"type": "text", "text": message}], "isError": True}


def failure_response(context: str, error: Exception, hints: list[str] | None = None) -> ToolResponse:
    """Create a failed response for an operation that raised.

    Execution failures get troubleshooting hints appended; validation failures
    are the caller's mistake and are reported without them.

    Args:
        context: What was being attempted, e.g. "Failed to switch pane"
        error: The exception raised by validation or execution
        hints: Troubleshooting steps for execution failures

    Returns:
        Failed response with "{context}: {error}" and optional hints
    """
    message = f"{context}: {error}"
    if hints and isinstance(error, WeztermError):
        message += "\n\nTroubleshooting:\n" + "\n".join(f"- {hint}" for hint in hints)
    return error_response(message)


def response_text(response: ToolResponse) -> str:
    """Get the text of a response."""
    return "\n".join(item["text"] for item in response["content"])


def tool_result(response: ToolResponse) -> str:
    """Get the text of a response for a command to return.

    Raises:
        ToolError: If the response is a failure, so MCP clients receive isError
    """
    text = response_text(response)
    if response["isError"]:
        raise ToolError(text)
    return text
