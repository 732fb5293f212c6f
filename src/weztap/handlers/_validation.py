"""Argument validation shared by the operation handlers.

All validators raise ValidationError with a message meant for the caller.
"""

from typing import Any

from ..errors import ValidationError
from ..types import PaneID

MAX_OUTPUT_LINES = 10000


def _as_integer(value: Any) -> int | None:
    """Return value as an int if it is integral, else None.

    JSON numbers may arrive as floats, so 3.0 counts; True does not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def require_string(value: Any, name: str) -> str:
    """Check that value is a string."""
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string")
    return value


def require_pane_id(value: Any) -> PaneID:
    """Check that value is a non-negative integer pane id."""
    pane_id = _as_integer(value)
    if pane_id is None or pane_id < 0:
        raise ValidationError(f"Invalid pane ID: {value}. Pane ID must be a non-negative integer.")
    return pane_id


def require_lines(value: Any) -> int:
    """Check a line count: any integer up to MAX_OUTPUT_LINES.

    Zero and negative counts are valid and mean "current screen only".
    """
    lines = _as_integer(value)
    if lines is None:
        raise ValidationError(f"Lines must be an integer, got: {value!r} (type: {type(value).__name__})")
    if lines > MAX_OUTPUT_LINES:
        raise ValidationError(f"Lines cannot exceed {MAX_OUTPUT_LINES} (requested: {lines})")
    return lines
