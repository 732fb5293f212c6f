"""Type definitions for weztap.

Every operation is a one-shot translation into a `wezterm cli` call, so the
only shapes here are per-call values: pane identifiers, captured process
output and the uniform tool response.
"""

from dataclasses import dataclass
from typing import Literal, TypedDict

# WezTerm's own numeric pane id, as printed by `wezterm cli list`
type PaneID = int

# Registered tool names - must stay in step with commands/ and dispatch.OPERATIONS
type ToolName = Literal[
    "write_to_terminal",
    "write_to_specific_pane",
    "read_terminal_output",
    "send_control_character",
    "list_panes",
    "switch_pane",
]


class ContentItem(TypedDict):
    """A single text item in a tool response."""

    type: Literal["text"]
    text: str


class ToolResponse(TypedDict):
    """Uniform response for every tool call, success or failure."""

    content: list[ContentItem]
    isError: bool


@dataclass(frozen=True)
class ExecResult:
    """Captured output of a successful `wezterm cli` invocation."""

    stdout: str
    stderr: str = ""
