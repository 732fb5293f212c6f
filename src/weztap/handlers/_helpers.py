"""Troubleshooting hints appended to execution failures.

PUBLIC API:
  - build_mux_hints: Hints for any operation that talks to the mux server
  - build_pane_hints: Hints for operations that target a pane by id
"""

__all__ = ["build_mux_hints", "build_pane_hints"]


def build_mux_hints(*extra: str) -> list[str]:
    """Build hints for reaching the WezTerm mux server.

    Args:
        *extra: Operation-specific hints, listed after the common ones

    Returns:
        Hint lines, without bullets
    """
    return [
        "Make sure WezTerm is running with an active terminal session",
        'Verify the mux server is enabled in ~/.wezterm.lua: unix_domains = { { name = "unix" } }',
        "Restart WezTerm after changing its config",
        "Run 'wezterm cli list' in a terminal to test connectivity",
        *extra,
    ]


def build_pane_hints(pane_id: object) -> list[str]:
    """Build hints for an operation addressed to a specific pane.

    Args:
        pane_id: The pane id the caller asked for

    Returns:
        Hint lines, without bullets
    """
    return [
        f"Verify pane {pane_id} exists: use list_panes to see all pane IDs",
        "The pane may have been closed after its ID was read",
        "Make sure WezTerm is running with the mux server enabled",
        "Run 'wezterm cli list' in a terminal to test connectivity",
    ]
