"""Control characters that can be typed into a pane.

PUBLIC API:
  - CONTROL_CHARACTERS: Read-only map of mnemonic letter to control byte
  - supported_characters: Sorted, comma separated list of mnemonics
"""

from types import MappingProxyType

# h, i, j, m, o are left out: they alias Backspace, Tab, Line Feed, Enter and Shift In.
_MNEMONICS = "abcdefgklnpqrstuvwxyz"

CONTROL_CHARACTERS = MappingProxyType({letter: chr(ord(letter) - ord("a") + 1) for letter in _MNEMONICS})
"""Mnemonic to control byte, e.g. "c" -> "\\x03" (Ctrl+C, SIGINT), "d" -> "\\x04" (EOF)."""


def supported_characters() -> str:
    """Get supported mnemonics for error messages, e.g. "a, b, c, ..."."""
    return ", ".join(sorted(CONTROL_CHARACTERS))
