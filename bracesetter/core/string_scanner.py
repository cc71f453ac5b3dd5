"""
String-literal state tracking shared by the JSON scans.

Every structural scan must ignore brackets that appear inside string
literals. This module holds the one piece of state that decides that.
"""

from collections.abc import Generator

from .constants import BOM, ZERO_WIDTH_CHARS


class StringScanState:
    """Tracks whether a left-to-right scan is inside a double-quoted string."""

    def __init__(self) -> None:
        self.in_string = False
        self.escaped = False

    def consume(self, char: str) -> bool:
        """
        Update state for ``char`` and report whether it belongs to a string.

        Returns:
            True if the character is part of a string literal (including
            its opening and closing quotes), False if it is structural.
        """
        if self.in_string:
            if self.escaped:
                self.escaped = False
            elif char == "\\":
                self.escaped = True
            elif char == '"':
                self.in_string = False
            return True

        if char == '"':
            self.in_string = True
            self.escaped = False
            return True

        return False

    def reset(self) -> None:
        """Reset string state tracking."""
        self.in_string = False
        self.escaped = False


def iterate_structural_chars(text: str) -> Generator[tuple[int, str], None, None]:
    """
    Iterate over characters that lie outside string literals.

    Yields:
        Tuple of (index, character) for every structural character
    """
    state = StringScanState()
    for i, char in enumerate(text):
        if not state.consume(char):
            yield i, char


_INVISIBLE_TABLE = str.maketrans("", "", BOM + ZERO_WIDTH_CHARS)


def remove_invisible_chars(text: str) -> str:
    """Remove the byte-order mark and zero-width characters from text."""
    return text.translate(_INVISIBLE_TABLE)
