"""The text state of the editor: preedit, surrounding text and cursor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class PreeditFace(IntEnum):
    """How the preedit should be presented."""

    DEFAULT = 0
    NO_CANDIDATES = 1
    KEY_PRESS = 2
    UNCONVERTIBLE = 3
    ACTIVE = 4


@dataclass
class Text:
    """Preedit being edited, text around the cursor and the primary candidate."""

    preedit: str = ""
    surrounding: str = ""
    primary_candidate: str = ""
    surrounding_offset: int = 0
    preedit_face: PreeditFace = PreeditFace.DEFAULT
    cursor_position: int = 0

    def set_preedit(self, preedit: str, cursor_pos_override: int = -1) -> None:
        """Replace the preedit; an out-of-range cursor goes to its end."""
        if cursor_pos_override < 0 or cursor_pos_override > len(preedit):
            cursor_pos_override = len(preedit)
        self.preedit = preedit
        self.cursor_position = cursor_pos_override

    def append_to_preedit(self, appendix: str) -> None:
        """Insert ``appendix`` at the cursor and move the cursor past it."""
        pos = self.cursor_position
        if pos >= 0:
            text = self.preedit
            if pos > len(text):
                text = text.ljust(pos)
            self.preedit = text[:pos] + appendix + text[pos:]
        self.cursor_position += len(appendix)

    def remove_from_preedit(self, length: int) -> None:
        """Delete ``length`` characters before the cursor.

        Raises ValueError, leaving the preedit unchanged, when ``length`` is
        not positive or exceeds the preedit or the cursor position.
        """
        if length <= 0:
            raise ValueError("length must be at least 1")
        if len(self.preedit) < length or self.cursor_position < length:
            raise ValueError("cannot remove more characters than precede the cursor")
        end = self.cursor_position
        self.preedit = self.preedit[: end - length] + self.preedit[end:]
        self.cursor_position -= length

    def commit_preedit(self) -> None:
        """Move the preedit into the surrounding text and reset editing state."""
        self.surrounding = self.preedit
        self.surrounding_offset = len(self.preedit)
        self.preedit = ""
        self.primary_candidate = ""
        self.preedit_face = PreeditFace.DEFAULT
        self.cursor_position = 0

    def surrounding_left(self) -> str:
        """Surrounding text left of the cursor offset."""
        return self.surrounding[: max(self.surrounding_offset, 0)]

    def surrounding_right(self) -> str:
        """Surrounding text from the cursor offset onwards."""
        return self.surrounding[max(self.surrounding_offset, 0):]