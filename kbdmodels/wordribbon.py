"""A list model of word candidates shown above the keyboard."""

from __future__ import annotations

from typing import Iterable

from kbdmodels.area import Area, Point, Rect
from kbdmodels.signals import Signal
from kbdmodels.wordcandidate import Source, WordCandidate

USER_ROLE = 0x0100


class WordRibbon:
    """Word candidates with placement, exposed as rows with a ``word`` role.

    Signals:
        rows_inserted(first, last), model_reset(), enabled_changed(bool),
        word_candidate_selected(str), user_candidate_selected(str).
    """

    WORD_ROLE = USER_ROLE + 1

    def __init__(self) -> None:
        self._candidates: list[WordCandidate] = []
        self.origin = Point()
        self.area = Area()
        self._roles: dict[int, bytes] = {self.WORD_ROLE: b"word"}
        self._enabled = False

        self.rows_inserted = Signal()
        self.model_reset = Signal()
        self.enabled_changed = Signal()
        self.word_candidate_selected = Signal()
        self.user_candidate_selected = Signal()

    def valid(self) -> bool:
        """True when the ribbon's area is not empty."""
        return not self.area.size.is_empty()

    def rect(self) -> Rect:
        """The ribbon's rectangle, from its origin and area size."""
        return Rect.from_origin_size(self.origin, self.area.size)

    @property
    def candidates(self) -> list[WordCandidate]:
        """A copy of the current candidates."""
        return list(self._candidates)

    def append_candidate(self, candidate: WordCandidate) -> None:
        """Add ``candidate`` as the last row."""
        row = len(self._candidates)
        self._candidates.append(candidate)
        self.rows_inserted.emit(row, row)

    def clear_candidates(self) -> None:
        """Remove every candidate."""
        self._candidates.clear()
        self.model_reset.emit()

    def data(self, row: int, role: int) -> str | None:
        """The value for ``role`` at ``row``, or None if either is unknown."""
        if row < 0 or row >= len(self._candidates):
            return None
        if role == self.WORD_ROLE:
            return self._candidates[row].word
        return None

    def row_count(self) -> int:
        """Number of candidates."""
        return len(self._candidates)

    def role_names(self) -> dict[int, bytes]:
        """Mapping of role numbers to their names."""
        return dict(self._roles)

    @property
    def enabled(self) -> bool:
        """Whether the ribbon is enabled; setting it emits ``enabled_changed``."""
        return self._enabled

    @enabled.setter
    def enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        self.enabled_changed.emit(self._enabled)

    def on_word_candidate_pressed(self, candidate: WordCandidate) -> None:
        """Append the pressed candidate."""
        self.append_candidate(candidate)

    def on_word_candidate_released(self, candidate: WordCandidate) -> None:
        """Announce the released candidate's word according to its source."""
        if candidate.source in (Source.PREDICTION, Source.SPELL_CHECKING):
            self.word_candidate_selected.emit(candidate.word)
        elif candidate.source == Source.USER:
            self.user_candidate_selected.emit(candidate.word)

    def on_word_candidates_changed(self, candidates: Iterable[WordCandidate]) -> None:
        """Replace all candidates with ``candidates``."""
        self.clear_candidates()
        for candidate in candidates:
            self.append_candidate(candidate)

    def set_word_ribbon_visible(self, visible: bool) -> None:
        """Clear the candidates whenever visibility changes."""
        del visible
        self.clear_candidates()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordRibbon):
            return NotImplemented
        return self.area == other.area and self._candidates == other._candidates

    __hash__ = None  # type: ignore[assignment]