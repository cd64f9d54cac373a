"""Word candidates offered by a word engine."""

from __future__ import annotations

from enum import IntEnum

from kbdmodels.area import Area, Point, Rect


class Source(IntEnum):
    """Where a word candidate came from."""

    UNKNOWN = 0
    SPELL_CHECKING = 1
    PREDICTION = 2
    USER = 3


class WordCandidate:
    """A candidate word with its display label and placement."""

    def __init__(self, source: Source = Source.UNKNOWN, word: str = "") -> None:
        self.origin = Point()
        self.area = Area()
        self.source = source
        self.word = word
        if source == Source.USER:
            self.label = f"Add '{word}' to user dictionary"
        else:
            self.label = word

    def valid(self) -> bool:
        """True when the candidate has a valid size and a non-empty label."""
        return self.area.size.is_valid() and bool(self.label)

    def rect(self) -> Rect:
        """The candidate's rectangle, from its origin and area size."""
        return Rect.from_origin_size(self.origin, self.area.size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordCandidate):
            return NotImplemented
        return (
            self.origin == other.origin
            and self.area == other.area
            and self.label == other.label
            and self.source == other.source
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"WordCandidate(source={self.source!r}, word={self.word!r}, "
            f"label={self.label!r}, origin={self.origin!r}, area={self.area!r})"
        )