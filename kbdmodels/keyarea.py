"""A region of the keyboard holding a set of keys."""

from __future__ import annotations

from dataclasses import dataclass, field

from kbdmodels.area import Area, Point, Rect
from kbdmodels.key import Key


@dataclass(eq=False)
class KeyArea:
    """A list of keys placed inside a positioned area."""

    keys: list[Key] = field(default_factory=list)
    origin: Point = field(default_factory=Point)
    area: Area = field(default_factory=Area)

    def has_keys(self) -> bool:
        """True when the area holds at least one key."""
        return bool(self.keys)

    def rect(self) -> Rect:
        """The area's rectangle, from its origin and area size."""
        return Rect.from_origin_size(self.origin, self.area.size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyArea):
            return NotImplemented
        return self.area == other.area and self.keys == other.keys

    __hash__ = None  # type: ignore[assignment]