"""A single key on a keyboard layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from kbdmodels.area import Area, Margins, Point, Rect


class Action(IntEnum):
    """What a key does when activated."""

    INSERT = 0
    SHIFT = 1
    BACKSPACE = 2
    SPACE = 3
    CYCLE = 4
    LAYOUT_MENU = 5
    SYM = 6
    RETURN = 7
    COMMIT = 8
    DECIMAL_SEPARATOR = 9
    PLUS_MINUS_TOGGLE = 10
    SWITCH = 11
    ON_OFF_TOGGLE = 12
    COMPOSE = 13
    LEFT = 14
    UP = 15
    RIGHT = 16
    DOWN = 17
    CLOSE = 18
    COMMAND = 19
    TAB = 20
    DEAD = 21
    LEFT_LAYOUT = 22
    RIGHT_LAYOUT = 23


class Style(IntEnum):
    """Visual style of a key."""

    NORMAL = 0
    SPECIAL = 1
    DEAD = 2


@dataclass(eq=False)
class Key:
    """A key with position, area, label, action and styling."""

    origin: Point = field(default_factory=Point)
    area: Area = field(default_factory=Area)
    label: str = ""
    action: Action = Action.INSERT
    style: Style = Style.NORMAL
    margins: Margins = field(default_factory=Margins)
    icon: bytes = b""
    has_extended_keys: bool = False
    command_sequence: str = ""

    def valid(self) -> bool:
        """True when the key has a valid size and is not an unlabelled commit key."""
        return self.area.size.is_valid() and (
            bool(self.label) or self.action != Action.COMMIT
        )

    def rect(self) -> Rect:
        """The key's rectangle, from its origin and area size."""
        return Rect.from_origin_size(self.origin, self.area.size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return (
            self.origin == other.origin
            and self.area == other.area
            and self.label == other.label
            and self.icon == other.icon
        )

    __hash__ = None  # type: ignore[assignment]