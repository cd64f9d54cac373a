"""Descriptions of how keys are sized, decorated and grouped into keyboards."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from kbdmodels.key import Key


class Width(IntEnum):
    """Relative width class of a key."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2
    XLARGE = 3
    XXLARGE = 4
    STRETCHED = 5


class Icon(IntEnum):
    """Icon shown on a key instead of a label."""

    NO_ICON = 0
    RETURN = 1
    BACKSPACE = 2
    SHIFT = 3
    SHIFT_LATCHED = 4
    CAPS_LOCK = 5
    CLOSE = 6
    CUSTOM = 7
    LEFT_LAYOUT = 8
    RIGHT_LAYOUT = 9


class State(IntEnum):
    """Interaction state of a key."""

    NORMAL = 0
    PRESSED = 1
    DISABLED = 2
    HIGHLIGHTED = 3


class FontGroup(IntEnum):
    """Font size group used for a key's label."""

    NORMAL = 0
    BIG = 1


@dataclass
class KeyDescription:
    """Layout hints for one key: row, spacers, width, icon and font group."""

    row: int = 0
    use_rtl_icon: bool = False
    left_spacer: bool = False
    right_spacer: bool = False
    width: Width = Width.MEDIUM
    icon: Icon = Icon.NO_ICON
    font_group: FontGroup = FontGroup.NORMAL


@dataclass
class Keyboard:
    """A named style with its keys and their matching descriptions."""

    style_name: str = ""
    keys: list[Key] = field(default_factory=list)
    key_descriptions: list[KeyDescription] = field(default_factory=list)