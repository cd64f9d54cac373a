"""A list model exposing the keys of a key area, one row per key."""

from __future__ import annotations

import copy
import logging
from enum import IntEnum
from typing import Any

from kbdmodels.area import Point
from kbdmodels.key import Action, Key
from kbdmodels.keyarea import KeyArea
from kbdmodels.signals import Signal

_log = logging.getLogger(__name__)

USER_ROLE = 0x0100

BorderRect = tuple[float, float, float, float]


class LayoutState(IntEnum):
    """Which variant of the keyboard is active."""

    DEFAULT = 0
    SHIFTED = 1
    PRIMARY_SYMBOL = 2
    SECONDARY_SYMBOL = 3
    DEADKEY = 4


class Role(IntEnum):
    """Data roles available for every key row."""

    KEY_RECTANGLE = USER_ROLE + 1
    KEY_REACTIVE_AREA = USER_ROLE + 2
    KEY_BACKGROUND = USER_ROLE + 3
    KEY_BACKGROUND_BORDERS = USER_ROLE + 4
    KEY_TEXT = USER_ROLE + 5
    KEY_FONT = USER_ROLE + 6
    KEY_FONT_COLOR = USER_ROLE + 7
    KEY_FONT_SIZE = USER_ROLE + 8
    KEY_FONT_STRETCH = USER_ROLE + 9
    KEY_ICON = USER_ROLE + 10
    KEY_ACTION_INSERT = USER_ROLE + 11
    KEY_ACTION = USER_ROLE + 12


_ROLE_NAMES: dict[int, bytes] = {
    Role.KEY_RECTANGLE: b"key_rectangle",
    Role.KEY_REACTIVE_AREA: b"key_reactive_area",
    Role.KEY_BACKGROUND: b"key_background",
    Role.KEY_BACKGROUND_BORDERS: b"key_background_borders",
    Role.KEY_TEXT: b"key_text",
    Role.KEY_FONT: b"key_font",
    Role.KEY_FONT_COLOR: b"key_font_color",
    Role.KEY_FONT_SIZE: b"key_font_size",
    Role.KEY_FONT_STRETCH: b"key_font_stretch",
    Role.KEY_ICON: b"key_icon",
    Role.KEY_ACTION_INSERT: b"key_action_insert",
    Role.KEY_ACTION: b"key_action_type",
}


def _to_url(directory: str, base_name: bytes | str) -> str:
    """Join directory and file name, or return an empty URL if either is empty."""
    if isinstance(base_name, bytes):
        base_name = base_name.decode("utf-8", errors="replace")
    if directory and base_name:
        return f"{directory}/{base_name}"
    return ""


def _margins_as_rect(margins: Any) -> BorderRect:
    return (
        float(margins.left),
        float(margins.top),
        float(margins.right),
        float(margins.bottom),
    )


class Layout:
    """Keys of a key area presented as rows, with geometry and state.

    Signals:
        title_changed(str), visible_changed(bool), width_changed(int),
        height_changed(int), origin_changed(Point), background_changed(str),
        background_borders_changed(tuple), state_changed(LayoutState),
        active_view_changed(str), data_changed(first, last),
        model_about_to_be_reset(), model_reset().
    """

    def __init__(self) -> None:
        self._title = ""
        self._key_area = KeyArea()
        self._image_directory = ""
        self._roles = dict(_ROLE_NAMES)
        self._state = LayoutState.DEFAULT
        self._active_view = ""

        self.title_changed = Signal()
        self.visible_changed = Signal()
        self.width_changed = Signal()
        self.height_changed = Signal()
        self.origin_changed = Signal()
        self.background_changed = Signal()
        self.background_borders_changed = Signal()
        self.state_changed = Signal()
        self.active_view_changed = Signal()
        self.data_changed = Signal()
        self.model_about_to_be_reset = Signal()
        self.model_reset = Signal()

    @property
    def title(self) -> str:
        """The layout title; setting a different one emits ``title_changed``."""
        return self._title

    @title.setter
    def title(self, title: str) -> None:
        if self._title != title:
            self._title = title
            self.title_changed.emit(self._title)

    @property
    def key_area(self) -> KeyArea:
        """A copy of the current key area."""
        return copy.deepcopy(self._key_area)

    def set_key_area(self, area: KeyArea) -> None:
        """Replace the key area, resetting the model and announcing what changed."""
        self.model_about_to_be_reset.emit()

        old = self._key_area
        geometry_changed = old.rect() != area.rect()
        background_changed = old.area.background != area.area.background
        borders_changed = old.area.background_borders != area.area.background_borders
        visible_changed = bool(old.keys) != bool(area.keys)
        origin_changed = old.origin != area.origin

        self._key_area = copy.deepcopy(area)

        if origin_changed:
            self.origin_changed.emit(self._key_area.origin)
        if geometry_changed:
            self.width_changed.emit(self.width)
            self.height_changed.emit(self.height)
        if background_changed:
            self.background_changed.emit(self.background)
        if borders_changed:
            self.background_borders_changed.emit(self.background_borders)
        if visible_changed:
            self.visible_changed.emit(bool(self._key_area.keys))

        self.model_reset.emit()

    def replace_key(self, index: int, key: Key) -> None:
        """Replace the key at ``index``; raises IndexError if there is none."""
        keys = self._key_area.keys
        if index < 0 or index >= len(keys):
            raise IndexError(f"key index {index} out of range")
        keys[index] = key
        self.data_changed.emit(index, index)

    @property
    def visible(self) -> bool:
        """True when the key area holds keys."""
        return bool(self._key_area.keys)

    @property
    def width(self) -> int:
        """Width of the key area."""
        return self._key_area.rect().width

    @property
    def height(self) -> int:
        """Height of the key area."""
        return self._key_area.rect().height

    @property
    def origin(self) -> Point:
        """Origin of the key area."""
        return self._key_area.origin

    @property
    def background(self) -> str:
        """URL of the key area background, empty without image directory or name."""
        return _to_url(self._image_directory, self._key_area.area.background)

    @property
    def background_borders(self) -> BorderRect:
        """Background borders as (left, top, right, bottom)."""
        return _margins_as_rect(self._key_area.area.background_borders)

    @property
    def state(self) -> LayoutState:
        """Keyboard state; setting it always emits ``state_changed``."""
        return self._state

    @state.setter
    def state(self, state: LayoutState) -> None:
        self._state = LayoutState(state)
        self.state_changed.emit(self._state)

    @property
    def active_view(self) -> str:
        """Identifier of the active view."""
        return self._active_view

    @active_view.setter
    def active_view(self, active_view_id: str) -> None:
        self._active_view = active_view_id

    @property
    def image_directory(self) -> str:
        """Directory that image names are resolved against."""
        return self._image_directory

    def set_image_directory(self, directory: str) -> None:
        """Change the image directory, resetting the model if it differs."""
        if self._image_directory != directory:
            self._image_directory = directory
            self.model_about_to_be_reset.emit()
            self.background_changed.emit(self.background)
            self.model_reset.emit()

    def row_count(self) -> int:
        """Number of keys."""
        return len(self._key_area.keys)

    def role_names(self) -> dict[int, bytes]:
        """Mapping of role numbers to their names."""
        return dict(self._roles)

    def data(self, row: int, role: int) -> Any:
        """Value of ``role`` for the key at ``row``; None for an unknown role.

        Rows past the end are answered as for a default key.
        """
        keys = self._key_area.keys
        key = keys[row] if 0 <= row < len(keys) else Key()

        try:
            role = Role(role)
        except ValueError:
            _log.warning("Invalid index or role (%s %s).", row, role)
            return None

        if role == Role.KEY_REACTIVE_AREA:
            return key.rect()
        if role == Role.KEY_RECTANGLE:
            rect = key.rect()
            m = key.margins
            return (
                float(m.left),
                float(m.top),
                float(rect.width - (m.left + m.right)),
                float(rect.height - (m.top + m.bottom)),
            )
        if role == Role.KEY_BACKGROUND:
            return _to_url(self._image_directory, key.area.background)
        if role == Role.KEY_BACKGROUND_BORDERS:
            return _margins_as_rect(key.area.background_borders)
        if role == Role.KEY_TEXT:
            return key.label
        if role in (Role.KEY_FONT, Role.KEY_FONT_COLOR):
            return ""
        if role in (Role.KEY_FONT_SIZE, Role.KEY_FONT_STRETCH):
            return 1
        if role == Role.KEY_ICON:
            return _to_url(self._image_directory, key.icon)
        if role == Role.KEY_ACTION_INSERT:
            return key.action == Action.INSERT
        return key.action

    def data_by_name(self, row: int, role_name: str) -> Any:
        """Value of the role called ``role_name`` for the key at ``row``."""
        wanted = role_name.encode("latin-1", errors="replace")
        role = next(
            (number for number, name in self._roles.items() if name == wanted), 0
        )
        return self.data(row, role)