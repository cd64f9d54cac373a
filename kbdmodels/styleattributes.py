"""Style attributes of a keyboard: image names, sizes, fonts and sounds.

Attributes are read from a flat settings store, a mapping of
"section/key" names to values such as the one returned by
:func:`kbdmodels.styleconv.load_ini_store`.
"""

from __future__ import annotations

from typing import Any, Mapping

from kbdmodels.area import Margins
from kbdmodels.key import Style
from kbdmodels.keydescription import Icon, State, Width
from kbdmodels.styleconv import (
    Orientation,
    from_key_icon,
    from_key_state,
    from_key_style,
    from_key_width,
    lookup,
    parse_margins,
)

DEFAULT_FONT_NAME = b"Nokia Pure"


def _to_text(value: Any) -> str:
    """Text form of a stored value; lists convert only when they hold one item."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple)):
        return _to_text(value[0]) if len(value) == 1 else ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _to_bytes(value: Any) -> bytes:
    """Byte form of a stored value; absent values and lists give empty bytes."""
    if value is None or isinstance(value, (list, tuple)):
        return b""
    if isinstance(value, bytes):
        return value
    return _to_text(value).encode("utf-8")


def _to_real(value: Any) -> float:
    """Numeric form of a stored value; anything unparsable gives 0.0."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, (str, bytes)):
        text = _to_text(value).strip()
        try:
            return float(text)
        except ValueError:
            return 0.0
    return 0.0


def _to_string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [_to_text(item) for item in value]
    return [_to_text(value)]


class StyleAttributes:
    """Queries style attributes from a settings store.

    Per-orientation attributes are looked up as
    "<style>/<landscape|portrait>/<attribute>", falling back to the
    "default" style when the active style has no such value.
    """

    def __init__(self, store: Mapping[str, Any], screen_width: float = 0) -> None:
        if store is None:
            raise ValueError("settings store cannot be None")
        self._store = store
        self._screen_width = screen_width
        self.style_name = ""

    def _value(self, key: str) -> Any:
        return self._store.get(key)

    def _lookup(self, orientation: Orientation, attribute_name: str) -> Any:
        return lookup(self._store, orientation, self.style_name, attribute_name)

    def _real(self, orientation: Orientation, attribute_name: str) -> float:
        return _to_real(self._lookup(orientation, attribute_name))

    def set_style_name(self, name: str) -> None:
        """Set the active style, which names a section of the store."""
        self.style_name = name

    def word_ribbon_background(self) -> bytes:
        """Value of "background/word-ribbon"."""
        return _to_bytes(self._value("background/word-ribbon"))

    def key_area_background(self) -> bytes:
        """Value of "background/key-area"."""
        return _to_bytes(self._value("background/key-area"))

    def magnifier_key_background(self) -> bytes:
        """Value of "background/magnifier-key"."""
        return _to_bytes(self._value("background/magnifier-key"))

    def key_background(self, style: Style, state: State) -> bytes:
        """Value of "background/<style>[-<state>]"."""
        key = "background/" + from_key_style(style) + from_key_state(state)
        return _to_bytes(self._value(key))

    def word_ribbon_background_borders(self) -> Margins:
        """Margins parsed from "background/word-ribbon-borders"."""
        return parse_margins(_to_bytes(self._value("background/word-ribbon-borders")))

    def key_area_background_borders(self) -> Margins:
        """Margins parsed from "background/key-area-borders"."""
        return parse_margins(_to_bytes(self._value("background/key-area-borders")))

    def magnifier_key_background_borders(self) -> Margins:
        """Margins parsed from "background/magnifier-key-borders"."""
        return parse_margins(
            _to_bytes(self._value("background/magnifier-key-borders"))
        )

    def key_background_borders(self) -> Margins:
        """Margins parsed from "background/key-borders"."""
        return parse_margins(_to_bytes(self._value("background/key-borders")))

    def icon(self, icon: Icon, state: State) -> bytes:
        """Value of "icon/<icon>[-<state>]"."""
        key = "icon/" + from_key_icon(icon) + from_key_state(state)
        return _to_bytes(self._value(key))

    def custom_icon(self, icon_name: str) -> bytes:
        """Value of "icon/<icon_name>"."""
        return _to_bytes(self._value("icon/" + icon_name))

    def font_files(self) -> list[str]:
        """Value of "font/font-files" as a list of file names."""
        return _to_string_list(self._value("font/font-files"))

    def font_name(self, orientation: Orientation) -> bytes:
        """Font name for key labels, "Nokia Pure" when none is set."""
        name = _to_bytes(self._lookup(orientation, "font-name"))
        return name or DEFAULT_FONT_NAME

    def font_color(self, orientation: Orientation) -> bytes:
        """Font colour for key labels."""
        return _to_bytes(self._lookup(orientation, "font-color"))

    def font_size(self, orientation: Orientation) -> float:
        """Font size for key labels."""
        return self._real(orientation, "font-size")

    def small_font_size(self, orientation: Orientation) -> float:
        """Small font size for key labels."""
        return self._real(orientation, "small-font-size")

    def candidate_font_size(self, orientation: Orientation) -> float:
        """Font size for word candidates."""
        return self._real(orientation, "candidate-font-size")

    def magnifier_font_size(self, orientation: Orientation) -> float:
        """Font size for the key magnifier."""
        return self._real(orientation, "magnifier-font-size")

    def candidate_font_stretch(self, orientation: Orientation) -> float:
        """Font stretch for word candidates; 100 means not stretched."""
        return self._real(orientation, "candidate-font-stretch")

    def word_ribbon_height(self, orientation: Orientation) -> float:
        """Height of the word ribbon."""
        return self._real(orientation, "word-ribbon-height")

    def magnifier_key_height(self, orientation: Orientation) -> float:
        """Height of the magnifier key."""
        return self._real(orientation, "magnifier-key-height")

    def key_height(self, orientation: Orientation) -> float:
        """Height of a key."""
        return self._real(orientation, "key-height")

    def magnifier_key_width(self, orientation: Orientation) -> float:
        """Width of the magnifier key."""
        return self._real(orientation, "magnifier-key-width")

    def key_width(self, orientation: Orientation, width: Width) -> float:
        """Width of a key of the given width class ("key-width[-<width>]")."""
        return self._real(orientation, "key-width" + from_key_width(width))

    def key_area_width(self, orientation: Orientation) -> float:
        """Width of the key area; a value with "%" is relative to the screen width."""
        result = self._lookup(orientation, "key-area-width")
        text = _to_text(result)
        if "%" in text:
            return 0.01 * _to_real(text.replace("%", "")) * self._screen_width
        return _to_real(result)

    def key_margin(self, orientation: Orientation) -> float:
        """Margin around each key."""
        return self._real(orientation, "key-margins")

    def key_area_padding(self, orientation: Orientation) -> float:
        """Padding between the key area border and the outermost keys."""
        return self._real(orientation, "key-area-paddings")

    def vertical_offset(self, orientation: Orientation) -> float:
        """Offset of magnifier and extended keys above the pressed key."""
        return self._real(orientation, "vertical-offset")

    def magnifier_key_label_vertical_offset(self, orientation: Orientation) -> float:
        """Vertical offset of the label inside the magnifier key."""
        return self._real(orientation, "magnifier-key-label-vertical-offset")

    def safety_margin(self, orientation: Orientation) -> float:
        """Margin kept free of magnifier and extended keys at the key area edges."""
        return self._real(orientation, "safety-margin")

    def key_press_sound(self) -> bytes:
        """Value of "sound/key-press"."""
        return _to_bytes(self._value("sound/key-press"))

    def key_release_sound(self) -> bytes:
        """Value of "sound/key-release"."""
        return _to_bytes(self._value("sound/key-release"))

    def layout_change_sound(self) -> bytes:
        """Value of "sound/layout-change"."""
        return _to_bytes(self._value("sound/layout-change"))

    def keyboard_hide_sound(self) -> bytes:
        """Value of "sound/keyboard-hide"."""
        return _to_bytes(self._value("sound/keyboard-hide"))

    def keyboard_total_height(self, orientation: Orientation) -> float:
        """Total height of the keyboard."""
        return self._real(orientation, "keyboard-total-height")

    def keyboard_visible_height(self, orientation: Orientation) -> float:
        """Visible height of the keyboard."""
        return self._real(orientation, "keyboard-visible-height")

    def top_margin(self, orientation: Orientation) -> float:
        """Margin above the keyboard."""
        return self._real(orientation, "keyboard-top-margin")