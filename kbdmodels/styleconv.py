"""Conversions and lookups used to read keyboard style settings."""

from __future__ import annotations

import os
import re
from enum import IntEnum
from typing import Any, Mapping

from kbdmodels.area import Margins
from kbdmodels.key import Style
from kbdmodels.keydescription import Icon, State, Width


class Orientation(IntEnum):
    """Layout orientation."""

    LANDSCAPE = 0
    PORTRAIT = 1


_WIDTH_SUFFIXES = {
    Width.MEDIUM: "",
    Width.SMALL: "-small",
    Width.LARGE: "-large",
    Width.XLARGE: "-xlarge",
    Width.XXLARGE: "-xxlarge",
    Width.STRETCHED: "-stretched",
}

_ICON_NAMES = {
    Icon.NO_ICON: "",
    Icon.RETURN: "return",
    Icon.BACKSPACE: "backspace",
    Icon.SHIFT: "shift",
    Icon.SHIFT_LATCHED: "shift-latched",
    Icon.CAPS_LOCK: "caps-lock",
    Icon.CLOSE: "close",
    Icon.CUSTOM: "",
    Icon.LEFT_LAYOUT: "left-layout",
    Icon.RIGHT_LAYOUT: "right-layout",
}

_STYLE_NAMES = {
    Style.NORMAL: "normal",
    Style.DEAD: "dead",
    Style.SPECIAL: "special",
}

_STATE_SUFFIXES = {
    State.NORMAL: "",
    State.PRESSED: "-pressed",
    State.DISABLED: "-disabled",
    State.HIGHLIGHTED: "-highlighted",
}

_INT_RE = re.compile(r"\s*[+-]?\d+\s*")


def from_key_width(width: Width) -> str:
    """Suffix for a key width, empty for medium keys."""
    return _WIDTH_SUFFIXES.get(width, "")


def from_key_icon(icon: Icon) -> str:
    """Name of a key icon, empty for no icon or a custom icon."""
    return _ICON_NAMES.get(icon, "")


def from_key_style(style: Style) -> str:
    """Name of a key style."""
    return _STYLE_NAMES.get(style, "")


def from_key_state(state: State) -> str:
    """Suffix for a key state, empty for the normal state."""
    return _STATE_SUFFIXES.get(state, "")


def _to_int(token: str) -> int:
    return int(token) if _INT_RE.fullmatch(token) else 0


def parse_margins(data: str | bytes | None) -> Margins:
    """Parse "left top right bottom"; anything but four space-separated parts gives zero margins."""
    if data is None:
        return Margins()
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")
    tokens = data.split(" ")
    if len(tokens) != 4:
        return Margins()
    left, top, right, bottom = (_to_int(token) for token in tokens)
    return Margins(left, top, right, bottom)


def build_key(orientation: Orientation, style_name: str, attribute_name: str) -> str:
    """Settings key "<style>/<landscape|portrait>/<attribute>"."""
    orientation_name = "landscape" if orientation == Orientation.LANDSCAPE else "portrait"
    return f"{style_name}/{orientation_name}/{attribute_name}"


def lookup(
    store: Mapping[str, Any],
    orientation: Orientation,
    style_name: str,
    attribute_name: str,
) -> Any:
    """Value for the attribute in the style, falling back to the "default" style; None if absent."""
    result = store.get(build_key(orientation, style_name, attribute_name))
    if result is None:
        return store.get(build_key(orientation, "default", attribute_name))
    return result


def _split_value(raw: str) -> list[str]:
    """Split a value at unquoted commas, removing quotes and resolving escapes."""
    parts: list[str] = []
    current: list[str] = []
    in_quotes = False
    escaped = False
    for char in raw:
        if escaped:
            current.append(char)
            escaped = False
        elif in_quotes and char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    parts.append("".join(current).strip())
    return parts


def _parse_value(raw: str) -> str | list[str]:
    parts = _split_value(raw.strip())
    return parts[0] if len(parts) == 1 else parts


def load_ini_store(path: str | os.PathLike[str]) -> dict[str, str | list[str]]:
    """Read an INI style file into a flat mapping of "section/key" to value.

    Keys in the [General] section have no prefix, backslashes in keys act as
    separators, and values with unquoted commas become lists. Raises
    ValueError on a line that is neither a section, a comment nor a key.
    """
    store: dict[str, str | list[str]] = {}
    prefix = ""
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            stripped = line.strip()
            if not stripped or stripped[0] in ";#":
                continue
            if stripped.startswith("[") and stripped.endswith("]"):
                section = stripped[1:-1].strip().replace("\\", "/")
                prefix = "" if section == "General" else f"{section}/"
                continue
            key, sep, value = stripped.partition("=")
            key = key.strip().replace("\\", "/")
            if not sep or not key:
                raise ValueError(f"{path}:{number}: malformed line {stripped!r}")
            store[prefix + key] = _parse_value(value)
    return store