"""A minimal signal/slot mechanism for notifying observers of model changes."""

from __future__ import annotations

from typing import Any, Callable

Slot = Callable[..., Any]


class Signal:
    """A list of callables invoked, in connection order, on every emit."""

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def connect(self, slot: Slot) -> None:
        """Call ``slot`` on every later emit; connecting twice calls it twice."""
        if not callable(slot):
            raise TypeError("slot must be callable")
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Remove every connection of ``slot``.

        Raises ValueError when ``slot`` is not connected.
        """
        remaining = [connected for connected in self._slots if connected != slot]
        if len(remaining) == len(self._slots):
            raise ValueError("slot is not connected")
        self._slots = remaining

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)