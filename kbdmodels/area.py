"""Geometry primitives and the styled area shared by keyboard models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Size:
    """A width and height; the default size (-1, -1) is invalid."""

    width: int = -1
    height: int = -1

    def is_valid(self) -> bool:
        """True when both dimensions are zero or greater."""
        return self.width >= 0 and self.height >= 0

    def is_empty(self) -> bool:
        """True when either dimension is zero or less."""
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Point:
    """A point in integer coordinates."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and extent."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_origin_size(cls, origin: Point, size: Size) -> "Rect":
        """Build a rectangle placed at ``origin`` with the given ``size``."""
        return cls(origin.x, origin.y, size.width, size.height)

    def origin(self) -> Point:
        """The top-left corner."""
        return Point(self.x, self.y)

    def size(self) -> Size:
        """The width and height as a size."""
        return Size(self.width, self.height)


@dataclass(frozen=True)
class Margins:
    """Distances from each edge of a rectangle."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


@dataclass
class Area:
    """A sized region with a background image and its nine-tile borders."""

    size: Size = field(default_factory=Size)
    background: bytes = b""
    background_borders: Margins = field(default_factory=Margins)