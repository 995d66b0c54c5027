"""Coordinate and geometry helpers for character-cell rasterization.

All coordinates are integer cell positions with ``x`` growing to the right
and ``y`` growing downward. Points may be negative or outside any grid;
whether a point is addressable is decided by the sink that receives it.
Implementations use only the Python standard library (math).
"""

from __future__ import annotations

from enum import Enum
from math import floor, sqrt
from typing import Tuple

__all__ = [
    "Point",
    "Direction",
    "TextAlignment",
    "round_half_away",
    "distance",
    "aligned_anchor",
    "in_bounds",
]

Point = Tuple[int, int]


class Direction(Enum):
    """Axis direction used by straight-line drawing."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        """Unit step ``(dx, dy)`` for this direction."""
        return _STEPS[self]


_STEPS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


class TextAlignment(Enum):
    """Horizontal placement of a text run relative to its anchor."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def round_half_away(v: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's :func:`round` uses banker's rounding (``round(2.5) == 2``);
    every rasterizer path goes through this helper instead so that
    ``2.5 -> 3`` and ``-2.5 -> -3``.

    Args:
        v: Value to round.
    Returns:
        Nearest integer with halves rounded away from zero.
    """
    if v >= 0.0:
        return int(floor(v + 0.5))
    return -int(floor(-v + 0.5))


def distance(x1: int, y1: int, x2: int, y2: int) -> float:
    """Euclidean distance between two cells."""
    dx = x2 - x1
    dy = y2 - y1
    return sqrt(dx * dx + dy * dy)


def aligned_anchor(x: int, text: str, alignment: TextAlignment) -> int:
    """Return the x of the first character of *text* drawn at anchor *x*.

    ``CENTER`` shifts left by ``len(text) // 2`` and ``RIGHT`` by the full
    length. ``LEFT`` leaves the anchor unchanged.
    """
    if alignment is TextAlignment.CENTER:
        return x - len(text) // 2
    if alignment is TextAlignment.RIGHT:
        return x - len(text)
    return x


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    """True when ``(x, y)`` lies in ``[0, width) x [0, height)``."""
    return 0 <= x < width and 0 <= y < height
