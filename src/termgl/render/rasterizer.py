"""Shared rasterization algorithms for character-cell sinks.

The :class:`Rasterizer` converts primitive parameters into individual
``(x, y, ch)`` writes through a :class:`~termgl.render.sink.Sink`. The same
instance logic backs buffered drawing (a Surface) and immediate drawing
(a live terminal), so every front-end shares one numeric policy:

- Intermediate float coordinates are rounded half away from zero via
  :func:`termgl.core.geometry.round_half_away`.
- Out-of-range writes are dropped by the sink and never reported, except
  through the boolean returned by :meth:`Rasterizer.pixel`.

The ellipse is a column-sampled parametric approximation rather than a
midpoint/Bresenham ellipse; columns near the left and right extremes can
show stepping.
"""

from __future__ import annotations

from math import sqrt
from typing import Optional, Sequence

from termgl.core.geometry import (
    Direction,
    Point,
    TextAlignment,
    aligned_anchor,
    distance,
    round_half_away,
)
from termgl.render.sink import Sink

__all__ = ["Rasterizer"]


class Rasterizer:
    """Primitive drawing over a single sink."""

    def __init__(self, sink: Sink) -> None:
        self._sink = sink

    @property
    def sink(self) -> Sink:
        return self._sink

    def pixel(self, x: int, y: int, ch: str, style: Optional[str] = None) -> bool:
        return self._sink.put(x, y, ch, style)

    def straight_line(
        self,
        x: int,
        y: int,
        length: int,
        direction: Direction,
        ch: str,
        style: Optional[str] = None,
    ) -> None:
        """Write ``|length|`` cells from ``(x, y)`` stepping along *direction*.

        A negative *length* negates the step, so ``(L, RIGHT)`` and
        ``(-L, LEFT)`` cover the same cells. Zero length writes nothing.
        """
        addx, addy = direction.step
        if length < 0:
            length = -length
            addx, addy = -addx, -addy
        put = self._sink.put
        for _ in range(length):
            put(x, y, ch, style)
            x += addx
            y += addy

    def line(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        ch: str,
        style: Optional[str] = None,
    ) -> None:
        """Draw the segment ``(x1, y1)`` to ``(x2, y2)`` inclusive.

        Axis-aligned segments delegate to :meth:`straight_line` with the
        signed delta; decreasing coordinates rely on its sign flip. The
        general case walks ``round(d)`` unit steps with float accumulation.
        The endpoint is always written last.
        """
        if x1 == x2:
            self.straight_line(x1, y1, y2 - y1, Direction.DOWN, ch, style)
        elif y1 == y2:
            self.straight_line(x1, y1, x2 - x1, Direction.RIGHT, ch, style)
        else:
            d = distance(x1, y1, x2, y2)
            dx = (x2 - x1) / d
            dy = (y2 - y1) / d
            x = float(x1)
            y = float(y1)
            put = self._sink.put
            for _ in range(round_half_away(d)):
                put(round_half_away(x), round_half_away(y), ch, style)
                x += dx
                y += dy
        self._sink.put(x2, y2, ch, style)

    def rectangle(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        ch: str,
        fill: bool = False,
        style: Optional[str] = None,
    ) -> None:
        """Draw a rectangle with its top-left corner at ``(x, y)``.

        The outline is the top and bottom rows plus the side columns from
        ``y + 1`` with length ``height - 2``, so each corner is written once.
        The side lengths are signed: with ``height == 1`` they are -1 and
        reach one cell below the footprint, at ``(x, y + 1)`` and
        ``(x + width - 1, y + 1)``. With ``fill`` each column is one DOWN
        straight line of ``height`` cells.
        """
        if fill:
            for i in range(width):
                self.straight_line(x + i, y, height, Direction.DOWN, ch, style)
            return
        self.straight_line(x, y, width, Direction.RIGHT, ch, style)
        self.straight_line(x, y + height - 1, width, Direction.RIGHT, ch, style)
        self.straight_line(x, y + 1, height - 2, Direction.DOWN, ch, style)
        self.straight_line(x + width - 1, y + 1, height - 2, Direction.DOWN, ch, style)

    def ellipse(
        self,
        h: int,
        k: int,
        a: int,
        b: int,
        ch: str,
        fill: bool = False,
        style: Optional[str] = None,
    ) -> None:
        """Draw an axis-aligned ellipse centred at ``(h, k)``.

        *a* and *b* are the horizontal and vertical semi-axes in cells. Each
        of the ``2a + 1`` columns gets its lower boundary from
        ``y = (b / a) * sqrt(a^2 - (x - h)^2) + k`` and the upper boundary
        from the mirror ``2k - y``. With ``fill`` the span between them is
        drawn as one upward straight line.
        """
        put = self._sink.put
        for col in range(2 * a + 1):
            x = col + h - a
            if a == 0:
                # limit of the column formula at x == h
                y = float(k + b)
            else:
                inside = abs(a * a - (x - h) ** 2)
                y = b / a * sqrt(inside) + k
            ry = round_half_away(y)
            if fill:
                span = 2 * abs(k - ry)
                self.straight_line(x, ry, span + 1, Direction.UP, ch, style)
                continue
            put(x, ry, ch, style)
            put(x, 2 * k - ry, ch, style)

    def polygon(
        self, points: Sequence[Point], ch: str, style: Optional[str] = None
    ) -> None:
        """Draw a closed outline through *points* in order."""
        if len(points) < 2:
            raise ValueError("polygon requires at least 2 points")
        n = len(points)
        for i in range(n):
            x1, y1 = points[i][0], points[i][1]
            nxt = points[(i + 1) % n]
            self.line(x1, y1, nxt[0], nxt[1], ch, style)

    def text(
        self,
        x: int,
        y: int,
        text: str,
        alignment: TextAlignment = TextAlignment.LEFT,
        style: Optional[str] = None,
    ) -> None:
        start = aligned_anchor(x, text, alignment)
        put = self._sink.put
        for i, c in enumerate(text):
            put(start + i, y, c, style)
