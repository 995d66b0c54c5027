"""Offscreen character surfaces.

A :class:`Surface` owns a fixed ``width x height`` grid of single-character
cells, row-major, initialised to spaces. All drawing goes through a
:class:`~termgl.render.rasterizer.Rasterizer` bound to a :class:`BufferSink`
over the grid, so a Surface rasterizes exactly like an immediate-mode
terminal apart from its bounds check.

The space character is the blank cell and also the transparent value used
by :meth:`Surface.blit`: a space in the source never overwrites the
destination. There is one bit of transparency and no alpha blending.

Example:
    surf = Surface(10, 5)
    surf.fill(".")
    surf.draw_rectangle(1, 1, 7, 3, "#")
    surf.display()
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from termgl.core.geometry import Direction, Point, TextAlignment, in_bounds
from termgl.render.rasterizer import Rasterizer
from termgl.render.sink import Sink, Terminal

logger = logging.getLogger(__name__)

__all__ = ["BLANK", "BufferSink", "Surface"]

BLANK = " "


def _check_cell(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"cell must be exactly one character: {ch!r}")
    return ch


class BufferSink(Sink):
    """Sink writing into a Surface grid; styles are ignored."""

    def __init__(self, surface: "Surface") -> None:
        self._surface = surface

    def put(self, x: int, y: int, ch: str, style: Optional[str] = None) -> bool:
        _check_cell(ch)
        s = self._surface
        if not in_bounds(x, y, s._width, s._height):
            return False
        s._data[y][x] = ch
        return True


class Surface:
    """Mutable 2D character buffer supporting drawing and compositing."""

    def __init__(self, width: int, height: int) -> None:
        width = int(width)
        height = int(height)
        if width < 0 or height < 0:
            raise ValueError(f"surface size must be non-negative: {width}x{height}")
        self._width = width
        self._height = height
        self._data: List[List[str]] = [[BLANK] * width for _ in range(height)]
        self._raster = Rasterizer(BufferSink(self))

    @classmethod
    def new(cls, width: int, height: int) -> "Surface":
        return cls(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def raw_data(self) -> List[List[str]]:
        """Copy of the grid as a list of rows."""
        return [list(row) for row in self._data]

    def get_raw_data(self) -> List[List[str]]:
        return self.raw_data

    # -- mutation -------------------------------------------------------
    def fill(self, ch: str) -> None:
        _check_cell(ch)
        self._data = [[ch] * self._width for _ in range(self._height)]

    def draw_pixel(self, x: int, y: int, ch: str) -> bool:
        """Set ``(x, y)`` to *ch*; False (and no change) when out of range."""
        _check_cell(ch)
        return self._raster.pixel(x, y, ch)

    def draw_straight_line(
        self, x: int, y: int, length: int, direction: Direction, ch: str
    ) -> None:
        _check_cell(ch)
        self._raster.straight_line(x, y, length, direction, ch)

    def draw_rectangle(
        self, x: int, y: int, width: int, height: int, ch: str, fill: bool = False
    ) -> None:
        _check_cell(ch)
        self._raster.rectangle(x, y, width, height, ch, fill)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, ch: str) -> None:
        _check_cell(ch)
        self._raster.line(x1, y1, x2, y2, ch)

    def draw_ellipse(
        self, h: int, k: int, a: int, b: int, ch: str, fill: bool = False
    ) -> None:
        _check_cell(ch)
        self._raster.ellipse(h, k, a, b, ch, fill)

    def draw_polygon(self, points: Sequence[Point], ch: str) -> None:
        _check_cell(ch)
        self._raster.polygon(points, ch)

    def draw_text(
        self,
        x: int,
        y: int,
        text: str,
        alignment: TextAlignment = TextAlignment.LEFT,
    ) -> None:
        self._raster.text(x, y, text, alignment)

    def blit(self, x: int, y: int, other: "Surface") -> None:
        """Overlay *other* with its top-left corner at ``(x, y)``.

        Space cells in *other* are transparent and skipped; every other
        cell goes through the same bounds check as :meth:`draw_pixel`. The
        source is read from a snapshot, so blitting a surface onto itself
        overlays its content as it was before the call.
        """
        put = self._raster.pixel
        for i, row in enumerate(other.raw_data):
            for j, c in enumerate(row):
                if c == BLANK:
                    continue
                put(x + j, y + i, c)

    # -- output ---------------------------------------------------------
    def rows(self) -> List[str]:
        return ["".join(row) for row in self._data]

    def to_text(self) -> str:
        return "\n".join(self.rows())

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Surface(width={self._width}, height={self._height})"

    def display(
        self, terminal: Optional[Terminal] = None, stream: Optional[TextIO] = None
    ) -> None:
        """Write every row, top first, each followed by a newline.

        When *terminal* is given rows are emitted through it; otherwise they
        go to *stream* (standard output by default). Nothing is diffed
        against earlier output.
        """
        logger.debug("display surface %dx%d", self._width, self._height)
        if terminal is not None:
            for row in self.rows():
                terminal.emit(row + "\n")
            terminal.flush()
            return
        out = stream if stream is not None else sys.stdout
        for row in self.rows():
            out.write(row + "\n")
        out.flush()

    def save_text(self, path: str | Path) -> None:
        """Write the grid to *path* as text with a trailing newline."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(self.to_text() + "\n", encoding="utf-8")
