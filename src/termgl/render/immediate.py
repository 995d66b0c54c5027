"""Immediate-mode drawing straight to a terminal.

Each function rasterizes one primitive through a fresh terminal sink; no
buffer is kept between calls. Passing ``style=None`` uses the plain
:class:`~termgl.render.terminal_sinks.TerminalSink`; any string selects the
:class:`~termgl.render.terminal_sinks.ColorTerminalSink`, which drops the
write unless the string is an escape token (so ``style=""`` draws nothing).

Example:
    from termgl.core.geometry import TextAlignment
    from termgl.platform.terminal.ansi_backend import AnsiTerminal
    from termgl.render import colors, immediate

    term = AnsiTerminal()
    term.clear_screen()
    immediate.rectangle(term, 1, 1, 7, 4, "#", style=colors.RED)
    immediate.text_aligned(term, 10, 3, "hi", TextAlignment.CENTER)
"""

from __future__ import annotations

from typing import Optional, Sequence

from termgl.core.geometry import Direction, Point, TextAlignment
from termgl.render.rasterizer import Rasterizer
from termgl.render.sink import Terminal
from termgl.render.terminal_sinks import ColorTerminalSink, TerminalSink

__all__ = [
    "rasterizer_for",
    "pixel",
    "straight_line",
    "rectangle",
    "line",
    "ellipse",
    "polygon",
    "text",
    "text_aligned",
]


def rasterizer_for(
    terminal: Terminal, style: Optional[str] = None, *, clip: bool = False
) -> Rasterizer:
    """Return a rasterizer over the sink matching *style*."""
    if style is None:
        return Rasterizer(TerminalSink(terminal, clip_to_terminal=clip))
    return Rasterizer(ColorTerminalSink(terminal))


def pixel(
    terminal: Terminal,
    x: int,
    y: int,
    ch: str,
    style: Optional[str] = None,
    *,
    clip: bool = False,
) -> None:
    rasterizer_for(terminal, style, clip=clip).pixel(x, y, ch, style)


def straight_line(
    terminal: Terminal,
    x: int,
    y: int,
    length: int,
    direction: Direction,
    ch: str,
    style: Optional[str] = None,
    *,
    clip: bool = False,
) -> None:
    rasterizer_for(terminal, style, clip=clip).straight_line(
        x, y, length, direction, ch, style
    )


def rectangle(
    terminal: Terminal,
    x: int,
    y: int,
    width: int,
    height: int,
    ch: str,
    fill: bool = False,
    style: Optional[str] = None,
    *,
    clip: bool = False,
) -> None:
    rasterizer_for(terminal, style, clip=clip).rectangle(
        x, y, width, height, ch, fill, style
    )


def line(
    terminal: Terminal,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    ch: str,
    style: Optional[str] = None,
    *,
    clip: bool = False,
) -> None:
    rasterizer_for(terminal, style, clip=clip).line(x1, y1, x2, y2, ch, style)


def ellipse(
    terminal: Terminal,
    h: int,
    k: int,
    a: int,
    b: int,
    ch: str,
    fill: bool = False,
    style: Optional[str] = None,
    *,
    clip: bool = False,
) -> None:
    rasterizer_for(terminal, style, clip=clip).ellipse(h, k, a, b, ch, fill, style)


def polygon(
    terminal: Terminal,
    points: Sequence[Point],
    ch: str,
    style: Optional[str] = None,
    *,
    clip: bool = False,
) -> None:
    rasterizer_for(terminal, style, clip=clip).polygon(points, ch, style)


def text(
    terminal: Terminal,
    x: int,
    y: int,
    s: str,
    style: Optional[str] = None,
    *,
    clip: bool = False,
) -> None:
    rasterizer_for(terminal, style, clip=clip).text(
        x, y, s, TextAlignment.LEFT, style
    )


def text_aligned(
    terminal: Terminal,
    x: int,
    y: int,
    s: str,
    alignment: TextAlignment,
    style: Optional[str] = None,
    *,
    clip: bool = False,
) -> None:
    rasterizer_for(terminal, style, clip=clip).text(x, y, s, alignment, style)
