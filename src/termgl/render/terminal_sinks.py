"""Sinks that write straight to a terminal capability.

Both sinks are stateless apart from the terminal handle they wrap; each
``put`` positions the cursor and emits one (optionally styled) character.
"""

from __future__ import annotations

from typing import Optional

from termgl.core.geometry import in_bounds
from termgl.render.colors import is_style_token
from termgl.render.sink import Sink, Terminal


class TerminalSink(Sink):
    """Plain (unstyled) terminal sink.

    Negative coordinates are never addressable. The upper bound is only
    checked against the live terminal size when ``clip_to_terminal`` is
    set; by default writes past the right or bottom edge are attempted and
    left to the terminal to handle.
    """

    def __init__(self, terminal: Terminal, *, clip_to_terminal: bool = False) -> None:
        self._terminal = terminal
        self._clip = bool(clip_to_terminal)

    @property
    def terminal(self) -> Terminal:
        return self._terminal

    def put(self, x: int, y: int, ch: str, style: Optional[str] = None) -> bool:
        if x < 0 or y < 0:
            return False
        if self._clip:
            cols, rows = self._terminal.query_size()
            if not in_bounds(x, y, cols, rows):
                return False
        self._terminal.move_cursor(x, y)
        self._terminal.emit(ch)
        return True


class ColorTerminalSink(Sink):
    """Styled terminal sink.

    A write is emitted only when ``(x, y)`` is inside the freshly queried
    terminal size and *style* is an escape token; anything else is dropped.
    """

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal

    @property
    def terminal(self) -> Terminal:
        return self._terminal

    def put(self, x: int, y: int, ch: str, style: Optional[str] = None) -> bool:
        if not is_style_token(style):
            return False
        cols, rows = self._terminal.query_size()
        if not in_bounds(x, y, cols, rows):
            return False
        self._terminal.move_cursor(x, y)
        self._terminal.emit(f"{style}{ch}")
        return True
