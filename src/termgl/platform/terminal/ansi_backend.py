"""ANSI escape-sequence Terminal backend.

This module implements the :class:`~termgl.render.sink.Terminal` capability
for VT100-compatible terminals by writing CSI sequences to a text stream
(standard output by default).

Example:
    from termgl.platform.terminal.ansi_backend import AnsiTerminal

    term = AnsiTerminal()
    term.clear_screen()
    term.move_cursor(4, 2)
    term.emit("#")
    term.flush()

Cursor arguments are 0-based cell coordinates; the emitted sequence uses
the terminal's 1-based row/column convention.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO, Tuple

from termgl.render.sink import Terminal

logger = logging.getLogger(__name__)

CSI = "\x1b["
CLEAR_AND_HOME = "\x1b[2J\x1b[H"


def cursor_sequence(x: int, y: int) -> str:
    """CSI cursor-position sequence for 0-based ``(x, y)``."""
    return f"{CSI}{int(y) + 1};{int(x) + 1}H"


class AnsiTerminal(Terminal):
    """Terminal capability backed by a text stream.

    ``query_size`` asks the OS for the size of the terminal attached to the
    stream. When no terminal is attached a ``RuntimeError`` is raised unless
    *size_fallback* was given, in which case it is returned instead.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        size_fallback: Optional[Tuple[int, int]] = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._fallback = (
            (int(size_fallback[0]), int(size_fallback[1]))
            if size_fallback is not None
            else None
        )

    def move_cursor(self, x: int, y: int) -> None:
        self._stream.write(cursor_sequence(x, y))

    def emit(self, text: str) -> None:
        self._stream.write(text)

    def clear_screen(self) -> None:
        self._stream.write(CLEAR_AND_HOME)

    def flush(self) -> None:
        self._stream.flush()

    def query_size(self) -> Tuple[int, int]:
        try:
            fd = self._stream.fileno()
            size = os.get_terminal_size(fd)
            return int(size.columns), int(size.lines)
        except (OSError, ValueError, AttributeError) as e:
            if self._fallback is None:
                raise RuntimeError(
                    "terminal size unavailable; is a terminal attached?"
                ) from e
            logger.debug("terminal size query failed (%s); using fallback", e)
            return self._fallback
