"""Sink and Terminal protocols.

Defines the single-method pixel sink the rasterizer writes through and the
terminal capability contract so different outputs (an in-memory Surface,
a live ANSI terminal, a test recorder) can be plugged in.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    def put(self, x: int, y: int, ch: str, style: Optional[str] = None) -> bool:
        """Commit *ch* at ``(x, y)``; return False when not addressable."""
        ...


@runtime_checkable
class Terminal(Protocol):
    def move_cursor(self, x: int, y: int) -> None:
        ...

    def emit(self, text: str) -> None:
        ...

    def query_size(self) -> Tuple[int, int]:
        ...

    def clear_screen(self) -> None:
        ...

    def flush(self) -> None:
        ...
