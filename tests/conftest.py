from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Set, Tuple

import pytest


class RecordingTerminal:
    """In-memory Terminal that records cursor moves and emitted text."""

    def __init__(self, size: Tuple[int, int] = (80, 24)) -> None:
        self.size = size
        self.cursor: Optional[Tuple[int, int]] = None
        self.writes: List[Tuple[int, int, str]] = []
        self.output: List[str] = []
        self.size_queries = 0
        self.clears = 0
        self.flushes = 0

    def move_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def emit(self, text: str) -> None:
        self.output.append(text)
        if self.cursor is not None:
            x, y = self.cursor
            self.writes.append((x, y, text))
            self.cursor = None

    def query_size(self) -> Tuple[int, int]:
        self.size_queries += 1
        return self.size

    def clear_screen(self) -> None:
        self.clears += 1

    def flush(self) -> None:
        self.flushes += 1

    def cells(self) -> Set[Tuple[int, int]]:
        return {(x, y) for x, y, _ in self.writes}


class RecordingSink:
    """Sink that accepts every coordinate and remembers the writes."""

    def __init__(self) -> None:
        self.writes: List[Tuple[int, int, str, Optional[str]]] = []

    def put(self, x: int, y: int, ch: str, style: Optional[str] = None) -> bool:
        self.writes.append((x, y, ch, style))
        return True

    def cells(self) -> Set[Tuple[int, int]]:
        return {(x, y) for x, y, _, _ in self.writes}


@pytest.fixture
def termgl_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "termgl_home"
    monkeypatch.setenv("TERMGL_HOME", str(home))
    return home


@pytest.fixture
def terminal() -> RecordingTerminal:
    return RecordingTerminal()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
