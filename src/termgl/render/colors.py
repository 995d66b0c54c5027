"""ANSI style tokens.

Style tokens are pre-formatted escape strings. The rasterizer treats them as
opaque; only :class:`~termgl.render.terminal_sinks.ColorTerminalSink`
inspects them, and only to check the leading escape marker.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

__all__ = [
    "ESC",
    "RESET",
    "ColorKind",
    "NAMED",
    "rgb_to_ccode",
    "is_style_token",
    "named",
]

ESC = "\x1b"

RESET = "\x1b[0m"

BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"

BRIGHT_BLACK = "\x1b[90m"
BRIGHT_RED = "\x1b[91m"
BRIGHT_GREEN = "\x1b[92m"
BRIGHT_YELLOW = "\x1b[93m"
BRIGHT_BLUE = "\x1b[94m"
BRIGHT_MAGENTA = "\x1b[95m"
BRIGHT_CYAN = "\x1b[96m"
BRIGHT_WHITE = "\x1b[97m"

BLACK_BG = "\x1b[40m"
RED_BG = "\x1b[41m"
GREEN_BG = "\x1b[42m"
YELLOW_BG = "\x1b[43m"
BLUE_BG = "\x1b[44m"
MAGENTA_BG = "\x1b[45m"
CYAN_BG = "\x1b[46m"
WHITE_BG = "\x1b[47m"

BRIGHT_BLACK_BG = "\x1b[100m"
BRIGHT_RED_BG = "\x1b[101m"
BRIGHT_GREEN_BG = "\x1b[102m"
BRIGHT_YELLOW_BG = "\x1b[103m"
BRIGHT_BLUE_BG = "\x1b[104m"
BRIGHT_MAGENTA_BG = "\x1b[105m"
BRIGHT_CYAN_BG = "\x1b[106m"
BRIGHT_WHITE_BG = "\x1b[107m"

_BASE_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


def _build_named() -> Dict[str, str]:
    table: Dict[str, str] = {"reset": RESET}
    for i, name in enumerate(_BASE_NAMES):
        table[name] = f"\x1b[{30 + i}m"
        table[f"bright_{name}"] = f"\x1b[{90 + i}m"
        table[f"{name}_bg"] = f"\x1b[{40 + i}m"
        table[f"bright_{name}_bg"] = f"\x1b[{100 + i}m"
    return table


# Lowercase name -> token, e.g. "bright_cyan" or "red_bg"
NAMED: Dict[str, str] = _build_named()


class ColorKind(Enum):
    FG = "fg"
    BG = "bg"


def rgb_to_ccode(rgb: Tuple[int, int, int], kind: ColorKind = ColorKind.FG) -> str:
    """Return a 24-bit colour token for *rgb*.

    Args:
        rgb: Red, green, blue components in ``0..255``.
        kind: Foreground or background selector.
    Returns:
        ``ESC[38;2;r;g;bm`` for foreground, ``ESC[48;2;r;g;bm`` for background.
    Raises:
        ValueError: if a component is outside ``0..255``.
    """
    r, g, b = (int(c) for c in rgb)
    for c in (r, g, b):
        if not 0 <= c <= 255:
            raise ValueError(f"rgb component out of range: {c}")
    selector = 38 if kind is ColorKind.FG else 48
    return f"\x1b[{selector};2;{r};{g};{b}m"


def is_style_token(style: object) -> bool:
    """True when *style* is a non-empty string starting with ESC."""
    return isinstance(style, str) and style.startswith(ESC)


def named(name: str) -> str:
    """Look up a token by name (case-insensitive, ``-`` or ``_`` separators)."""
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return NAMED[key]
    except KeyError:
        raise KeyError(f"unknown color name: {name!r}") from None
