"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. On import we parse it
with PyYAML and merge recognised keys over hard-coded fallbacks, so the
library still works if the file is missing or corrupt.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ---------------------------------------------------
_FALLBACK_SURFACE = {
    "width": 40,
    "height": 12,
    "fill_char": ".",
    "border_char": "#",
}
_FALLBACK_THEME = {
    "colors": {
        "border": "bright_cyan",
        "text": "bright_white",
    }
}
_FALLBACK_TERMINAL = {
    "size_fallback": (80, 24),
    "clip_plain_to_terminal": False,
}


def _load(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} must contain a mapping")
    return raw


# --- Load YAML -----------------------------------------------------------
_surface: Dict[str, Any] = dict(_FALLBACK_SURFACE)
_theme: Dict[str, Any] = {"colors": dict(_FALLBACK_THEME["colors"])}
_terminal: Dict[str, Any] = dict(_FALLBACK_TERMINAL)

if _YAML_PATH.exists():  # pragma: no branch - simple path
    try:
        raw = _load(_YAML_PATH)
        surface = raw.get("surface", {})
        if isinstance(surface, dict):
            for k in ("width", "height"):
                v = surface.get(k)
                if isinstance(v, int) and v > 0:
                    _surface[k] = v
            for k in ("fill_char", "border_char"):
                v = surface.get(k)
                if isinstance(v, str) and len(v) == 1:
                    _surface[k] = v
        theme = raw.get("theme")
        if isinstance(theme, dict) and isinstance(theme.get("colors"), dict):
            _theme["colors"].update(
                {
                    k: v
                    for k, v in theme["colors"].items()
                    if isinstance(k, str) and isinstance(v, str)
                }
            )
        term = raw.get("terminal")
        if isinstance(term, dict):
            fb = term.get("size_fallback")
            if (
                isinstance(fb, list)
                and len(fb) == 2
                and all(isinstance(x, int) and x > 0 for x in fb)
            ):
                _terminal["size_fallback"] = (fb[0], fb[1])
            clip = term.get("clip_plain_to_terminal")
            if isinstance(clip, bool):
                _terminal["clip_plain_to_terminal"] = clip
    except (OSError, ValueError, yaml.YAMLError):  # pragma: no cover
        logger.warning("failed to parse %s; using built-in defaults", _YAML_PATH)

# --- Public accessors ----------------------------------------------------
SURFACE_DEFAULTS: Dict[str, Any] = dict(_surface)
THEME: Dict[str, Any] = dict(_theme)
TERMINAL_DEFAULTS: Dict[str, Any] = dict(_terminal)
SIZE_FALLBACK: Tuple[int, int] = tuple(_terminal["size_fallback"])  # type: ignore[assignment]

__all__ = [
    "SURFACE_DEFAULTS",
    "THEME",
    "TERMINAL_DEFAULTS",
    "SIZE_FALLBACK",
]
