"""Runtime configuration helpers.

Small aggregator that centralizes defaults from settings.values and the
persisted Settings store, and builds the RuntimeConfig used by the CLI.
CLI arguments (when provided) override persisted settings for the current
session only.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

from .settings.schema import Settings
from .settings.store import SettingsStore
from .settings.values import SIZE_FALLBACK, THEME

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SurfaceConfig:
    width: int = 40
    height: int = 12
    fill_char: str = "."
    border_char: str = "#"


@dataclass(slots=True)
class RuntimeConfig:
    surface: SurfaceConfig
    color: bool = False
    border_color: str = "bright_cyan"
    clip_plain_to_terminal: bool = False
    size_fallback: Tuple[int, int] = (80, 24)
    theme: dict[str, Any] = field(default_factory=dict)


def _from_settings(settings: Settings) -> RuntimeConfig:
    return RuntimeConfig(
        surface=SurfaceConfig(
            width=settings.width,
            height=settings.height,
            fill_char=settings.fill_char,
            border_char=settings.border_char,
        ),
        color=settings.color,
        border_color=settings.border_color,
        clip_plain_to_terminal=settings.clip_plain_to_terminal,
        size_fallback=(int(SIZE_FALLBACK[0]), int(SIZE_FALLBACK[1])),
        theme=dict(THEME),
    )


def make_config(*, args: Optional[object] = None) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and optional CLI *args*.

    *args* is any argparse.Namespace-like object. Attributes that are
    missing or ``None`` leave the persisted value in place. Only a small
    set of fields is merged: width, height, fill, color and clip.
    """
    rc = _from_settings(SettingsStore.load())
    if args is None:
        return rc

    width = getattr(args, "width", None)
    if width is not None:
        rc.surface.width = int(width)
    height = getattr(args, "height", None)
    if height is not None:
        rc.surface.height = int(height)
    fill = getattr(args, "fill", None)
    if fill is not None:
        rc.surface.fill_char = str(fill)
    color = getattr(args, "color", None)
    if color is not None:
        rc.color = bool(color)
    clip = getattr(args, "clip", None)
    if clip is not None:
        rc.clip_plain_to_terminal = bool(clip)
    return rc


# Runtime singleton + listener API -------------------------------------
_RUNTIME: RuntimeConfig | None = None
_LISTENERS: list[Callable[[RuntimeConfig], None]] = []


def get_runtime() -> RuntimeConfig:
    """Return the current runtime config, creating a default if needed."""
    global _RUNTIME
    if _RUNTIME is None:
        _RUNTIME = make_config()
    return _RUNTIME


def reset_runtime() -> None:
    """Drop the cached runtime config (next access reloads settings)."""
    global _RUNTIME
    _RUNTIME = None


def register_listener(cb: Callable[[RuntimeConfig], None]) -> None:
    """Register a callback to be invoked when runtime config updates.

    Callback receives the RuntimeConfig as the only argument.
    """
    if cb not in _LISTENERS:
        _LISTENERS.append(cb)


def unregister_listener(cb: Callable[[RuntimeConfig], None]) -> None:
    if cb in _LISTENERS:
        _LISTENERS.remove(cb)


def update_from_settings(settings: Settings) -> RuntimeConfig:
    """Replace the runtime config from *settings* and notify listeners.

    A listener that raises is logged and does not stop the others.
    """
    global _RUNTIME
    rc = _from_settings(settings)
    _RUNTIME = rc
    for cb in list(_LISTENERS):
        try:
            cb(rc)
        except Exception:
            logger.exception("runtime config listener failed")
    return rc
