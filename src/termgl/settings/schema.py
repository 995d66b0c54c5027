"""Pydantic model for user settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from termgl.render.colors import NAMED

from .values import SURFACE_DEFAULTS, TERMINAL_DEFAULTS, THEME


class Settings(BaseModel):
    """Drawing defaults persisted to disk.

    Parameters
    ----------
    width, height: Default surface size in cells used by the demo CLI.
    fill_char: Background character the demo surface is filled with.
    border_char: Character used for frames and outlines.
    color: When true the CLI also draws directly to the terminal with
        ANSI styles.
    border_color: Name of the ANSI token for styled frames (see
        :data:`termgl.render.colors.NAMED`).
    clip_plain_to_terminal: When true the plain terminal sink checks writes
        against the live terminal size like the styled sink does.
    """

    width: int = Field(default=int(SURFACE_DEFAULTS["width"]))
    height: int = Field(default=int(SURFACE_DEFAULTS["height"]))
    fill_char: str = Field(default=str(SURFACE_DEFAULTS["fill_char"]))
    border_char: str = Field(default=str(SURFACE_DEFAULTS["border_char"]))
    color: bool = Field(default=False)
    border_color: str = Field(
        default=str(THEME.get("colors", {}).get("border", "bright_cyan"))
    )
    clip_plain_to_terminal: bool = Field(
        default=bool(TERMINAL_DEFAULTS.get("clip_plain_to_terminal", False))
    )

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:  # pragma: no cover - trivial
        if v <= 0:
            raise ValueError("surface dimensions must be > 0")
        return v

    @field_validator("fill_char", "border_char")
    @classmethod
    def _chk_char(cls, v: str) -> str:  # pragma: no cover - trivial
        if len(v) != 1:
            raise ValueError("must be exactly one character")
        return v

    @field_validator("border_color")
    @classmethod
    def _chk_color(cls, v: str) -> str:
        key = v.strip().lower().replace("-", "_")
        if key not in NAMED:
            raise ValueError(f"unknown color name: {v}")
        return key
