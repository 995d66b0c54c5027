"""Demo scene renderer.

Composes a small scene into an offscreen :class:`~termgl.render.surface.Surface`
(framed background, filled ellipse, polygon, centred title and a blitted
sprite) and flushes it to standard output.

With ``--direct`` (or ``--color``) a frame and title are first drawn in
immediate mode straight to the terminal: through the plain sink by default,
or through the styled sink using the theme colours when colour is on.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from termgl.config import RuntimeConfig, make_config
from termgl.core.geometry import TextAlignment
from termgl.platform.terminal.ansi_backend import AnsiTerminal
from termgl.render import colors, immediate
from termgl.render.sink import Terminal
from termgl.render.surface import Surface

logger = logging.getLogger(__name__)

TITLE = " termgl "


def build_sprite() -> Surface:
    """5x3 boxed marker; its interior spaces stay transparent when blitted."""
    sprite = Surface(5, 3)
    sprite.draw_rectangle(0, 0, 5, 3, "+")
    sprite.draw_text(2, 1, "@", TextAlignment.CENTER)
    return sprite


def build_scene(rc: RuntimeConfig) -> Surface:
    w = rc.surface.width
    h = rc.surface.height
    scene = Surface(w, h)
    scene.fill(rc.surface.fill_char)
    scene.draw_rectangle(0, 0, w, h, rc.surface.border_char)
    scene.draw_ellipse(w // 4, h // 2, max(1, w // 8), max(1, h // 4), "o", fill=True)
    scene.draw_polygon(
        [(w // 2, 2), (w - 4, h - 3), (w // 2 + 2, h - 3)],
        "*",
    )
    scene.draw_text(w // 2, 0, TITLE, TextAlignment.CENTER)
    scene.blit(w - 7, 1, build_sprite())
    return scene


def draw_direct(term: Terminal, rc: RuntimeConfig) -> None:
    """Draw the frame and title straight to *term*, then park the cursor."""
    w = rc.surface.width
    h = rc.surface.height
    frame_style: Optional[str] = None
    text_style: Optional[str] = None
    if rc.color:
        frame_style = colors.named(rc.border_color)
        text_style = colors.named(rc.theme.get("colors", {}).get("text", "white"))

    term.clear_screen()
    immediate.rectangle(
        term,
        0,
        0,
        w,
        h,
        rc.surface.border_char,
        style=frame_style,
        clip=rc.clip_plain_to_terminal,
    )
    immediate.text_aligned(
        term,
        w // 2,
        0,
        TITLE,
        TextAlignment.CENTER,
        style=text_style,
        clip=rc.clip_plain_to_terminal,
    )
    if rc.color:
        term.emit(colors.RESET)
    term.move_cursor(0, h)
    term.emit("\n")
    term.flush()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    """
    p = argparse.ArgumentParser(description="termgl demo scene")
    p.add_argument("--width", type=int, default=None, help="Surface width in cells")
    p.add_argument("--height", type=int, default=None, help="Surface height in cells")
    p.add_argument(
        "--fill",
        type=str,
        default=None,
        help="Background fill character (default from settings)",
    )
    p.add_argument(
        "--direct",
        dest="direct",
        action="store_true",
        help="Draw a frame straight to the terminal before the buffered scene",
    )
    p.add_argument(
        "--color",
        dest="color",
        action="store_true",
        default=None,
        help="Style the direct frame and title with ANSI colours (implies --direct)",
    )
    p.add_argument(
        "--clip",
        dest="clip",
        action="store_true",
        default=None,
        help="Clip plain terminal writes to the live terminal size",
    )
    p.add_argument(
        "--out",
        type=str,
        default=None,
        help="Also save the rendered scene as text to this path",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    args = p.parse_args(argv)
    for name in ("width", "height"):
        v = getattr(args, name)
        if v is not None and v <= 0:
            p.error(f"--{name} must be > 0")
    if args.fill is not None and len(args.fill) != 1:
        p.error("--fill must be a single character")
    return args


def run(args: argparse.Namespace, stream: Optional[TextIO] = None) -> Surface:
    """Render the demo scene for *args* and return the composed surface."""
    out = stream if stream is not None else sys.stdout
    rc = make_config(args=args)
    logger.info(
        "rendering %dx%d demo scene (color=%s)",
        rc.surface.width,
        rc.surface.height,
        rc.color,
    )
    scene = build_scene(rc)

    if rc.color or getattr(args, "direct", False):
        draw_direct(AnsiTerminal(out, size_fallback=rc.size_fallback), rc)

    scene.display(stream=out)
    if args.out:
        scene.save_text(args.out)
        logger.info("saved scene to %s", args.out)
    return scene
