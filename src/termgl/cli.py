"""Command-line interface for termgl.

This module wraps :mod:`termgl.app.demo` as a package entrypoint so that
the console script and ``python -m termgl`` run the same code.
"""

from __future__ import annotations

import argparse
import logging

from termgl import __version__
from termgl.app import demo


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Return parsed arguments using the demo's parser helper."""
    return demo.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Synchronous entrypoint for the termgl CLI."""
    args = parse_args(argv)

    if getattr(args, "version", False):
        print(f"termgl {__version__}")
        return

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        demo.run(args)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
