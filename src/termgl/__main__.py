"""Console entrypoint for termgl.

This module delegates to :mod:`termgl.cli` so that running
``python -m termgl`` or the installed ``termgl`` console script
executes the same code.
"""

from __future__ import annotations

from termgl.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`termgl.cli.main`)."""
    cli_main()


if __name__ == "__main__":
    main()
