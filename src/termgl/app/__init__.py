"""Application package for termgl (demo scene entrypoint)."""

from . import demo  # re-export the demo module

__all__ = ["demo"]
