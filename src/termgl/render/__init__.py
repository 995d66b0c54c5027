"""Rasterizer, sinks and surfaces."""

from . import colors, immediate
from .rasterizer import Rasterizer
from .sink import Sink, Terminal
from .surface import BufferSink, Surface
from .terminal_sinks import ColorTerminalSink, TerminalSink

__all__ = [
    "colors",
    "immediate",
    "Rasterizer",
    "Sink",
    "Terminal",
    "BufferSink",
    "Surface",
    "ColorTerminalSink",
    "TerminalSink",
]
