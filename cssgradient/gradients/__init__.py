from .direction import Direction, DEFAULT_DIRECTION, FALLBACK_DIRECTION
from .stops import RawStop, ResolvedStop, resolve_stops
from .rasterizer import render, render_line, render_to_buffer
from .gradient import Gradient, DEFAULT_SOURCE

__all__ = [
    "Direction",
    "DEFAULT_DIRECTION",
    "FALLBACK_DIRECTION",
    "RawStop",
    "ResolvedStop",
    "resolve_stops",
    "render",
    "render_line",
    "render_to_buffer",
    "Gradient",
    "DEFAULT_SOURCE",
]
