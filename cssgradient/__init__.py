"""
cssgradient - CSS linear-gradient parsing and rasterization
============================================================

Turns a declarative ``linear-gradient(...)`` string into an RGBA pixel buffer,
without a browser or CSS engine.

Quick Start
-----------
>>> from cssgradient import parse_gradient, render_to_buffer
>>>
>>> gradient = parse_gradient("linear-gradient(to right, #000, #fff, #f00 80%, #00f)")
>>> buffer = render_to_buffer(gradient, 100, 20)
>>> buffer.value.shape
(20, 100, 4)

Encoding the buffer (PNG/JPEG/GIF) is left to Pillow, see ``cssgradient.export``.

Modules
-------
- colors: Color value, hex/rgb/hsl/named color parsing
- length: stop positions and CSS unit conversion
- parsing: the linear-gradient syntax parser
- gradients: direction, stop resolution and the rasterizer
- pixel_buffer: the RGBA output buffer
"""

from .errors import (
    GradientError,
    GradientSyntaxError,
    EmptyStopList,
    InvalidColor,
    InvalidLength,
    GradientWarning,
)
from .types.format_type import FormatType
from .colors import Color, NAMED_COLORS, parse_color, parse_hex, parse_rgb, parse_hsl
from .length import Length, ABSOLUTE_UNITS, parse_length
from .gradients import (
    Direction,
    DEFAULT_DIRECTION,
    FALLBACK_DIRECTION,
    RawStop,
    ResolvedStop,
    resolve_stops,
    render,
    render_to_buffer,
    Gradient,
)
from .parsing import parse_gradient
from .pixel_buffer import PixelBuffer

__version__ = "1.0.0"

__all__ = [
    # errors
    "GradientError",
    "GradientSyntaxError",
    "EmptyStopList",
    "InvalidColor",
    "InvalidLength",
    "GradientWarning",
    # colors
    "Color",
    "NAMED_COLORS",
    "parse_color",
    "parse_hex",
    "parse_rgb",
    "parse_hsl",
    # lengths
    "Length",
    "ABSOLUTE_UNITS",
    "parse_length",
    # gradients
    "Direction",
    "DEFAULT_DIRECTION",
    "FALLBACK_DIRECTION",
    "RawStop",
    "ResolvedStop",
    "resolve_stops",
    "render",
    "render_to_buffer",
    "Gradient",
    "parse_gradient",
    # output
    "PixelBuffer",
    "FormatType",
    # Version
    "__version__",
]
