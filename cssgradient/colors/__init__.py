from .color import Color
from .named import NAMED_COLORS
from .parser import parse_color, parse_hex, parse_rgb, parse_hsl

__all__ = [
    "Color",
    "NAMED_COLORS",
    "parse_color",
    "parse_hex",
    "parse_rgb",
    "parse_hsl",
]
