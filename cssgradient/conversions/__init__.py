"""
Color space conversions used by the color parser.

Only HSL → sRGB is needed: hex and ``rgb()`` tokens are already sRGB.

>>> from cssgradient.conversions import hsl_to_rgb
>>> hsl_to_rgb(120, 1.0, 0.5)
(0, 255, 0)
"""

from .css_to_hsl import hsl_to_rgb, hue_to_channel, normalize_hue

__all__ = [
    'hsl_to_rgb',
    'hue_to_channel',
    'normalize_hue',
]
