"""
Color token parsing: hex, ``rgb()/rgba()``, ``hsl()/hsla()`` and named colors.

>>> parse_color("#f0a").rgba
(255, 0, 170, 1.0)
>>> parse_color("rgba(300,-10,128,2)").rgba
(255, 0, 128, 1.0)
"""
from __future__ import annotations
from typing import List

from ..conversions import hsl_to_rgb
from ..errors import InvalidColor
from ..types.color_types import HEX_DIGITS
from ..utils.num_utils import parse_number
from .color import Color
from .named import NAMED_COLORS


def parse_color(token: str) -> Color:
    """Parse any supported color token into a Color; raises InvalidColor."""
    if not isinstance(token, str):
        raise InvalidColor(repr(token), "color token must be a string")
    token = token.strip()
    if not token:
        raise InvalidColor(token, "empty color")

    named = NAMED_COLORS.get(token.lower())
    if named is not None:
        token = named

    lowered = token.lower()
    if lowered.startswith('#'):
        return parse_hex(token)
    if lowered.startswith('rgb'):
        return parse_rgb(token)
    if lowered.startswith('hsl'):
        return parse_hsl(token)
    raise InvalidColor(token)


def parse_hex(token: str) -> Color:
    digits = token.strip().lower()
    if not digits.startswith('#'):
        raise InvalidColor(token, "hex color must start with '#'")
    digits = digits[1:]
    if len(digits) not in (3, 6) or not set(digits) <= HEX_DIGITS:
        raise InvalidColor(token, "hex color must be #RGB or #RRGGBB")
    if len(digits) == 3:
        digits = ''.join(d * 2 for d in digits)
    return Color(
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
        1.0,
    )


def _function_arguments(token: str, names: tuple[str, ...]) -> List[str]:
    """Split ``name(a, b, c[, d])`` into its 3 or 4 stripped arguments."""
    text = token.strip()
    open_at = text.find('(')
    if open_at < 0 or not text.endswith(')'):
        raise InvalidColor(token, "malformed color function")
    if text[:open_at].strip().lower() not in names:
        raise InvalidColor(token, f"expected one of {', '.join(names)}")
    args = [arg.strip() for arg in text[open_at + 1:-1].split(',')]
    if len(args) not in (3, 4) or not all(args):
        raise InvalidColor(token, "color function takes 3 or 4 arguments")
    return args


def _number(arg: str, token: str) -> float:
    try:
        return parse_number(arg)
    except ValueError:
        raise InvalidColor(token, f"invalid number {arg!r}") from None


def _channel(arg: str, token: str) -> float:
    if arg.endswith('%'):
        return _number(arg[:-1], token) / 100 * 255
    return _number(arg, token)


def _alpha(args: List[str], token: str) -> float:
    if len(args) < 4:
        return 1.0
    arg = args[3]
    if arg.endswith('%'):
        return _number(arg[:-1], token) / 100
    return _number(arg, token)


def parse_rgb(token: str) -> Color:
    """``rgb(r,g,b)`` / ``rgba(r,g,b,a)``; channels truncate, everything clamps."""
    args = _function_arguments(token, ('rgb', 'rgba'))
    red, green, blue = (_channel(arg, token) for arg in args[:3])
    return Color(red, green, blue, _alpha(args, token))


def parse_hsl(token: str) -> Color:
    """``hsl(h,s%,l%)`` / ``hsla(h,s%,l%,a)``; hue is taken modulo 360."""
    args = _function_arguments(token, ('hsl', 'hsla'))
    hue = args[0]
    if hue.lower().endswith('deg'):
        hue = hue[:-3]
    h = _number(hue, token)
    s = _number(args[1].rstrip('%'), token) / 100
    l = _number(args[2].rstrip('%'), token) / 100
    red, green, blue = hsl_to_rgb(h, s, l)
    return Color(red, green, blue, _alpha(args, token))
