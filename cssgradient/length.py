"""
Stop positions: percentages, absolute CSS lengths and unitless fractions.

A unitless number is a fraction of the gradient axis, so ``0.5`` and ``50%``
describe the same position.
"""
from __future__ import annotations
import math
import re
from typing import Dict

from .errors import InvalidLength
from .types.color_types import LengthInput, LengthUnit
from .utils.num_utils import parse_number

PERCENT: LengthUnit = "%"

# CSS pixels per unit at 96 DPI
ABSOLUTE_UNITS: Dict[str, float] = {
    "px": 1,
    "in": 96,
    "mm": 3.77952756,
    "cm": 37.7952756,
    "pt": 1.3333333,
    "pc": 16,
}

_LENGTH_RE = re.compile(r"^([0-9]*\.?[0-9]+(?:e[+-]?[0-9]+)?)([%a-z]+)$", re.IGNORECASE)


class Length:
    """An unresolved position along the gradient axis."""
    __slots__ = ('_value', '_unit', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: float, unit: LengthUnit = PERCENT) -> None:
        if unit != PERCENT and unit not in ABSOLUTE_UNITS:
            raise InvalidLength(f"{value}{unit}", "unknown unit")
        self._value = float(value)
        self._unit = unit
        super().__setattr__('_is_frozen', True)

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> LengthUnit:
        return self._unit

    @property
    def is_relative(self) -> bool:
        return self._unit == PERCENT

    def to_pixels(self, axis_size: int) -> int:
        """Absolute pixel offset of this position on an axis of ``axis_size`` pixels."""
        if self.is_relative:
            return math.floor(self._value / 100 * axis_size)
        return math.floor(self._value * ABSOLUTE_UNITS[self._unit])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return (self._value, self._unit) == (other._value, other._unit)

    def __hash__(self) -> int:
        return hash((self._value, self._unit))

    def __repr__(self) -> str:
        return f"Length({self._value:g}{self._unit})"


def parse_length(token: LengthInput) -> Length:
    """
    Parse a stop position.

    Args:
        token: ``"50%"``, ``"12px"``, ``"1.5cm"``, or a bare number
            (``0.25`` / ``"0.25"``) meaning a fraction of the axis

    Returns:
        Length

    Raises:
        InvalidLength: the token is not a recognized length
    """
    if isinstance(token, bool):
        raise InvalidLength(token, "booleans are not lengths")
    if isinstance(token, (int, float)):
        if not math.isfinite(token):
            raise InvalidLength(token)
        return Length(token * 100, PERCENT)
    if not isinstance(token, str):
        raise InvalidLength(token, "length must be a string or a number")

    text = token.strip()
    try:
        return Length(parse_number(text) * 100, PERCENT)
    except ValueError:
        pass

    match = _LENGTH_RE.match(text)
    if match is None:
        raise InvalidLength(token)
    unit = match.group(2).lower()
    if unit != PERCENT and unit not in ABSOLUTE_UNITS:
        raise InvalidLength(token, "unknown unit")
    return Length(float(match.group(1)), unit)
