from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = Union[int, float]
RGBATuple = Tuple[int, int, int, float]
ChannelTuple = Tuple[float, float, float, float]
LengthUnit = Literal["%", "px", "in", "mm", "cm", "pt", "pc"]
LengthInput = Union[str, int, float]

HEX_DIGITS = frozenset("0123456789abcdef")
