from __future__ import annotations
from typing import ClassVar

from ..types.color_types import ChannelTuple, RGBATuple, Scalar
from ..utils.num_utils import clamp


class Color:
    """
    An sRGB color with 8-bit red/green/blue channels and a unit alpha.

    Channels are truncated to int and clamped to [0, 255]; alpha is clamped to
    [0, 1]. Instances are frozen once constructed, so they can be shared
    freely between gradients and threads.
    """
    __slots__ = ('_red', '_green', '_blue', '_alpha', '_is_frozen')

    channel_max: ClassVar[int] = 255
    alpha_max: ClassVar[float] = 1.0

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = 1.0) -> None:
        self._red = clamp(int(red), 0, self.channel_max)
        self._green = clamp(int(green), 0, self.channel_max)
        self._blue = clamp(int(blue), 0, self.channel_max)
        self._alpha = float(clamp(float(alpha), 0.0, self.alpha_max))
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> int:
        return self._red

    @property
    def green(self) -> int:
        return self._green

    @property
    def blue(self) -> int:
        return self._blue

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def rgba(self) -> RGBATuple:
        return (self._red, self._green, self._blue, self._alpha)

    @property
    def is_opaque(self) -> bool:
        return self._alpha >= self.alpha_max

    def interpolate(self, other: Color, t: float) -> ChannelTuple:
        """
        Linearly interpolate every channel towards ``other``.

        Returns un-rounded floats (red, green, blue in 0-255, alpha in 0-1) so
        the caller decides how to quantize.
        """
        return tuple(  # type: ignore[return-value]
            a + (b - a) * t for a, b in zip(self.rgba, other.rgba)
        )

    def with_alpha(self, alpha: Scalar) -> Color:
        return Color(self._red, self._green, self._blue, alpha)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba == other.rgba

    def __hash__(self) -> int:
        return hash(self.rgba)

    def __iter__(self):
        return iter(self.rgba)

    def __repr__(self) -> str:
        return f"Color(red={self._red}, green={self._green}, blue={self._blue}, alpha={self._alpha})"
