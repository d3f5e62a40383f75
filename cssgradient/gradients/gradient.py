from __future__ import annotations
from typing import Iterable, Tuple, Union

from ..errors import EmptyStopList
from ..types.format_type import FormatType
from .direction import Direction
from .rasterizer import render_to_buffer
from .stops import RawStop, ResolvedStop, resolve_stops

DEFAULT_SOURCE = "linear-gradient(#000,#fff)"


class Gradient:
    """
    A parsed ``linear-gradient(...)``: a direction plus the raw color stops.

    Stops are kept unresolved so one Gradient can be rendered at any size.
    ``reparse`` swaps source, direction and stops together; a failed reparse
    leaves the instance untouched.
    """
    __slots__ = ('_source', '_direction', '_stops')

    def __init__(
        self,
        direction: Union[Direction, str],
        stops: Iterable[RawStop],
        source: str | None = None,
    ) -> None:
        stops = tuple(stops)
        if not stops:
            raise EmptyStopList("a gradient needs at least one color stop")
        self._direction = Direction.from_keyword(direction)
        self._stops: Tuple[RawStop, ...] = stops
        self._source = source

    @classmethod
    def parse(cls, source: str = DEFAULT_SOURCE) -> Gradient:
        from ..parsing.gradient_parser import parse_components
        direction, stops = parse_components(source, stacklevel=3)
        return cls(direction, stops, source=source.strip())

    def reparse(self, source: str) -> None:
        """Replace this gradient with the one described by ``source``."""
        from ..parsing.gradient_parser import parse_components
        direction, stops = parse_components(source, stacklevel=3)
        self._source, self._direction, self._stops = source.strip(), direction, stops

    # ------------------ PROPERTIES ------------------
    @property
    def source(self) -> str | None:
        return self._source

    @property
    def stops(self) -> Tuple[RawStop, ...]:
        return self._stops

    @property
    def direction(self) -> Direction:
        return self._direction

    @direction.setter
    def direction(self, value: Union[Direction, str]) -> None:
        self._direction = Direction.from_keyword(value)

    def resolve(self, axis_size: int) -> Tuple[ResolvedStop, ...]:
        """Resolve the stops for an axis, inverted when the traversal runs backwards."""
        return resolve_stops(self._stops, axis_size, invert=self._direction.is_inverted)

    def render(self, width: int, height: int, format_type: FormatType = FormatType.INT):
        return render_to_buffer(self, width, height, format_type=format_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return (self._direction, self._stops) == (other._direction, other._stops)

    __hash__ = None  # direction is mutable

    def __len__(self) -> int:
        return len(self._stops)

    def __repr__(self) -> str:
        return f"Gradient(direction={self._direction.value!r}, stops={len(self._stops)})"
