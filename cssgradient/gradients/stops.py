"""
Color stops and their resolution to pixel offsets.

Resolution follows the CSS rules: a missing first position is 0, a missing
last position is the axis size, and runs of stops without a position are
spread evenly between their positioned neighbors.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from ..colors.color import Color
from ..length import Length
from ..utils.num_utils import round_half_up


@dataclass(frozen=True)
class RawStop:
    color: Color
    position: Optional[Length] = None

    @property
    def is_auto(self) -> bool:
        return self.position is None


@dataclass(frozen=True)
class ResolvedStop:
    color: Color
    position: int


def resolve_stops(
    stops: Sequence[RawStop],
    axis_size: int,
    invert: bool = False,
) -> Tuple[ResolvedStop, ...]:
    """
    Resolve every stop to an integer pixel position on the axis.

    Args:
        stops: Parsed stops, at least one
        axis_size: Length of the gradient axis in pixels
        invert: Remap positions to ``axis_size - position - 1`` for a
            traversal that walks towards decreasing coordinates

    Returns:
        Tuple of ResolvedStop, same order as ``stops`` (two stops when a
        single stop was given)
    """
    if not stops:
        return ()

    raw: List[RawStop] = list(stops)
    if len(raw) == 1:
        raw.append(replace(raw[0], position=None))

    last = len(raw) - 1
    positions: List[Optional[int]] = [
        None if stop.is_auto else stop.position.to_pixels(axis_size)
        for stop in raw
    ]
    if positions[0] is None:
        positions[0] = 0
    if positions[last] is None:
        positions[last] = axis_size

    i = 1
    while i < last:
        if positions[i] is not None:
            i += 1
            continue
        k = i
        while positions[k] is None:
            k += 1
        begin = positions[i - 1]
        end = positions[k]
        step = (end - begin) / (k - i + 1)
        for n in range(1, k - i + 1):
            positions[i + n - 1] = begin + round_half_up(step * n)
        i = k

    if invert:
        positions = [axis_size - p - 1 for p in positions]

    return tuple(
        ResolvedStop(stop.color, position)
        for stop, position in zip(raw, positions)
    )
