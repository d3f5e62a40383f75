"""
Scanline rasterization of resolved stops into an RGBA PixelBuffer.

The gradient only varies along one axis, so a single line of colors is
computed and then broadcast over the perpendicular dimension.
"""
from __future__ import annotations
from typing import Sequence, Union

import numpy as np
from numpy import ndarray

from ..pixel_buffer import PixelBuffer
from ..types.format_type import FormatType, as_format_type, default_format_dtypes
from .direction import Direction
from .stops import ResolvedStop


def _validate_size(width: int, height: int) -> None:
    for name, size in (("width", width), ("height", height)):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"{name} must be an integer, got {type(size).__name__}")
        if size <= 0:
            raise ValueError(f"{name} must be a positive integer, got {size}")


def _traversal(first: int, axis_length: int, step: int) -> range:
    """
    Pixels visited from the first stop to the edge of the axis.

    In a decreasing traversal pixel ``p`` shows the color at inverted
    coordinate ``p - 1`` (forward coordinate ``axis_length - p``), so the walk
    starts one pixel after the first stop.
    """
    if step > 0:
        return range(first, axis_length) if first >= 0 else range(0)
    if first >= axis_length:
        return range(0)
    return range(min(first + 1, axis_length - 1), -1, -1)


def render_line(stops: Sequence[ResolvedStop], axis_length: int, step: int = 1) -> ndarray:
    """
    Interpolate the colors of one line along the gradient axis.

    Args:
        stops: Resolved stops in traversal order, at least two
        axis_length: Number of pixels on the axis
        step: +1 to walk towards increasing coordinates, -1 otherwise

    Returns:
        float64 array of shape (axis_length, 4): red/green/blue in 0-255,
        alpha in 0-1. Pixels before the first stop or past the last stop
        are left as zeros (transparent).
    """
    line = np.zeros((axis_length, 4), dtype=np.float64)
    last = len(stops) - 1
    offset = 0 if step > 0 else -1
    i = 0
    # farthest stop position passed so far; out-of-order stops never move backwards
    anchor = stops[0].position

    for p in _traversal(stops[0].position, axis_length, step):
        q = p + offset
        # skip every stop already reached; ties collapse onto the last of them
        while i < last and (q - stops[i + 1].position) * step >= 0:
            i += 1
            if (stops[i].position - anchor) * step > 0:
                anchor = stops[i].position
        if i == last:
            if q != stops[last].position:
                break
            line[p] = stops[last].color.rgba
            continue

        start, end = stops[i], stops[i + 1]
        t = abs(q - anchor) / abs(anchor - end.position)
        line[p] = start.color.interpolate(end.color, t)

    return line


def _quantize(line: ndarray, format_type: FormatType) -> ndarray:
    if format_type == FormatType.INT:
        scaled = line.copy()
        scaled[:, 3] *= 255.0
        return np.floor(scaled + 0.5)
    scaled = line.copy()
    scaled[:, :3] /= 255.0
    return scaled


def render(
    direction: Union[Direction, str],
    stops: Sequence[ResolvedStop],
    width: int,
    height: int,
    format_type: Union[FormatType, str] = FormatType.INT,
) -> PixelBuffer:
    """
    Fill a fresh, fully transparent buffer with the gradient.

    Args:
        direction: Side keyword; decides the axis and traversal direction
        stops: Stops resolved for this direction's axis (see ``resolve_stops``)
        width: Buffer width in pixels
        height: Buffer height in pixels
        format_type: INT (uint8) or FLOAT (unit float32) channels

    Returns:
        PixelBuffer of shape (height, width, 4)
    """
    _validate_size(width, height)
    if len(stops) < 2:
        raise ValueError("rendering needs at least two resolved stops")
    direction = Direction.from_keyword(direction)
    format_type = as_format_type(format_type)

    x_step, y_step = direction.step
    step = x_step or y_step
    axis_length = direction.axis_length(width, height)

    line = _quantize(render_line(stops, axis_length, step), format_type)
    if direction.is_vertical:
        pixels = np.broadcast_to(line[:, None, :], (height, width, 4))
    else:
        pixels = np.broadcast_to(line[None, :, :], (height, width, 4))

    return PixelBuffer(pixels.astype(default_format_dtypes[format_type]), format_type)


def render_to_buffer(
    gradient,
    width: int,
    height: int,
    format_type: Union[FormatType, str] = FormatType.INT,
) -> PixelBuffer:
    """Resolve ``gradient``'s stops for its axis and render them."""
    _validate_size(width, height)
    axis_length = gradient.direction.axis_length(width, height)
    return render(gradient.direction, gradient.resolve(axis_length), width, height, format_type)
