from __future__ import annotations
from typing import Iterator, Tuple, Union

import numpy as np
from numpy import ndarray

from .types.format_type import FormatType, as_format_type, channel_maxima, default_format_dtypes

Pixel = Tuple[Union[int, float], ...]


class PixelBuffer:
    """
    RGBA pixels laid out as rows: ``value`` has shape ``(height, width, 4)``.

    ``FormatType.INT`` stores uint8 channels (alpha scaled to 0-255);
    ``FormatType.FLOAT`` stores float32 unit channels.
    """
    __slots__ = ('_value', '_format_type')

    num_channels = 4

    def __init__(self, value: ndarray, format_type: Union[FormatType, str] = FormatType.INT) -> None:
        format_type = as_format_type(format_type)
        arr = np.asarray(value)
        if arr.ndim != 3 or arr.shape[-1] != self.num_channels:
            raise ValueError(f"PixelBuffer expects shape (height, width, 4), got {arr.shape}")
        arr = np.clip(arr, 0, channel_maxima[format_type])
        target_dtype = default_format_dtypes[format_type]
        if arr.dtype != target_dtype:
            arr = arr.astype(target_dtype)
        self._value = arr
        self._format_type = format_type

    @classmethod
    def transparent(cls, width: int, height: int, format_type: Union[FormatType, str] = FormatType.INT) -> PixelBuffer:
        format_type = as_format_type(format_type)
        return cls(np.zeros((height, width, cls.num_channels), dtype=default_format_dtypes[format_type]), format_type)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ndarray:
        return self._value

    @property
    def format_type(self) -> FormatType:
        return self._format_type

    @property
    def width(self) -> int:
        return self._value.shape[1]

    @property
    def height(self) -> int:
        return self._value.shape[0]

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._value.shape

    def pixel(self, x: int, y: int) -> Pixel:
        return tuple(v.item() for v in self._value[y, x])

    def rows(self) -> Iterator[Tuple[Pixel, ...]]:
        """Yield each row, top to bottom, as a tuple of RGBA tuples."""
        for row in self._value.tolist():
            yield tuple(tuple(px) for px in row)

    def to_format(self, format_type: Union[FormatType, str]) -> PixelBuffer:
        format_type = as_format_type(format_type)
        if format_type == self._format_type:
            return self
        if format_type == FormatType.FLOAT:
            return PixelBuffer(self._value.astype(np.float32) / 255.0, format_type)
        return PixelBuffer(np.floor(self._value.astype(np.float64) * 255.0 + 0.5), format_type)

    def tobytes(self) -> bytes:
        """Raw RGBA bytes (8 bits per channel), rows top to bottom."""
        return self.to_format(FormatType.INT).value.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self._format_type == other._format_type and np.array_equal(self._value, other._value)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height}, format_type={self._format_type.value!r})"
