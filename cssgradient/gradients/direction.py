from __future__ import annotations
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Side keywords accepted as the first ``linear-gradient`` argument."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    TO_TOP = "to top"
    TO_BOTTOM = "to bottom"
    TO_LEFT = "to left"
    TO_RIGHT = "to right"

    @classmethod
    def from_keyword(cls, keyword) -> Direction:
        """
        Look up a keyword, ignoring case and extra whitespace.

        Unrecognized keywords (angles, corners, legacy syntax) fall back to
        ``to right``.
        """
        if isinstance(keyword, Direction):
            return keyword
        normalized = " ".join(str(keyword).lower().split())
        try:
            return cls(normalized)
        except ValueError:
            return FALLBACK_DIRECTION

    @classmethod
    def is_keyword(cls, keyword: str) -> bool:
        return " ".join(keyword.lower().split()) in _KEYWORDS

    @property
    def step(self) -> Tuple[int, int]:
        """Unit (x, y) step of the traversal."""
        return _STEPS[self]

    @property
    def is_vertical(self) -> bool:
        return self.step[0] == 0

    @property
    def is_inverted(self) -> bool:
        """True when the traversal walks towards decreasing coordinates."""
        return sum(self.step) < 0

    def axis_length(self, width: int, height: int) -> int:
        return height if self.is_vertical else width


_STEPS = {
    Direction.TOP: (0, 1),
    Direction.TO_BOTTOM: (0, 1),
    Direction.BOTTOM: (0, -1),
    Direction.TO_TOP: (0, -1),
    Direction.RIGHT: (-1, 0),
    Direction.TO_LEFT: (-1, 0),
    Direction.LEFT: (1, 0),
    Direction.TO_RIGHT: (1, 0),
}

_KEYWORDS = frozenset(d.value for d in Direction)

DEFAULT_DIRECTION = Direction.TO_BOTTOM
FALLBACK_DIRECTION = Direction.TO_RIGHT
