"""
Parser for ``linear-gradient(<direction>?, <color> <length>?, ...)``.

Syntax and color errors abort the parse; a bad stop position only degrades
that stop to automatic spacing and emits a GradientWarning.
"""
from __future__ import annotations
import warnings
from typing import List, Optional, Tuple

from ..colors import NAMED_COLORS, parse_color
from ..errors import EmptyStopList, GradientSyntaxError, GradientWarning, InvalidLength
from ..gradients.direction import DEFAULT_DIRECTION, Direction
from ..gradients.gradient import Gradient
from ..gradients.stops import RawStop
from ..length import Length, parse_length
from .tokenizer import normalize_whitespace, split_top_level

PREFIX = "linear-gradient("
SUFFIX = ")"

_COLOR_PREFIXES = ("#", "rgb", "hsl")


def _unwrap(source: str) -> str:
    if not isinstance(source, str):
        raise GradientSyntaxError(f"gradient must be a string, got {type(source).__name__}")
    text = source.strip()
    if not text.startswith(PREFIX):
        raise GradientSyntaxError(f"gradient must start with {PREFIX!r}: {source!r}")
    if not text.endswith(SUFFIX):
        raise GradientSyntaxError(f"gradient must end with {SUFFIX!r}: {source!r}")
    return text[len(PREFIX):-len(SUFFIX)]


def _is_color(segment: str) -> bool:
    head = segment.split(" ", 1)[0].lower()
    return head.startswith(_COLOR_PREFIXES) or head in NAMED_COLORS


def parse_direction(segment: str, stacklevel: int = 2) -> Direction:
    if not Direction.is_keyword(segment):
        warnings.warn(
            f"unsupported gradient direction {segment!r}; using {Direction.from_keyword(segment).value!r}",
            GradientWarning,
            stacklevel=stacklevel,
        )
    return Direction.from_keyword(segment)


def _parse_position(token: str, stacklevel: int) -> Optional[Length]:
    try:
        return parse_length(token)
    except InvalidLength as exc:
        warnings.warn(f"{exc}; stop position is spaced automatically", GradientWarning, stacklevel=stacklevel)
        return None


def parse_stop(segment: str, stacklevel: int = 2) -> RawStop:
    """
    Parse ``<color> [<length>]``.

    ``stacklevel`` is relative to the caller of parse_stop, as in ``warnings.warn``.
    """
    tokens = [token for token in split_top_level(segment.strip(), " ") if token]
    if not tokens:
        raise GradientSyntaxError(f"empty color stop in {segment!r}")
    color = parse_color(tokens[0])
    position = _parse_position(tokens[1], stacklevel + 1) if len(tokens) > 1 else None
    if len(tokens) > 2:
        warnings.warn(
            f"ignoring extra tokens {' '.join(tokens[2:])!r} in stop {segment!r}",
            GradientWarning,
            stacklevel=stacklevel,
        )
    return RawStop(color, position)


def parse_components(source: str, stacklevel: int = 2) -> Tuple[Direction, Tuple[RawStop, ...]]:
    """
    Parse a gradient string into its direction and raw stops.

    Raises:
        GradientSyntaxError: wrapper or parentheses are malformed
        EmptyStopList: no stop follows the direction
        InvalidColor: a stop color is not recognized
    """
    params = normalize_whitespace(_unwrap(source))
    segments: List[str] = [segment.strip() for segment in split_top_level(params, ",")]

    direction = DEFAULT_DIRECTION
    if segments and segments[0] and not _is_color(segments[0]):
        direction = parse_direction(segments.pop(0), stacklevel + 1)

    if not segments or all(not segment for segment in segments):
        raise EmptyStopList(f"gradient has no color stops: {source!r}")

    stops = tuple(parse_stop(segment, stacklevel + 2) for segment in segments)
    return direction, stops


def parse_gradient(source: str) -> Gradient:
    """Parse ``source`` into a Gradient; see ``parse_components`` for errors."""
    direction, stops = parse_components(source, stacklevel=3)
    return Gradient(direction, stops, source=source.strip())
