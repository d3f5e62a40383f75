import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up (not to even)."""
    return int(math.floor(value + 0.5))


def clamp(value, lower, upper):
    """Clamp a scalar into [lower, upper]."""
    return max(lower, min(value, upper))


def parse_number(token: str) -> float:
    """Parse a CSS number (``.5``, ``-3``, ``1e2``); raises ValueError otherwise."""
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {token!r}")
    return value
