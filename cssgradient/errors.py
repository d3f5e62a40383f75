"""Exceptions and warnings raised while parsing or rendering gradients."""


class GradientError(ValueError):
    """Base class for every error raised by cssgradient."""


class GradientSyntaxError(GradientError):
    """The ``linear-gradient(...)`` wrapper or its parentheses are malformed."""


class EmptyStopList(GradientError):
    """No color stop is left once the direction keyword is removed."""


class InvalidColor(GradientError):
    """A color token matches none of the hex, rgb, hsl or named forms."""

    def __init__(self, token: str, reason: str = "unrecognized color") -> None:
        self.token = token
        super().__init__(f"{reason}: {token!r}")


class InvalidLength(GradientError):
    """A stop position is neither a bare number nor ``<number><unit>``."""

    def __init__(self, token, reason: str = "unrecognized length") -> None:
        self.token = token
        super().__init__(f"{reason}: {token!r}")


class GradientWarning(UserWarning):
    """Recoverable problem in a gradient description."""
