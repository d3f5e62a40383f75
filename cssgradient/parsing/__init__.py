from .tokenizer import normalize_whitespace, split_top_level
from .gradient_parser import (
    parse_components,
    parse_direction,
    parse_gradient,
    parse_stop,
    PREFIX,
)

__all__ = [
    "normalize_whitespace",
    "split_top_level",
    "parse_components",
    "parse_direction",
    "parse_gradient",
    "parse_stop",
    "PREFIX",
]
