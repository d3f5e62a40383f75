"""
Top-level splitting for the ``linear-gradient`` parameter list.

Color functions use the same comma that separates stops, so splitting must
ignore separators nested inside parentheses.

>>> split_top_level("to top,rgba(0,0,0,.5) 10%,#fff", ",")
['to top', 'rgba(0,0,0,.5) 10%', '#fff']
"""
from __future__ import annotations
import re
from typing import List

from ..errors import GradientSyntaxError

_WHITESPACE_RE = re.compile(r"\s+")
_AROUND_PUNCTUATION_RE = re.compile(r" ?([(),]) ?")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs and drop spaces next to parentheses and commas."""
    text = _WHITESPACE_RE.sub(" ", text.strip())
    return _AROUND_PUNCTUATION_RE.sub(r"\1", text)


def split_top_level(text: str, separator: str) -> List[str]:
    """
    Split ``text`` on ``separator`` wherever the parenthesis depth is zero.

    Raises:
        GradientSyntaxError: parentheses are unbalanced
    """
    parts: List[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise GradientSyntaxError(f"unbalanced ')' at offset {index} in {text!r}")
        elif char == separator and depth == 0:
            parts.append(text[start:index])
            start = index + 1
    if depth != 0:
        raise GradientSyntaxError(f"unclosed '(' in {text!r}")
    parts.append(text[start:])
    return parts
