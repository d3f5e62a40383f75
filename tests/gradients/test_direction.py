import pytest

from cssgradient.gradients.direction import DEFAULT_DIRECTION, FALLBACK_DIRECTION, Direction


@pytest.mark.parametrize("keyword, step", [
    ("top", (0, 1)),
    ("to bottom", (0, 1)),
    ("bottom", (0, -1)),
    ("to top", (0, -1)),
    ("right", (-1, 0)),
    ("to left", (-1, 0)),
    ("left", (1, 0)),
    ("to right", (1, 0)),
])
def test_steps(keyword, step):
    assert Direction.from_keyword(keyword).step == step


def test_keywords_are_case_and_space_insensitive():
    assert Direction.from_keyword("  To   Top ") == Direction.TO_TOP
    assert Direction.is_keyword("TO  LEFT")


@pytest.mark.parametrize("keyword", ["45deg", "to top left", "diagonal", ""])
def test_unknown_keywords_fall_back(keyword):
    assert Direction.from_keyword(keyword) == FALLBACK_DIRECTION == Direction.TO_RIGHT


def test_axis_and_inversion():
    assert Direction.TO_BOTTOM.axis_length(30, 10) == 10
    assert Direction.LEFT.axis_length(30, 10) == 30
    assert Direction.TO_TOP.is_inverted and Direction.RIGHT.is_inverted
    assert not Direction.TOP.is_inverted and not Direction.TO_RIGHT.is_inverted
    assert DEFAULT_DIRECTION == Direction.TO_BOTTOM


def test_direction_is_a_string():
    assert Direction.TO_TOP == "to top"
