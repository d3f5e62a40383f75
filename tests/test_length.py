import math

import pytest

from cssgradient.errors import InvalidLength
from cssgradient.length import ABSOLUTE_UNITS, Length, parse_length


@pytest.mark.parametrize("token, value, unit", [
    ("50%", 50.0, "%"),
    ("12px", 12.0, "px"),
    ("1in", 1.0, "in"),
    ("2.5mm", 2.5, "mm"),
    ("1cm", 1.0, "cm"),
    ("12PT", 12.0, "pt"),
    (".5pc", 0.5, "pc"),
])
def test_parse_unit_lengths(token, value, unit):
    length = parse_length(token)
    assert length.value == value
    assert length.unit == unit


def test_bare_numbers_are_axis_fractions():
    assert parse_length(0.5) == Length(50, "%")
    assert parse_length("0.25") == Length(25, "%")
    assert parse_length(1) == Length(100, "%")


@pytest.mark.parametrize("token", ["12em", "abc", "px", "1.2.3px", "", "inf", None, True])
def test_invalid_lengths_raise(token):
    with pytest.raises(InvalidLength):
        parse_length(token)


def test_to_pixels_percentages_floor():
    assert Length(50, "%").to_pixels(100) == 50
    assert Length(33, "%").to_pixels(10) == 3
    assert Length(100, "%").to_pixels(7) == 7


def test_to_pixels_absolute_units_ignore_axis():
    assert Length(10, "px").to_pixels(1) == 10
    assert Length(1, "in").to_pixels(1000) == 96
    assert Length(2, "pc").to_pixels(5) == 32
    assert Length(1, "cm").to_pixels(5) == math.floor(ABSOLUTE_UNITS["cm"])
    assert Length(12, "pt").to_pixels(5) == 15


def test_length_is_immutable_and_hashable():
    length = Length(3, "px")
    with pytest.raises(AttributeError):
        length._value = 4
    assert {Length(3, "px"), Length(3.0, "px")} == {length}


def test_unknown_unit_rejected_by_constructor():
    with pytest.raises(InvalidLength):
        Length(1, "em")
