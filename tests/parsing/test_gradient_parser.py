import warnings

import pytest

from cssgradient import (
    Color,
    Direction,
    EmptyStopList,
    Gradient,
    GradientSyntaxError,
    GradientWarning,
    InvalidColor,
    Length,
    parse_gradient,
)
from cssgradient.parsing import parse_components, parse_stop


def test_direction_and_stops():
    gradient = parse_gradient("linear-gradient(to right, #000, #fff 50%, red)")
    assert gradient.direction == Direction.TO_RIGHT
    assert [stop.color for stop in gradient.stops] == [
        Color(0, 0, 0), Color(255, 255, 255), Color(255, 0, 0),
    ]
    assert [stop.position for stop in gradient.stops] == [None, Length(50, "%"), None]


def test_commas_inside_rgba_are_not_separators():
    gradient = parse_gradient(
        "linear-gradient(rgba(255,255,255,.2), rgba(255,255,255,.2) 1px, rgba(0,0,0,.05))"
    )
    assert len(gradient.stops) == 3
    first, second, third = gradient.stops
    assert first.position is None
    assert second.position == Length(1, "px")
    assert third.position is None
    assert first.color.rgba == (255, 255, 255, 0.2)
    assert third.color.rgba == (0, 0, 0, 0.05)


def test_striped_background_sample_parses():
    gradient = parse_gradient(
        "linear-gradient(top, rgba(255,255,255,.2), rgba(255,255,255,.2) 1px, "
        "rgba(255,255,255,.05) 1px, rgba(255,255,255,0) 50%, rgba(0,0,0,0) 50%, rgba(0,0,0,.05))"
    )
    assert gradient.direction == Direction.TOP
    assert len(gradient.stops) == 6


def test_hsla_and_whitespace():
    gradient = parse_gradient(
        "  linear-gradient(  to   top ,\n hsla( 120 , 100% , 50% , .5 ) ,  #f00 ,rgba(255,255,255,0) )  "
    )
    assert gradient.direction == Direction.TO_TOP
    assert gradient.stops[0].color.rgba == (0, 255, 0, 0.5)
    assert gradient.stops[2].color.rgba == (255, 255, 255, 0.0)


def test_missing_direction_defaults_to_bottom():
    assert parse_gradient("linear-gradient(#000, #fff)").direction == Direction.TO_BOTTOM


def test_named_first_color_is_not_a_direction():
    gradient = parse_gradient("linear-gradient(red, blue)")
    assert gradient.direction == Direction.TO_BOTTOM
    assert len(gradient.stops) == 2


def test_angle_direction_falls_back_with_warning():
    with pytest.warns(GradientWarning):
        gradient = parse_gradient("linear-gradient(45deg, #000, #fff)")
    assert gradient.direction == Direction.TO_RIGHT
    assert len(gradient.stops) == 2


def test_unitless_stop_positions():
    gradient = parse_gradient("linear-gradient(#000 0, #fff 0.5)")
    assert [stop.position for stop in gradient.stops] == [Length(0, "%"), Length(50, "%")]


def test_invalid_length_degrades_to_auto():
    with pytest.warns(GradientWarning):
        gradient = parse_gradient("linear-gradient(#000, #888 12em, #fff)")
    assert gradient.stops[1].position is None
    assert gradient.stops[1].color == Color(136, 136, 136)


def test_extra_stop_tokens_are_ignored():
    with pytest.warns(GradientWarning) as record:
        stop = parse_stop("#000 10% 20%")
    assert stop.position == Length(10, "%")
    assert record[0].filename == __file__


def test_stop_warnings_point_at_the_caller():
    with pytest.warns(GradientWarning) as record:
        parse_stop("#000 12em")
    assert record[0].filename == __file__


@pytest.mark.parametrize("source", [
    "linear-gradient(45deg, #000, #fff)",
    "linear-gradient(#000, #888 12em, #fff)",
    "linear-gradient(#000, #888 10% 20%, #fff)",
])
def test_parse_warnings_point_at_the_caller(source):
    for parse in (parse_gradient, Gradient.parse, parse_components):
        with pytest.warns(GradientWarning) as record:
            parse(source)
        assert record[0].filename == __file__


@pytest.mark.parametrize("source", [
    "radial-gradient(#000, #fff)",
    "LINEAR-GRADIENT(#000, #fff)",
    "Linear-Gradient(#000, #fff)",
    "linear-gradient(#000, #fff",
    "#000, #fff",
    "linear-gradient(rgb(0,0,0, #fff)",
    "linear-gradient(#000,,#fff)",
])
def test_syntax_errors(source):
    with pytest.raises(GradientSyntaxError):
        parse_gradient(source)


@pytest.mark.parametrize("source", [
    "linear-gradient()",
    "linear-gradient(to right)",
    "linear-gradient( )",
])
def test_empty_stop_list(source):
    with pytest.raises(EmptyStopList):
        parse_gradient(source)


def test_bad_color_aborts_whole_parse():
    with pytest.raises(InvalidColor):
        parse_gradient("linear-gradient(to left, #000, #zzz, #fff)")


def test_parse_components_returns_plain_values():
    direction, stops = parse_components("linear-gradient(bottom, #123)")
    assert direction == Direction.BOTTOM
    assert isinstance(stops, tuple) and len(stops) == 1


def test_warning_free_parse():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        parse_gradient("linear-gradient(to bottom, #000 10px, hsl(0,100%,50%) 2cm, white)")


def test_gradient_parse_classmethod_and_source():
    gradient = Gradient.parse(" linear-gradient(#000, #fff) ")
    assert gradient.source == "linear-gradient(#000, #fff)"
    assert gradient == parse_gradient("linear-gradient(to bottom,#000,#fff)")
