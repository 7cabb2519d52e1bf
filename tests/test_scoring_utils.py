import math

import pytest

from backend.app.utils.scoring_utils import clamp, parse_number, round_half_up


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 0.0),
        ("", 0.0),
        ("abc", 0.0),
        ("12.5 hrs", 12.5),
        ("  7 ", 7.0),
        ("1e3", 1000.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("-3", -3.0),
        (20, 20.0),
        (7.5, 7.5),
        (True, 0.0),
        ([1, 2], 0.0),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_parse_number_non_finite_is_zero():
    assert parse_number(float("nan")) == 0.0
    assert parse_number(float("inf")) == 0.0
    assert parse_number("Infinity") == 0.0
    # overflows to inf while parsing
    assert parse_number("1e400") == 0.0


def test_parse_number_int_too_wide_for_float_is_zero():
    assert parse_number(10 ** 400) == 0.0
    assert parse_number(-(10 ** 400)) == 0.0


def test_round_half_up_matches_browser_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(14.5) == 15
    assert round_half_up(2.4) == 2
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.5) == 1


def test_clamp():
    assert clamp(150) == 100
    assert clamp(-5) == 0
    assert clamp(42.5) == 42.5
    assert clamp(5, 10, 20) == 10
    assert not math.isnan(clamp(0.0))
