import dataclasses

import pytest

from dfengine import color
from dfengine.color import Color

SAMPLE = Color(0.5, 0.25, 0.75, 1.0)
OTHER = Color(0.25, 0.5, 0.125, 0.5)


def test_named_colors_match_source():
    assert color.RED == Color(1.0, 0.0, 0.0, 1.0)
    assert color.ORANGE == Color(1.0, 0.6, 0.0, 1.0)
    assert color.TEAL == Color(0.0, 0.5, 0.5, 1.0)


def test_add_then_subtract_round_trip():
    assert (SAMPLE + OTHER) - OTHER == SAMPLE


def test_multiply_then_divide_round_trip():
    assert (SAMPLE * OTHER) / OTHER == SAMPLE


def test_scalar_add_then_subtract_round_trip():
    assert (SAMPLE + 0.5) - 0.5 == SAMPLE


def test_scalar_multiply_by_two_equals_self_addition():
    assert SAMPLE * 2 == SAMPLE + SAMPLE


def test_scalar_identity_operations():
    assert SAMPLE * 1 == SAMPLE
    assert SAMPLE / 1 == SAMPLE
    assert SAMPLE + 0 == SAMPLE


def test_subtract_self_gives_zero():
    assert SAMPLE - SAMPLE == Color(0.0, 0.0, 0.0, 0.0)


def test_divide_by_self_gives_ones():
    assert SAMPLE / SAMPLE == Color(1.0, 1.0, 1.0, 1.0)


def test_componentwise_multiply_with_white_is_identity():
    assert SAMPLE * color.WHITE == Color(SAMPLE.r, SAMPLE.g, SAMPLE.b, SAMPLE.a)


def test_in_place_operator_leaves_original_unchanged():
    value = SAMPLE
    value += OTHER
    assert value == SAMPLE + OTHER
    assert SAMPLE == Color(0.5, 0.25, 0.75, 1.0)


def test_unsupported_operand_raises():
    value = Color(0.5, 0.25, 0.75, 1.0)
    with pytest.raises(TypeError):
        value + "red"
    assert value == Color(0.5, 0.25, 0.75, 1.0)


def test_colors_are_immutable():
    value = Color(0.5, 0.25, 0.75, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.r = 0.0
    assert value == Color(0.5, 0.25, 0.75, 1.0)