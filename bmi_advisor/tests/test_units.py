"""Unit tests for metric/imperial conversion."""

import pytest

from bmi_advisor.core.units import (
    HeightUnit,
    WeightUnit,
    convert_for_input,
    convert_height,
    convert_weight,
    format_height,
)


def test_same_unit_is_identity():
    assert convert_height(171.3, "cm", "cm") == 171.3
    assert convert_weight(70.25, WeightUnit.LB, WeightUnit.LB) == 70.25


def test_feet_to_cm():
    assert convert_height(6, "ft", "cm") == pytest.approx(182.88)
    assert convert_height(182.88, HeightUnit.CM, HeightUnit.FT) == pytest.approx(6)


def test_pounds_to_kg():
    assert convert_weight(100, "lb", "kg") == pytest.approx(45.3592)
    assert convert_weight(45.3592, "kg", "lb") == pytest.approx(100)


@pytest.mark.parametrize("height", [50, 120.5, 170, 199.9, 300])
def test_height_round_trip(height):
    back = convert_height(convert_height(height, "cm", "ft"), "ft", "cm")
    assert abs(back - height) < 0.1


@pytest.mark.parametrize("weight", [20, 55.5, 70, 140.2, 500])
def test_weight_round_trip(weight):
    back = convert_weight(convert_weight(weight, "kg", "lb"), "lb", "kg")
    assert abs(back - weight) < 0.1


def test_convert_for_input_rounds_to_one_decimal():
    assert convert_for_input(170, "cm", "ft") == 5.6
    assert convert_for_input(70, "kg", "lb") == 154.3
    assert convert_for_input(5.6, "ft", "cm") == 170.7


def test_unknown_unit_rejected():
    with pytest.raises(ValueError):
        convert_height(170, "in", "cm")


def test_format_height_feet():
    assert format_height(5.5, "ft") == "5'6\""
    assert format_height(6, HeightUnit.FT) == "6'0\""


def test_format_height_carries_twelve_inches():
    assert format_height(5.99, "ft") == "6'0\""


def test_format_height_cm():
    assert format_height(170, "cm") == "170.0 cm"
    assert format_height(182.88, "cm") == "182.9 cm"
