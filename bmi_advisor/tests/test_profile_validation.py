"""Validation of user supplied measurements."""

import pytest
from pydantic import ValidationError

from bmi_advisor.core.schema import ActivityLevel, Gender, HeightUnit, UserProfile, WeightUnit


def test_defaults():
    profile = UserProfile(name="Ada")
    assert profile.age == 25
    assert profile.gender == Gender.MALE
    assert (profile.height, profile.height_unit) == (170, HeightUnit.CM)
    assert (profile.weight, profile.weight_unit) == (70, WeightUnit.KG)
    assert profile.activity_level == ActivityLevel.MODERATE


@pytest.mark.parametrize("name", ["", "   "])
def test_name_required(name):
    with pytest.raises(ValidationError):
        UserProfile(name=name)


@pytest.mark.parametrize("age", [0, 121])
def test_age_bounds(age):
    with pytest.raises(ValidationError):
        UserProfile(name="Ada", age=age)


def test_height_checked_in_canonical_units():
    # 6 ft is 182.88 cm
    assert UserProfile(name="Ada", height=6, height_unit="ft").height_cm == pytest.approx(182.88)
    with pytest.raises(ValidationError, match="Height must be at least 50cm"):
        UserProfile(name="Ada", height=6, height_unit="cm")
    with pytest.raises(ValidationError, match="Height must be less than 300cm"):
        UserProfile(name="Ada", height=10, height_unit="ft")


def test_weight_checked_in_canonical_units():
    assert UserProfile(name="Ada", weight=600, weight_unit="lb").weight_kg == pytest.approx(272.1552)
    with pytest.raises(ValidationError, match="Weight must be at least 20kg"):
        UserProfile(name="Ada", weight=40, weight_unit="lb")
    with pytest.raises(ValidationError, match="Weight must be less than 500kg"):
        UserProfile(name="Ada", weight=600, weight_unit="kg")


def test_non_positive_measurements_rejected():
    with pytest.raises(ValidationError):
        UserProfile(name="Ada", height=0)
    with pytest.raises(ValidationError):
        UserProfile(name="Ada", weight=-70)


def test_activity_must_be_known_factor():
    for level in ActivityLevel:
        assert UserProfile(name="Ada", activity=level.factor).activity_level == level
    with pytest.raises(ValidationError):
        UserProfile(name="Ada", activity=1.5)


def test_unknown_unit_rejected():
    with pytest.raises(ValidationError):
        UserProfile(name="Ada", height_unit="in")


def test_switching_units_rounds_value():
    profile = UserProfile(name="Ada")
    imperial = profile.with_height_unit("ft").with_weight_unit("lb")
    assert (imperial.height, imperial.height_unit) == (5.6, HeightUnit.FT)
    assert (imperial.weight, imperial.weight_unit) == (154.3, WeightUnit.LB)
    back = imperial.with_height_unit(HeightUnit.CM)
    assert back.height == 170.7
    assert profile.height == 170
