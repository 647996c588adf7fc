"""Metric/imperial conversion for height and weight.

All functions are pure.  Units are a closed set, so every pair of units
has a defined conversion and nothing here raises for a valid unit.
"""

from __future__ import annotations

import math
from enum import Enum

from .utils import round_half_up

CM_PER_FOOT = 30.48
KG_PER_POUND = 0.453592


class HeightUnit(str, Enum):
    CM = "cm"
    FT = "ft"


class WeightUnit(str, Enum):
    KG = "kg"
    LB = "lb"


def convert_height(value: float, from_unit: HeightUnit | str, to_unit: HeightUnit | str) -> float:
    """Convert ``value`` between centimetres and decimal feet."""
    from_unit, to_unit = HeightUnit(from_unit), HeightUnit(to_unit)
    if from_unit == to_unit:
        return value
    if from_unit == HeightUnit.FT:
        return value * CM_PER_FOOT
    return value / CM_PER_FOOT


def convert_weight(value: float, from_unit: WeightUnit | str, to_unit: WeightUnit | str) -> float:
    """Convert ``value`` between kilograms and pounds."""
    from_unit, to_unit = WeightUnit(from_unit), WeightUnit(to_unit)
    if from_unit == to_unit:
        return value
    if from_unit == WeightUnit.LB:
        return value * KG_PER_POUND
    return value / KG_PER_POUND


def convert_for_input(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a height or weight and round to one decimal.

    Used when the user switches the unit of an already filled in field.
    """
    if from_unit in (HeightUnit.CM, HeightUnit.FT):
        converted = convert_height(value, from_unit, to_unit)
    else:
        converted = convert_weight(value, from_unit, to_unit)
    return round_half_up(converted, 1)


def format_height(value: float, unit: HeightUnit | str) -> str:
    """Render a height for display.

    Decimal feet become ``5'7"``; inches that round up to 12 carry over
    into the next foot.  Centimetres are shown with one decimal.
    """
    if HeightUnit(unit) == HeightUnit.FT:
        feet = math.floor(value)
        inches = int(round_half_up((value - feet) * 12))
        if inches == 12:
            feet, inches = feet + 1, 0
        return f"{feet}'{inches}\""
    return f"{value:.1f} cm"
