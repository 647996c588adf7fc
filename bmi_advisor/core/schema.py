"""Pydantic models and enums for the health metrics engine.

``UserProfile`` is the validated input collected from the user and
``HealthMetrics`` the immutable result of one calculation.  Neither is
stored anywhere; a new submission simply produces a new ``HealthMetrics``.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .units import HeightUnit, WeightUnit, convert_for_input, convert_height, convert_weight

__all__ = [
    "ActivityLevel",
    "BmiCategory",
    "Gender",
    "HealthMetrics",
    "HeightUnit",
    "MacroSplit",
    "UserProfile",
    "WeightUnit",
]

MIN_HEIGHT_CM = 50
MAX_HEIGHT_CM = 300
MIN_WEIGHT_KG = 20
MAX_WEIGHT_KG = 500


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class BmiCategory(str, Enum):
    """BMI classes; values are the labels shown to the user."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal Weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


class ActivityLevel(Enum):
    """Activity multipliers applied to BMR."""

    SEDENTARY = (1.2, "Sedentary", "Little to no exercise")
    LIGHT = (1.375, "Lightly Active", "Light exercise 1-3 days/week")
    MODERATE = (1.55, "Moderately Active", "Moderate exercise 3-5 days/week")
    VERY_ACTIVE = (1.725, "Very Active", "Heavy exercise 6-7 days/week")

    def __init__(self, factor: float, label: str, description: str) -> None:
        self.factor = factor
        self.label = label
        self.description = description

    @classmethod
    def from_factor(cls, factor: float) -> "ActivityLevel":
        for level in cls:
            if abs(level.factor - factor) < 1e-9:
                return level
        allowed = ", ".join(str(level.factor) for level in cls)
        raise ValueError(f"Activity factor must be one of {allowed}")


class MacroSplit(BaseModel):
    model_config = ConfigDict(frozen=True)

    protein_g: int
    carbs_g: int
    fat_g: int


class UserProfile(BaseModel):
    """Measurements entered by the user.

    Height and weight keep the unit they were entered in; the range checks
    run on the converted metric values so ``5.7`` feet is as valid as
    ``170`` centimetres.
    """

    name: str = Field(..., min_length=1)
    age: int = 25
    gender: Gender = Gender.MALE
    height: float = 170
    height_unit: HeightUnit = HeightUnit.CM
    weight: float = 70
    weight_unit: WeightUnit = WeightUnit.KG
    activity: float = ActivityLevel.MODERATE.factor
    health_conditions: List[str] = Field(default_factory=list)
    dietary_restrictions: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("age")
    @classmethod
    def check_age(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Age must be at least 1")
        if v > 120:
            raise ValueError("Age must be less than 120")
        return v

    @field_validator("height", "weight")
    @classmethod
    def check_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be a positive number")
        return v

    @field_validator("activity")
    @classmethod
    def check_activity(cls, v: float) -> float:
        return ActivityLevel.from_factor(v).factor

    @model_validator(mode="after")
    def check_ranges(self) -> "UserProfile":
        height_cm = self.height_cm
        if height_cm < MIN_HEIGHT_CM:
            raise ValueError("Height must be at least 50cm")
        if height_cm > MAX_HEIGHT_CM:
            raise ValueError("Height must be less than 300cm")
        weight_kg = self.weight_kg
        if weight_kg < MIN_WEIGHT_KG:
            raise ValueError("Weight must be at least 20kg")
        if weight_kg > MAX_WEIGHT_KG:
            raise ValueError("Weight must be less than 500kg")
        return self

    @property
    def height_cm(self) -> float:
        return convert_height(self.height, self.height_unit, HeightUnit.CM)

    @property
    def weight_kg(self) -> float:
        return convert_weight(self.weight, self.weight_unit, WeightUnit.KG)

    @property
    def activity_level(self) -> ActivityLevel:
        return ActivityLevel.from_factor(self.activity)

    def with_height_unit(self, unit: HeightUnit | str) -> "UserProfile":
        """Return a copy with height re-expressed in ``unit`` (one decimal)."""
        unit = HeightUnit(unit)
        height = convert_for_input(self.height, self.height_unit, unit)
        return self.model_copy(update={"height": height, "height_unit": unit})

    def with_weight_unit(self, unit: WeightUnit | str) -> "UserProfile":
        """Return a copy with weight re-expressed in ``unit`` (one decimal)."""
        unit = WeightUnit(unit)
        weight = convert_for_input(self.weight, self.weight_unit, unit)
        return self.model_copy(update={"weight": weight, "weight_unit": unit})


class HealthMetrics(BaseModel):
    """Result of one calculation.  Frozen; never updated in place."""

    model_config = ConfigDict(frozen=True)

    bmi: float
    bmi_category: BmiCategory
    min_weight: float
    max_weight: float
    bmr: int
    daily_calories: int
    protein_grams: int
    carbs_grams: int
    fat_grams: int
    height_in_cm: float
    weight_in_kg: float
    health_advice: str

    @property
    def macros(self) -> MacroSplit:
        return MacroSplit(
            protein_g=self.protein_grams,
            carbs_g=self.carbs_grams,
            fat_g=self.fat_grams,
        )

    @property
    def needle_angle(self) -> float:
        # unrounded BMI, so the needle stays in the arc of ``bmi_category``
        from .gauge import needle_angle
        from .logic import calculate_bmi

        return needle_angle(calculate_bmi(self.height_in_cm, self.weight_in_kg))
