"""Core health calculations.

This module contains formulas for body mass index (BMI), the healthy
weight range for a height, basal metabolic rate (BMR), daily calorie needs
and a fixed macronutrient split.  Everything here is pure arithmetic on
already validated inputs; values are indicative and should not replace
professional advice.
"""

from __future__ import annotations

import logging

from .schema import BmiCategory, Gender, HealthMetrics, MacroSplit, UserProfile
from .utils import round_half_up

logger = logging.getLogger(__name__)

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9

# Share of daily calories and kcal per gram
MACRO_SHARES = {
    "protein": (0.30, 4),
    "carbs": (0.50, 4),
    "fat": (0.20, 9),
}

ADVICE_TEMPLATES: dict[BmiCategory, str] = {
    BmiCategory.UNDERWEIGHT: (
        "Hi {name}! Your BMI indicates you're underweight. Consider consulting "
        "with a healthcare provider or nutritionist to develop a healthy weight "
        "gain plan. Focus on nutrient-dense foods and consider strength training "
        "to build healthy muscle mass."
    ),
    BmiCategory.NORMAL: (
        "Great job, {name}! You're within a healthy BMI range. Keep up your "
        "balanced eating habits and regular physical activity. Your calorie needs "
        "support maintaining your current healthy weight. Continue monitoring "
        "your health with regular check-ups."
    ),
    BmiCategory.OVERWEIGHT: (
        "Hi {name}, your BMI indicates you're in the overweight range. Consider "
        "making gradual lifestyle changes like increasing physical activity and "
        "focusing on portion control. Small, sustainable changes can help you "
        "reach a healthier weight over time."
    ),
    BmiCategory.OBESE: (
        "Hi {name}, your BMI suggests you may benefit from working with "
        "healthcare professionals to develop a comprehensive weight management "
        "plan. Focus on creating sustainable healthy habits with proper nutrition "
        "and regular exercise. Remember, every small step counts!"
    ),
}


def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    """Return the unrounded BMI for metric inputs.

    Args:
        height_cm: Height in centimetres, must be positive.
        weight_kg: Weight in kilograms.

    Returns:
        ``weight_kg / height_m**2``.
    """
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def bmi_category(bmi: float) -> BmiCategory:
    """Classify ``bmi``; every lower bound is inclusive."""
    if bmi < 18.5:
        return BmiCategory.UNDERWEIGHT
    if bmi < 25:
        return BmiCategory.NORMAL
    if bmi < 30:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def healthy_weight_range(height_cm: float) -> tuple[float, float]:
    """Return ``(min_kg, max_kg)`` for a BMI of 18.5–24.9 at ``height_cm``.

    Depends on height only, never on the subject's actual weight.
    """
    height_m = height_cm / 100
    min_weight = HEALTHY_BMI_MIN * height_m * height_m
    max_weight = HEALTHY_BMI_MAX * height_m * height_m
    return round_half_up(min_weight, 1), round_half_up(max_weight, 1)


def compute_bmr(gender: Gender | str, age: int, height_cm: float, weight_kg: float) -> float:
    """Compute basal metabolic rate using the Mifflin–St Jeor equation.

    Only ``male`` uses the +5 offset; ``female`` and ``other`` share the
    -161 branch.

    Args:
        gender: "male", "female" or "other".
        age: Age in years.
        height_cm: Height in centimetres.
        weight_kg: Weight in kilograms.

    Returns:
        Estimated BMR in kilocalories per day, unrounded.
    """
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if Gender(gender) == Gender.MALE:
        return bmr + 5
    return bmr - 161


def daily_calories(bmr: float, activity: float) -> float:
    """Total daily calorie need; pass the unrounded BMR."""
    return bmr * activity


def compute_macros(calories: float) -> MacroSplit:
    """Split ``calories`` 30/50/20 into protein, carbs and fat grams.

    Each value is rounded on its own, so the grams converted back to kcal
    do not have to add up to ``calories`` exactly.
    """
    grams = {
        name: int(round_half_up(share * calories / kcal_per_gram))
        for name, (share, kcal_per_gram) in MACRO_SHARES.items()
    }
    return MacroSplit(protein_g=grams["protein"], carbs_g=grams["carbs"], fat_g=grams["fat"])


def health_advice(name: str, category: BmiCategory | str) -> str:
    """Return the fixed advice text for ``category`` addressed to ``name``."""
    return ADVICE_TEMPLATES[BmiCategory(category)].format(name=name)


def calculate_results(profile: UserProfile) -> HealthMetrics:
    """Compute all metrics for ``profile``.

    Units are converted to centimetres and kilograms first; BMI, BMR and
    calories are rounded only when the result record is built.
    """
    height_cm = profile.height_cm
    weight_kg = profile.weight_kg

    bmi = calculate_bmi(height_cm, weight_kg)
    category = bmi_category(bmi)
    min_weight, max_weight = healthy_weight_range(height_cm)

    bmr = compute_bmr(profile.gender, profile.age, height_cm, weight_kg)
    calories = daily_calories(bmr, profile.activity)
    macros = compute_macros(calories)

    metrics = HealthMetrics(
        bmi=round_half_up(bmi, 1),
        bmi_category=category,
        min_weight=min_weight,
        max_weight=max_weight,
        bmr=int(round_half_up(bmr)),
        daily_calories=int(round_half_up(calories)),
        protein_grams=macros.protein_g,
        carbs_grams=macros.carbs_g,
        fat_grams=macros.fat_g,
        height_in_cm=height_cm,
        weight_in_kg=weight_kg,
        health_advice=health_advice(profile.name, category),
    )
    logger.debug(
        "calculate_results: bmi=%s category=%s bmr=%s calories=%s",
        metrics.bmi,
        metrics.bmi_category.value,
        metrics.bmr,
        metrics.daily_calories,
    )
    return metrics
