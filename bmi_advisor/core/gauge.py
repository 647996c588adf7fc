"""BMI gauge geometry.

The gauge is a half circle from -90 degrees (BMI 0) to +90 degrees (BMI 40
and above).  Each BMI class owns one coloured arc; the needle position is
piecewise linear inside each arc.
"""

from __future__ import annotations

from dataclasses import dataclass

from .logic import bmi_category
from .schema import BmiCategory

MIN_ANGLE = -90.0
MAX_ANGLE = 90.0


@dataclass(frozen=True)
class GaugeSegment:
    category: BmiCategory
    start_angle: float
    end_angle: float
    color: str
    label: str


GAUGE_SEGMENTS = (
    GaugeSegment(BmiCategory.UNDERWEIGHT, -90.0, -30.0, "#3b82f6", "< 18.5"),
    GaugeSegment(BmiCategory.NORMAL, -30.0, 30.0, "#10b981", "18.5-24.9"),
    GaugeSegment(BmiCategory.OVERWEIGHT, 30.0, 60.0, "#f59e0b", "25-29.9"),
    GaugeSegment(BmiCategory.OBESE, 60.0, 90.0, "#ef4444", "30+"),
)

_BY_CATEGORY = {segment.category: segment for segment in GAUGE_SEGMENTS}


def needle_angle(bmi: float) -> float:
    """Return the needle angle in degrees for ``bmi``, clamped to [-90, 90]."""
    if bmi <= 0:
        return MIN_ANGLE
    if bmi < 18.5:
        return -90 + (bmi / 18.5) * 60
    if bmi < 25:
        return -30 + ((bmi - 18.5) / 6.5) * 60
    if bmi < 30:
        return 30 + ((bmi - 25) / 5) * 30
    return min(60 + ((bmi - 30) / 10) * 30, MAX_ANGLE)


def segment_for(bmi: float) -> GaugeSegment:
    """Return the coloured arc the needle for ``bmi`` points into."""
    return _BY_CATEGORY[bmi_category(bmi)]


def segment_for_category(category: BmiCategory | str) -> GaugeSegment:
    return _BY_CATEGORY[BmiCategory(category)]
