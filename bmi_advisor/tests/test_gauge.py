import pytest

from bmi_advisor.core.gauge import GAUGE_SEGMENTS, needle_angle, segment_for, segment_for_category
from bmi_advisor.core.logic import calculate_results
from bmi_advisor.core.schema import BmiCategory, UserProfile


@pytest.mark.parametrize(
    "bmi,angle",
    [
        (18.5, -30),
        (25, 30),
        (30, 60),
        (40, 90),
        (50, 90),
        (0, -90),
        (-3, -90),
    ],
)
def test_needle_angle_anchors(bmi, angle):
    assert needle_angle(bmi) == angle


def test_needle_angle_interpolates():
    assert needle_angle(9.25) == pytest.approx(-60)
    assert needle_angle(21.75) == pytest.approx(0)
    assert needle_angle(27.5) == pytest.approx(45)
    assert needle_angle(35) == pytest.approx(75)


def test_needle_angle_is_monotonic_and_clamped():
    angles = [needle_angle(b / 10) for b in range(-50, 600)]
    assert angles == sorted(angles)
    assert min(angles) == -90
    assert max(angles) == 90


def test_segments_cover_half_circle():
    assert GAUGE_SEGMENTS[0].start_angle == -90
    assert GAUGE_SEGMENTS[-1].end_angle == 90
    for left, right in zip(GAUGE_SEGMENTS, GAUGE_SEGMENTS[1:]):
        assert left.end_angle == right.start_angle


def test_needle_falls_in_its_segment():
    for bmi in (5, 18.5, 22, 25, 29.9, 30, 45):
        segment = segment_for(bmi)
        assert segment.start_angle <= needle_angle(bmi) <= segment.end_angle
    assert segment_for(22).category == BmiCategory.NORMAL


def test_segment_for_category():
    assert segment_for_category(BmiCategory.OBESE).label == "30+"
    assert segment_for_category("Normal Weight").color == "#10b981"


def test_needle_follows_category_near_boundary():
    # BMI 24.96 displays as 25.0 but is still Normal Weight
    metrics = calculate_results(UserProfile(name="Ada", height=100, weight=24.96))
    assert metrics.bmi == 25.0
    assert metrics.bmi_category == BmiCategory.NORMAL
    segment = segment_for_category(metrics.bmi_category)
    assert segment.start_angle <= metrics.needle_angle < segment.end_angle
