"""Assessment agent.

Runs the local health metrics engine for a profile and, on request, asks
the advice service for free-text recommendations.  The metrics never depend
on the remote call: they are computed first and a failed request only
yields the fallback text.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..core import logic
from ..core.schema import HealthMetrics, UserProfile
from .health_advisor import AdviceGenerator, HealthInfo, get_health_recommendations

logger = logging.getLogger(__name__)


class Assessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile: UserProfile
    metrics: HealthMetrics
    ai_advice: Optional[str] = None


async def assess(
    profile: UserProfile,
    *,
    use_ai: bool = False,
    generator: Optional[AdviceGenerator] = None,
) -> Assessment:
    """Return a fresh ``Assessment`` for ``profile``.

    Args:
        profile: Validated user input.
        use_ai: Also request generated recommendations.
        generator: Advice capability to use instead of the configured LLM.

    Returns:
        An ``Assessment`` with ``ai_advice`` set only when ``use_ai`` is true.
    """
    metrics = logic.calculate_results(profile)
    logger.info(
        "assess: bmi=%s category=%s calories=%s",
        metrics.bmi,
        metrics.bmi_category.value,
        metrics.daily_calories,
    )
    ai_advice = None
    if use_ai:
        info = HealthInfo.from_metrics(profile, metrics)
        ai_advice = await get_health_recommendations(info, generator)
    return Assessment(profile=profile, metrics=metrics, ai_advice=ai_advice)
