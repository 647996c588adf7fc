from __future__ import annotations

"""Agent for free-text dietary advice from a language model."""

import logging
from typing import List, Optional, Protocol

from pydantic import BaseModel, Field

from ..core.config import advice_language, agent_llm, load_config
from ..core.llm import ask_llm
from ..core.prompts import render_prompt
from ..core.schema import HealthMetrics, UserProfile

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = (
    "Unable to generate personalized recommendations at this time. "
    "Please try again later."
)


class HealthInfo(BaseModel):
    """Context sent to the advice service."""

    bmi: float
    bmi_category: str
    health_conditions: List[str] = Field(default_factory=list)
    dietary_restrictions: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    age: int
    gender: str
    activity_level: str

    @classmethod
    def from_metrics(cls, profile: UserProfile, metrics: HealthMetrics) -> "HealthInfo":
        return cls(
            bmi=metrics.bmi,
            bmi_category=metrics.bmi_category.value,
            health_conditions=profile.health_conditions,
            dietary_restrictions=profile.dietary_restrictions,
            allergies=profile.allergies,
            age=profile.age,
            gender=profile.gender.value,
            activity_level=profile.activity_level.label,
        )


class AdviceGenerator(Protocol):
    """Anything that turns ``HealthInfo`` into advice text.

    Implementations may raise; callers go through
    :func:`get_health_recommendations`, which substitutes the fallback.
    """

    async def generate(self, info: HealthInfo) -> str:
        ...


class LLMAdviceGenerator:
    """``AdviceGenerator`` backed by :func:`~bmi_advisor.core.llm.ask_llm`."""

    def __init__(self, cfg: Optional[dict] = None, *, temperature: float = 0.7) -> None:
        self.cfg = {**load_config(), **(cfg or {})}
        self.temperature = temperature

    def build_prompt(self, info: HealthInfo) -> str:
        return render_prompt(
            "health_recommendations",
            language=advice_language(self.cfg),
            **info.model_dump(),
        )

    async def generate(self, info: HealthInfo) -> str:
        provider, model = agent_llm("health_advisor", self.cfg)
        messages = [{"role": "user", "content": self.build_prompt(info)}]
        text = await ask_llm(
            messages,
            model=model,
            provider=provider,
            temperature=self.temperature,
            cfg=self.cfg,
        )
        if not text or not text.strip():
            raise ValueError("Empty response from advice model")
        return text.strip()


async def get_health_recommendations(
    info: HealthInfo,
    generator: Optional[AdviceGenerator] = None,
) -> str:
    """Return generated advice for ``info`` or :data:`FALLBACK_MESSAGE`.

    The request is made once.  Any failure (network, quota, malformed
    response) is logged and replaced by the fallback text.
    """
    try:
        generator = generator or LLMAdviceGenerator()
        return await generator.generate(info)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error generating health recommendations: %s", exc)
        return FALLBACK_MESSAGE
