from __future__ import annotations

"""Unified interface for language model calls."""

import logging
from typing import Any, Iterable, Mapping, Optional

from openai import AsyncOpenAI, OpenAI

from .config import gemini_api_key, load_config, openai_api_key

__all__ = ["ask_llm", "check_llm_connectivity"]

logger = logging.getLogger(__name__)


def _to_gemini_messages(messages: Iterable[Mapping[str, Any]]) -> list[dict]:
    """Convert OpenAI-style chat messages to Gemini ``contents``.

    Gemini has no ``system`` role, so system prompts are sent as user turns
    and assistant turns are renamed to ``model``.
    """
    converted: list[dict] = []
    for m in messages:
        role = m.get("role", "user")
        if role == "assistant":
            role = "model"
        elif role != "model":
            role = "user"
        content = m.get("content")
        parts = [content] if content is not None else []
        converted.append({"role": role, "parts": parts})
    return converted


def check_llm_connectivity(cfg: Optional[dict] = None) -> dict[str, bool]:
    """Check connectivity to configured LLM providers.

    Returns a mapping ``{"gemini": bool, "openai": bool}``.  A provider is
    only probed when an API key for it is configured.
    """

    cfg = cfg or load_config()
    statuses = {"gemini": False, "openai": False}

    gemini_key = cfg.get("gemini_api_key") or gemini_api_key()
    if gemini_key:
        try:
            import google.generativeai as genai  # type: ignore

            genai.configure(api_key=gemini_key)
            next(iter(genai.list_models()), None)
            statuses["gemini"] = True
        except Exception as exc:  # noqa: BLE001
            logger.debug("Gemini connectivity check failed: %s", exc)

    openai_key = cfg.get("openai_api_key") or openai_api_key()
    if openai_key:
        try:
            OpenAI(api_key=openai_key).models.list()
            statuses["openai"] = True
        except Exception as exc:  # noqa: BLE001
            logger.debug("OpenAI connectivity check failed: %s", exc)

    return statuses


async def ask_llm(
    messages: list[dict],
    *,
    model: str,
    provider: str | None = None,
    temperature: float = 0.7,
    cfg: Optional[dict] = None,
) -> str:
    """Send ``messages`` to the selected LLM and return the text response."""
    cfg = cfg or load_config()
    provider = provider or cfg.get("llm_provider", "gemini")
    logger.debug("ask_llm: provider=%s model=%s", provider, model)

    if provider == "gemini":
        try:
            import google.generativeai as genai  # type: ignore
        except ModuleNotFoundError as exc:
            raise RuntimeError(
                "google-generativeai package is required for Gemini provider"
            ) from exc

        api_key = cfg.get("gemini_api_key") or gemini_api_key()
        genai.configure(api_key=api_key)
        gem_model = genai.GenerativeModel(model or "gemini-1.5-flash")
        resp = await gem_model.generate_content_async(
            _to_gemini_messages(messages),
            generation_config={"temperature": temperature},
        )
        return resp.text

    if provider == "openai":
        api_key = cfg.get("openai_api_key") or openai_api_key()
        client = AsyncOpenAI(api_key=api_key)
        resp = await client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
        )
        return resp.choices[0].message.content

    raise ValueError(f"Unknown LLM provider: {provider}")
