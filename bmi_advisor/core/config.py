from __future__ import annotations

"""Configuration utilities for the project."""

import json
import os
from pathlib import Path

__all__ = [
    "load_config",
    "gemini_api_key",
    "openai_api_key",
    "llm_provider",
    "advice_language",
    "agent_llm",
]

DEFAULT_MODELS = {
    "gemini": "gemini-1.5-flash",
    "openai": "gpt-4o-mini",
}

CONFIG_PATH: Path = Path(__file__).resolve().parent.parent.parent / "config.json"


def _strip_comments(lines) -> str:
    data = []
    for line in lines:
        stripped = line.strip()
        if stripped.startswith("#") or stripped.startswith("//"):
            continue
        if "#" in line:
            line = line.split("#", 1)[0]
        if "//" in line:
            line = line.split("//", 1)[0]
        data.append(line)
    return "".join(data)


def load_config() -> dict:
    """Load configuration from ``config.json`` or environment variables."""
    if CONFIG_PATH.exists():
        with CONFIG_PATH.open("r", encoding="utf-8") as f:
            return json.loads(_strip_comments(f))
    return {
        "gemini_api_key": os.getenv("GEMINI_API_KEY", ""),
        "openai_api_key": os.getenv("OPENAI_API_KEY", ""),
        "llm_provider": os.getenv("LLM_PROVIDER", "gemini"),
        "advice_language": os.getenv("ADVICE_LANGUAGE", "en"),
    }


def gemini_api_key() -> str:
    """Return the configured Gemini API key.

    An empty value in ``config.json`` does not override a key exported in
    the ``GEMINI_API_KEY`` environment variable.
    """
    cfg = load_config()
    return cfg.get("gemini_api_key") or os.getenv("GEMINI_API_KEY", "")


def openai_api_key() -> str:
    """Return the configured OpenAI API key, if any."""
    cfg = load_config()
    return cfg.get("openai_api_key") or os.getenv("OPENAI_API_KEY", "")


def llm_provider() -> str:
    """Return the default LLM provider."""
    cfg = load_config()
    return cfg.get("llm_provider") or os.getenv("LLM_PROVIDER", "gemini")


def advice_language(cfg: dict | None = None) -> str:
    """Return the language requested for generated advice."""
    cfg = cfg if cfg is not None else load_config()
    return cfg.get("advice_language") or os.getenv("ADVICE_LANGUAGE", "en")


def agent_llm(name: str, cfg: dict | None = None) -> tuple[str, str]:
    """Return provider and model for the given agent.

    Per-agent overrides live under ``"agents"`` in the configuration, e.g.
    ``{"agents": {"health_advisor": {"provider": "openai"}}}``.
    """
    cfg = cfg if cfg is not None else load_config()
    agent_cfg = cfg.get("agents", {}).get(name, {})
    provider = agent_cfg.get("provider") or cfg.get("llm_provider") or "gemini"
    model = agent_cfg.get("model") or DEFAULT_MODELS.get(provider, "")
    return provider, model
