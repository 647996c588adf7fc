from __future__ import annotations

"""Prompt templates for the generative advice agent.

Templates live in ``prompts.yaml`` next to this module.  Each entry has a
``description`` and a Jinja2 ``template``; the templates are compiled once
at import time.
"""

from importlib import resources
from typing import Any, Dict

import yaml
from jinja2 import StrictUndefined, Template


def _load_prompts() -> dict:
    with resources.files(__package__).joinpath("prompts.yaml").open(
        "r", encoding="utf-8"
    ) as fh:
        return yaml.safe_load(fh)


_data = _load_prompts()

DESCRIPTIONS: Dict[str, str] = {}
TEMPLATES: Dict[str, Template] = {}

for _name, _info in _data.items():
    DESCRIPTIONS[_name] = _info.get("description", "")
    # StrictUndefined so a missing field fails loudly instead of rendering ""
    TEMPLATES[_name] = Template(_info["template"], undefined=StrictUndefined)

HEALTH_RECOMMENDATIONS = TEMPLATES["health_recommendations"]


def render_prompt(name: str, **context: Any) -> str:
    """Render the template ``name`` and strip surrounding whitespace."""
    try:
        template = TEMPLATES[name]
    except KeyError:
        raise ValueError(f"Unknown prompt: {name}")
    return template.render(**context).strip()
