"""Agents package initialization."""

from . import assessment, health_advisor

__all__ = [
    "assessment",
    "health_advisor",
]
