import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

__all__ = ["round_half_up", "parse_number", "parse_measurement", "parse_list"]

_NUMBER_RE = re.compile(r"[-+]?[0-9]+(?:[.,][0-9]+)?")
_FEET_INCHES_RE = re.compile(r"^\s*([0-9]+)\s*'\s*(?:([0-9]+(?:[.,][0-9]+)?)\s*\"?)?\s*$")


def round_half_up(value: float, digits: int = 0) -> float:
    """Round ``value`` to ``digits`` places, halves away from zero.

    Python's ``round`` uses banker's rounding (``round(0.5) == 0``).  The
    shortest ``repr`` of the float is rounded, so ``1673.5`` becomes
    ``1674`` and ``53.46499999999999`` still rounds as ``53.5``.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def parse_number(value: Any) -> Optional[float]:
    """Return ``value`` as ``float`` if possible.

    Strings may contain units like ``"170 cm"`` or ``"5,7 ft"``; a comma
    is treated as a decimal separator.  ``None`` is returned when no number
    can be found.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        m = _NUMBER_RE.search(value)
        if m:
            return float(m.group(0).replace(",", "."))
    return None


def parse_measurement(text: str, default_unit: str) -> tuple[Optional[float], str]:
    """Split ``"154 lb"`` into ``(154.0, "lb")``.

    The unit is the first alphabetic word after the number, lower-cased;
    ``default_unit`` is used when there is none.  Feet and inches written
    as ``5'7"`` become decimal feet: ``(5.5833..., "ft")``.
    """
    m = _FEET_INCHES_RE.match(text or "")
    if m:
        inches = float(m.group(2).replace(",", ".")) if m.group(2) else 0.0
        return int(m.group(1)) + inches / 12, "ft"
    value = parse_number(text)
    m = re.search(r"[0-9]\s*([A-Za-z]+)", text or "")
    unit = m.group(1).lower() if m else default_unit
    return value, unit


def parse_list(text: Optional[str]) -> list[str]:
    """Split a comma separated answer into a clean list.

    ``"none"`` and empty answers produce an empty list.
    """
    if not text:
        return []
    items = [part.strip() for part in text.split(",")]
    return [i for i in items if i and i.lower() not in ("none", "no", "-")]
