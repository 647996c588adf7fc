"""Console entry point for the BMI advisor.

Reads the measurements from the command line, prints BMI, healthy weight
range, calorie needs and macros, and optionally asks the configured
language model for personalised recommendations (``--ai``).

Set ``GEMINI_API_KEY`` (or ``OPENAI_API_KEY`` with ``LLM_PROVIDER=openai``)
or populate ``config.json`` to enable the generated advice.  Without a key
the local advice is still shown.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from colorama import Fore, Style
from colorama import init as colorama_init
from pydantic import ValidationError

from .agents.assessment import Assessment, assess
from .core.config import load_config
from .core.gauge import segment_for_category
from .core.llm import check_llm_connectivity
from .core.schema import ActivityLevel, BmiCategory, HeightUnit, UserProfile
from .core.units import convert_height, format_height
from .core.utils import parse_list, parse_measurement

logger = logging.getLogger(__name__)

CATEGORY_COLORS = {
    BmiCategory.UNDERWEIGHT: Fore.BLUE,
    BmiCategory.NORMAL: Fore.GREEN,
    BmiCategory.OVERWEIGHT: Fore.YELLOW,
    BmiCategory.OBESE: Fore.RED,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmi-advisor",
        description="Calculate BMI, calorie needs and macros.",
    )
    parser.add_argument("--name", required=True)
    parser.add_argument("--age", type=int, default=25)
    parser.add_argument("--gender", choices=["male", "female", "other"], default="male")
    parser.add_argument("--height", default="170", help='e.g. "170", "170 cm", "5.7 ft" or 5\'7"')
    parser.add_argument("--weight", default="70", help='e.g. "70", "70 kg" or "154 lb"')
    parser.add_argument(
        "--activity",
        type=float,
        default=ActivityLevel.MODERATE.factor,
        choices=[level.factor for level in ActivityLevel],
    )
    parser.add_argument("--conditions", default="", help="comma separated health conditions")
    parser.add_argument("--restrictions", default="", help="comma separated dietary restrictions")
    parser.add_argument("--allergies", default="", help="comma separated allergies")
    parser.add_argument("--ai", action="store_true", help="request generated recommendations")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def profile_from_args(args: argparse.Namespace) -> UserProfile:
    """Build a validated ``UserProfile``; raises ``ValidationError``."""
    height, height_unit = parse_measurement(args.height, "cm")
    weight, weight_unit = parse_measurement(args.weight, "kg")
    return UserProfile(
        name=args.name,
        age=args.age,
        gender=args.gender,
        height=height,
        height_unit=height_unit,
        weight=weight,
        weight_unit=weight_unit,
        activity=args.activity,
        health_conditions=parse_list(args.conditions),
        dietary_restrictions=parse_list(args.restrictions),
        allergies=parse_list(args.allergies),
    )


def summarise_assessment(result: Assessment, *, color: bool = True) -> str:
    """Return a human-friendly report of ``result``."""
    m = result.metrics
    p = result.profile
    category = m.bmi_category.value
    if color:
        category = f"{CATEGORY_COLORS[m.bmi_category]}{category}{Style.RESET_ALL}"
    segment = segment_for_category(m.bmi_category)
    lines = [
        f"Name: {p.name}",
        f"Height: {format_height(m.height_in_cm, HeightUnit.CM)}"
        f" ({format_height(convert_height(m.height_in_cm, 'cm', 'ft'), HeightUnit.FT)})",
        f"Weight: {m.weight_in_kg:.1f} kg",
        f"BMI: {m.bmi} ({category}, range {segment.label})",
        f"Gauge: {m.needle_angle:+.1f}°",
        f"Healthy weight: {m.min_weight}-{m.max_weight} kg",
        f"BMR: {m.bmr} kcal/day",
        f"Daily calories ({p.activity_level.label}): {m.daily_calories} kcal",
        f"Protein: {m.protein_grams} g, Carbs: {m.carbs_grams} g, Fat: {m.fat_grams} g",
        "",
        m.health_advice,
    ]
    if result.ai_advice:
        lines.extend(["", result.ai_advice])
    return "\n".join(lines)


def _report_connectivity(cfg: dict) -> None:
    statuses = check_llm_connectivity(cfg)
    for provider, label in (("gemini", "Google LLM"), ("openai", "OpenAI LLM")):
        msg = (
            f"{Fore.GREEN}connected{Style.RESET_ALL}"
            if statuses.get(provider)
            else f"{Fore.RED}unavailable{Style.RESET_ALL}"
        )
        logger.info("%s: %s", label, msg)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point.  Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    colorama_init()

    try:
        profile = profile_from_args(args)
    except ValidationError as exc:
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "profile"
            print(f"{Fore.RED}{field}: {err['msg']}{Style.RESET_ALL}", file=sys.stderr)
        return 2

    if args.ai:
        try:
            _report_connectivity(load_config())
        except Exception as exc:  # noqa: BLE001
            logger.warning("LLM connectivity check skipped: %s", exc)
    result = asyncio.run(assess(profile, use_ai=args.ai))
    print(summarise_assessment(result, color=sys.stdout.isatty()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
