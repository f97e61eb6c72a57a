"""Command-line front end for the estimator.

Usage:
    python -m calorie_estimator "2 eggs, toast with butter, black coffee"
    echo "1 banana" | python -m calorie_estimator -
    python -m calorie_estimator "mystery snack" --fallback 200
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys

from pydantic import ValidationError

from calorie_estimator.config import Settings
from calorie_estimator.containers import build_container
from calorie_estimator.services.validation import EmptyInputError, validate_input


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calorie_estimator",
        description="Mock calorie estimate for a list of foods",
    )
    parser.add_argument(
        "text",
        help='Foods separated by commas or newlines, or "-" to read stdin',
    )
    parser.add_argument(
        "--fallback",
        type=int,
        default=None,
        help="Calories for items that match no known food (default from settings)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    raw = sys.stdin.read() if args.text == "-" else args.text

    try:
        text = validate_input(raw)
    except EmptyInputError as exc:
        print(exc, file=sys.stderr)
        return 1

    overrides: dict[str, object] = {}
    if args.fallback is not None:
        overrides["fallback_calories"] = args.fallback
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 1
    container = build_container(settings)
    result = container.estimator_service.estimate(text)
    print(json.dumps(dataclasses.asdict(result), ensure_ascii=False, indent=2))
    return 0
