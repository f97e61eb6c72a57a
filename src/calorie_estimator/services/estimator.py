"""Text-to-calorie estimation."""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache

from calorie_estimator.domain.calorie_table import CALORIE_TABLE
from calorie_estimator.domain.estimates import EstimateResult, FoodLineItem

FALLBACK_CALORIES = 120
QUANTITY_MAX_DIGITS = 2

_SEGMENT_SEPARATORS = re.compile(r"[\n,]")

# Unicode White_Space plus the byte order mark. The ASCII information
# separators \x1c-\x1f are kept, unlike str.strip().
SEGMENT_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_logger = logging.getLogger(__name__)


def trim(text: str) -> str:
    """Strip leading and trailing segment whitespace."""
    return text.strip(SEGMENT_WHITESPACE)


def split_segments(raw: str) -> list[str]:
    """Split raw input on commas and newlines, dropping blank segments."""
    segments = (trim(part) for part in _SEGMENT_SEPARATORS.split(raw))
    return [segment for segment in segments if segment]


@lru_cache(maxsize=8)
def _quantity_pattern(max_digits: int) -> re.Pattern[str]:
    return re.compile(rf"(^|\s)([0-9]{{1,{max_digits}}})\s")


def parse_quantity(text: str, max_digits: int = QUANTITY_MAX_DIGITS) -> int:
    """Return the first small leading numeral in text, or 1 if there is none.

    The numeral must start the text or follow whitespace, and be followed by
    whitespace. Units are ignored, so "8 oz" counts as 8.
    """
    match = _quantity_pattern(max_digits).search(text)
    if match is None:
        return 1
    return int(match.group(2))


def match_food(text: str, table: Mapping[str, int]) -> str | None:
    """Return the first table key contained in text, in table order."""
    for key in table:
        if key in text:
            return key
    return None


def estimate_item(
    segment: str,
    *,
    table: Mapping[str, int] = CALORIE_TABLE,
    fallback_calories: int = FALLBACK_CALORIES,
    quantity_max_digits: int = QUANTITY_MAX_DIGITS,
) -> FoodLineItem:
    """Estimate calories for a single trimmed segment."""
    lower = segment.lower()
    key = match_food(lower, table)
    if key is None:
        return FoodLineItem(label=segment, calories=fallback_calories)
    quantity = parse_quantity(lower, quantity_max_digits)
    return FoodLineItem(label=segment, calories=table[key] * quantity)


def estimate(
    raw: str,
    *,
    table: Mapping[str, int] = CALORIE_TABLE,
    fallback_calories: int = FALLBACK_CALORIES,
    quantity_max_digits: int = QUANTITY_MAX_DIGITS,
) -> EstimateResult:
    """Estimate calories for a comma- or newline-separated list of foods."""
    items = tuple(
        estimate_item(
            segment,
            table=table,
            fallback_calories=fallback_calories,
            quantity_max_digits=quantity_max_digits,
        )
        for segment in split_segments(raw)
    )
    return EstimateResult(
        total_calories=sum(item.calories for item in items),
        items=items,
    )


@dataclass
class EstimatorService:
    """Service wrapping the estimator with configured constants."""

    table: Mapping[str, int] = field(default_factory=lambda: CALORIE_TABLE)
    fallback_calories: int = FALLBACK_CALORIES
    quantity_max_digits: int = QUANTITY_MAX_DIGITS
    debug: bool = False

    def estimate(self, raw: str) -> EstimateResult:
        """Estimate calories for raw input."""
        result = estimate(
            raw,
            table=self.table,
            fallback_calories=self.fallback_calories,
            quantity_max_digits=self.quantity_max_digits,
        )
        if self.debug:
            _logger.debug(
                "Estimate: items=%s total=%s", len(result.items), result.total_calories
            )
        return result
