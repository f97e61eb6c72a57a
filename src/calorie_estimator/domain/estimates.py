"""Estimate domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FoodLineItem:
    """One parsed food entry with its calorie estimate."""

    label: str
    calories: int


@dataclass(frozen=True)
class EstimateResult:
    """Calorie breakdown for a free-text meal description."""

    total_calories: int
    items: tuple[FoodLineItem, ...]


@dataclass(frozen=True)
class HistoryEntry:
    """A past query and the estimate it produced."""

    input: str
    result: EstimateResult
    at: datetime
