"""Pydantic models for the estimate API."""

from datetime import datetime

from pydantic import BaseModel, Field

from calorie_estimator.domain.estimates import EstimateResult, HistoryEntry


class EstimateRequest(BaseModel):
    """Free-text list of foods to estimate."""

    text: str = Field(max_length=10_000)


class FoodLineItemResponse(BaseModel):
    """One estimated food entry."""

    label: str
    calories: int


class EstimateResponse(BaseModel):
    """Calorie breakdown for a query."""

    total_calories: int
    items: list[FoodLineItemResponse]

    @classmethod
    def from_result(cls, result: EstimateResult) -> "EstimateResponse":
        return cls(
            total_calories=result.total_calories,
            items=[
                FoodLineItemResponse(label=item.label, calories=item.calories)
                for item in result.items
            ],
        )


class HistoryEntryResponse(BaseModel):
    """A past query, addressable by its position in the history."""

    index: int
    input: str
    at: datetime
    result: EstimateResponse

    @classmethod
    def from_entry(cls, index: int, entry: HistoryEntry) -> "HistoryEntryResponse":
        return cls(
            index=index,
            input=entry.input,
            at=entry.at,
            result=EstimateResponse.from_result(entry.result),
        )


class HistoryResponse(BaseModel):
    """History listing, newest first."""

    history: list[HistoryEntryResponse]
