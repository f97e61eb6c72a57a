"""History API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from calorie_estimator.api.dependencies import simulate_estimate_delay
from calorie_estimator.api.models import (
    EstimateResponse,
    HistoryEntryResponse,
    HistoryResponse,
)
from calorie_estimator.services.history import HistoryEntryNotFoundError

if TYPE_CHECKING:
    from calorie_estimator.containers import AppContainer

router = APIRouter(prefix="/history", tags=["history"])


@router.get("")
async def list_history(
    request: Request, limit: int | None = Query(default=None, ge=0)
) -> HistoryResponse:
    """Return past queries, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.history_service.list_entries(limit)
    return HistoryResponse(
        history=[
            HistoryEntryResponse.from_entry(index, entry)
            for index, entry in enumerate(entries)
        ]
    )


@router.post("/{index}/rerun", dependencies=[Depends(simulate_estimate_delay)])
async def rerun_history_entry(index: int, request: Request) -> EstimateResponse:
    """Estimate a past query again."""
    container: AppContainer = request.app.state.container
    try:
        entry = container.history_service.rerun(index)
    except HistoryEntryNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return EstimateResponse.from_result(entry.result)


@router.delete("")
async def clear_history(request: Request) -> dict[str, str]:
    """Forget all past queries."""
    container: AppContainer = request.app.state.container
    container.history_service.clear()
    return {"status": "ok"}
