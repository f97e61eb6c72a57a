"""Shared request dependencies."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from calorie_estimator.containers import AppContainer


async def simulate_estimate_delay(request: Request) -> None:
    """Wait for the configured busy time before an estimate is produced."""
    container: AppContainer = request.app.state.container
    delay = container.settings.estimate_delay_seconds
    if delay > 0:
        await asyncio.sleep(delay)
