"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request

from calorie_estimator.api.dependencies import simulate_estimate_delay
from calorie_estimator.api.history import router as history_router
from calorie_estimator.api.models import EstimateRequest, EstimateResponse
from calorie_estimator.app_logging import configure_logging
from calorie_estimator.containers import AppContainer
from calorie_estimator.services.validation import EmptyInputError, validate_input


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Calorie Estimator")
    app.state.container = container

    app.include_router(history_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/estimates")
    async def create_estimate(
        payload: EstimateRequest, request: Request
    ) -> EstimateResponse:
        """Estimate calories for a free-text list of foods."""
        state_container: AppContainer = request.app.state.container
        try:
            raw = validate_input(payload.text)
        except EmptyInputError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        await simulate_estimate_delay(request)
        result = state_container.estimator_service.estimate(raw)
        state_container.history_service.record(raw, result)
        logger.debug(
            "Estimated %s items, total=%s", len(result.items), result.total_calories
        )
        return EstimateResponse.from_result(result)

    return app
