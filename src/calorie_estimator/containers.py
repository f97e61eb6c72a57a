"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from calorie_estimator.config import Settings
from calorie_estimator.domain.calorie_table import CALORIE_TABLE, find_shadowed_keys
from calorie_estimator.services.estimator import EstimatorService
from calorie_estimator.services.history import (
    HistoryService,
    InMemoryHistoryRepository,
)

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    estimator_service: EstimatorService
    history_service: HistoryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    for key, earlier in find_shadowed_keys(CALORIE_TABLE):
        _logger.warning(
            "Calorie table key %r is shadowed by earlier key %r", key, earlier
        )
    estimator_service = EstimatorService(
        table=CALORIE_TABLE,
        fallback_calories=resolved_settings.fallback_calories,
        quantity_max_digits=resolved_settings.quantity_max_digits,
        debug=resolved_settings.debug,
    )
    history_service = HistoryService(
        repository=InMemoryHistoryRepository(
            max_entries=resolved_settings.history_max_entries
        ),
        estimator=estimator_service,
    )
    return AppContainer(
        settings=resolved_settings,
        estimator_service=estimator_service,
        history_service=history_service,
    )
