"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from calorie_estimator.config import Settings
from calorie_estimator.containers import AppContainer, build_container
from calorie_estimator.domain.estimates import HistoryEntry
from calorie_estimator.services.history import HistoryRepository


@dataclass
class RecordingHistoryRepository(HistoryRepository):
    """In-memory history repository that counts clears."""

    entries: list[HistoryEntry] = field(default_factory=list)
    cleared: int = 0

    def add(self, entry: HistoryEntry) -> None:
        self.entries.insert(0, entry)

    def list_entries(self, limit: int | None = None) -> list[HistoryEntry]:
        return self.entries if limit is None else self.entries[:limit]

    def get(self, index: int) -> HistoryEntry | None:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def clear(self) -> None:
        self.cleared += 1
        self.entries.clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fallback_calories=120,
        quantity_max_digits=2,
        history_max_entries=50,
        estimate_delay_seconds=0.0,
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
