"""In-memory history of past estimates."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from calorie_estimator.domain.estimates import EstimateResult, HistoryEntry
from calorie_estimator.services.estimator import EstimatorService


class HistoryEntryNotFoundError(LookupError):
    """Raised when a history index does not exist."""

    def __init__(self, index: int) -> None:
        super().__init__(f"No history entry at index {index}")
        self.index = index


class HistoryRepository(Protocol):
    """Storage interface for history entries, newest first."""

    def add(self, entry: HistoryEntry) -> None:
        """Store an entry at the top of the history."""

    def list_entries(self, limit: int | None = None) -> list[HistoryEntry]:
        """Return entries newest first."""

    def get(self, index: int) -> HistoryEntry | None:
        """Return the entry at an index, if present."""

    def clear(self) -> None:
        """Remove all entries."""


@dataclass
class InMemoryHistoryRepository(HistoryRepository):
    """Process-lifetime history storage."""

    _entries: list[HistoryEntry]
    max_entries: int | None

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 0:
            raise ValueError("max_entries must be non-negative")
        self._entries = []
        self.max_entries = max_entries

    def add(self, entry: HistoryEntry) -> None:
        """Insert an entry at the top, dropping the oldest past the cap."""
        self._entries.insert(0, entry)
        if self.max_entries is not None:
            del self._entries[self.max_entries :]

    def list_entries(self, limit: int | None = None) -> list[HistoryEntry]:
        """Return a copy of the entries, newest first."""
        if limit is None:
            return list(self._entries)
        return self._entries[: max(limit, 0)]

    def get(self, index: int) -> HistoryEntry | None:
        """Return the entry at a non-negative index."""
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()


@dataclass
class HistoryService:
    """Records estimates and re-runs past queries."""

    repository: HistoryRepository
    estimator: EstimatorService

    def record(self, raw: str, result: EstimateResult) -> HistoryEntry:
        """Store a query with its result."""
        entry = HistoryEntry(input=raw, result=result, at=datetime.now(tz=UTC))
        self.repository.add(entry)
        return entry

    def list_entries(self, limit: int | None = None) -> list[HistoryEntry]:
        """Return recorded entries newest first."""
        return self.repository.list_entries(limit)

    def rerun(self, index: int) -> HistoryEntry:
        """Estimate a past query again and record it as the newest entry."""
        previous = self.repository.get(index)
        if previous is None:
            raise HistoryEntryNotFoundError(index)
        result = self.estimator.estimate(previous.input)
        return self.record(previous.input, result)

    def clear(self) -> None:
        """Forget all recorded entries."""
        self.repository.clear()
