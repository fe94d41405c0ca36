"""
Shared machinery for the persisted stores.

A store owns one record collection and the derived views computed from it.
Every mutation replaces the collection, recomputes the derived views from
scratch, notifies subscribers and schedules a write of the whole state.
Rehydration runs once: it loads the persisted collection and recomputes the
derived views instead of trusting the stored ones.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Generic, Iterable, List, Optional, Type, TypeVar

from domain.entities.records import RecordModel
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError
from utils.dates import to_local_naive

from services.persistence_manager import PersistenceManager

R = TypeVar("R", bound=RecordModel)
S = TypeVar("S", bound=BaseModel)

Clock = Callable[[], datetime]
Listener = Callable[[Any], None]


class BaseStore(ABC, Generic[R, S]):
    """Base class for a store with one collection and recomputed derived views."""

    record_model: Type[R]
    collection_key: str = "entries"
    max_records: Optional[int] = None

    def __init__(self, persistence: PersistenceManager, clock: Optional[Clock] = None):
        self._persistence = persistence
        self._clock: Clock = clock or datetime.now
        self._records: List[R] = []
        self._listeners: List[Listener] = []
        self._hydrated = False
        self.logger = logging.getLogger(type(self).__name__)

    # =========================================================================
    # Derived views
    # =========================================================================

    @abstractmethod
    def _recompute(self) -> None:
        """Rebuild every derived view from self._records."""

    @abstractmethod
    def snapshot(self) -> S:
        """Read-only snapshot of the collection and derived views."""

    # =========================================================================
    # Rehydration
    # =========================================================================

    @property
    def has_hydrated(self) -> bool:
        return self._hydrated

    async def hydrate(self) -> S:
        """
        Load persisted records and recompute derived views. Runs once.

        Returns:
            The snapshot after hydration
        """
        if self._hydrated:
            return self.snapshot()

        state = await self._persistence.load()
        raw_records = state.get(self.collection_key, []) if state else []
        records = self._parse_records(raw_records)
        if self.max_records is not None:
            records = records[: self.max_records]

        if self._records:
            self.logger.warning(f"Replacing {len(self._records)} record(s) created before hydration")

        self._records = records
        self._recompute()
        self._hydrated = True
        self.logger.info(f"Hydrated {len(records)} record(s) from '{self._persistence.name}'")
        self._notify()
        return self.snapshot()

    def _parse_records(self, raw_records: Any) -> List[R]:
        if not isinstance(raw_records, list):
            self.logger.warning(f"Expected a list under '{self.collection_key}', got {type(raw_records).__name__}")
            return []

        records: List[R] = []
        for index, raw in enumerate(raw_records):
            try:
                records.append(self.record_model.model_validate(raw))
            except SchemaError as e:
                self.logger.warning(f"Skipping invalid record #{index}: {e.error_count()} error(s)")
        return records

    # =========================================================================
    # Mutation plumbing
    # =========================================================================

    def _commit(self, records: Iterable[R]) -> None:
        """Install a new collection, then recompute, notify and persist."""
        records = list(records)
        if self.max_records is not None:
            records = records[: self.max_records]
        self._records = records
        self._recompute()
        self._notify()
        self._persist()

    def _persist(self) -> None:
        self._persistence.save(self.snapshot().model_dump(mode="json", by_alias=True))

    def _now(self) -> datetime:
        return to_local_naive(self._clock())

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call `listener(snapshot)` after every change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                self.logger.exception("Store listener failed")

    def _find_index(self, record_id: str) -> Optional[int]:
        return next((i for i, record in enumerate(self._records) if record.id == record_id), None)

    def __len__(self) -> int:
        return len(self._records)
