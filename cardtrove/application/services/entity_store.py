"""Application service — the authoritative in-memory collection for one entity kind.

Every change to the collection is written through to the repository as a
full rewrite, then published on the store's ChangeNotifier.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from datetime import datetime, timezone
from typing import Generic, Protocol, TypeVar

from cardtrove.application.interfaces import RecordRepository
from cardtrove.application.services.change_notifier import (
    ChangeAction,
    ChangeCallback,
    ChangeNotifier,
    StoreChange,
)
from cardtrove.domain.exceptions import RecordLoadError, RecordSaveError

logger = logging.getLogger(__name__)


class Identified(Protocol):
    id: str


T = TypeVar("T", bound=Identified)

SeedFactory = Callable[[datetime], list[T]]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityStore(Generic[T]):
    """Holds one entity kind's records in insertion order and keeps them durable.

    Usage:
        store = EntityStore("ClientProfile", repository, sample_client_profiles)
        store.initialize()
        store.add(profile)

    Persistence failures never reach the caller: load failures fall back
    to an empty (then seeded) collection, save failures are logged and the
    in-memory change stands.
    """

    def __init__(
        self,
        entity_type: str,
        repository: RecordRepository[T],
        seed_factory: SeedFactory | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
        notifier: ChangeNotifier | None = None,
    ):
        self._entity_type = entity_type
        self._repository = repository
        self._seed_factory = seed_factory
        self._clock = clock
        self._notifier = notifier or ChangeNotifier()
        self._records: list[T] = []

    @property
    def entity_type(self) -> str:
        return self._entity_type

    @property
    def records(self) -> tuple[T, ...]:
        """Read-only snapshot of the collection."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self.records)

    def get(self, record_id: str) -> T | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register for change notifications. Returns an unsubscribe callable."""
        return self._notifier.subscribe(callback)

    # ── Lifecycle ───────────────────────────────────────────────────

    def initialize(self) -> None:
        """Load the persisted collection, seeding sample records if it is empty."""
        try:
            self._records = list(self._repository.load_all())
        except RecordLoadError as exc:
            logger.warning("Failed to load %s records: %s", self._entity_type, exc.reason)
            self._records = []
        else:
            logger.debug(
                "Loaded %d %s records from %s",
                len(self._records), self._entity_type, self._repository.location,
            )

        if not self._records and self._seed_factory is not None:
            self._records = list(self._seed_factory(self._clock()))
            logger.info(
                "Seeded %d sample %s records", len(self._records), self._entity_type
            )
            self._commit(ChangeAction.SEEDED, [r.id for r in self._records])

    # ── CRUD ────────────────────────────────────────────────────────

    def add(self, record: T) -> None:
        self._records.append(record)
        self._commit(ChangeAction.ADDED, [record.id])

    def update(self, record: T) -> None:
        """Replace the record with the same id in place; unknown ids are ignored."""
        for index, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[index] = record
                self._commit(ChangeAction.UPDATED, [record.id])
                return
        logger.debug("Ignoring update of unknown %s %s", self._entity_type, record.id)

    def delete(self, record_id: str) -> None:
        self.delete_many([record_id])

    def delete_many(self, record_ids: Iterable[str]) -> None:
        """Remove every record whose id is in ``record_ids``."""
        targets = set(record_ids)
        removed = [r.id for r in self._records if r.id in targets]
        if not removed:
            return
        self._records = [r for r in self._records if r.id not in targets]
        self._commit(ChangeAction.DELETED, removed)

    def delete_at(self, offsets: Iterable[int]) -> None:
        """Remove records by position. Out-of-range positions are ignored."""
        positions = {i for i in offsets if 0 <= i < len(self._records)}
        if not positions:
            return
        removed = [r.id for i, r in enumerate(self._records) if i in positions]
        self._records = [r for i, r in enumerate(self._records) if i not in positions]
        self._commit(ChangeAction.DELETED, removed)

    # ── Persistence ─────────────────────────────────────────────────

    def _commit(self, action: ChangeAction, record_ids: Sequence[str]) -> None:
        self._save()
        self._notifier.broadcast(
            StoreChange(self._entity_type, action, tuple(record_ids))
        )

    def _save(self) -> None:
        try:
            self._repository.save_all(self._records)
        except RecordSaveError as exc:
            logger.error("Failed to save %s records: %s", self._entity_type, exc.reason)
