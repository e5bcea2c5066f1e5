"""
In-process subscription store.

Records are kept in a list so that listing preserves insertion order. The store
performs no locking; concurrent callers sharing one instance see last-write-wins
behaviour on conflicting edits.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable

from ..logging import get_logger
from .models import SubscriptionCreate, SubscriptionRecord, SubscriptionUpdate
from .seed_data import fixture_records

logger = get_logger(__name__)


class SubscriptionNotFoundError(LookupError):
    """Raised when an edit references an unknown subscription id."""

    def __init__(self, subscription_id: str):
        self.subscription_id = subscription_id
        super().__init__("Subscription not found")


class SubscriptionStore:
    """Authoritative in-memory collection of subscription records."""

    def __init__(
        self,
        records: Iterable[SubscriptionRecord] = (),
        clock: Callable[[], float] = time.time,
    ):
        self._records: list[SubscriptionRecord] = []
        self._clock = clock
        self._last_issued = 0

        for record in records:
            if record.id in self:
                raise ValueError(f"Duplicate subscription id: {record.id}")
            self._records.append(record)

    @classmethod
    def with_fixtures(cls, clock: Callable[[], float] = time.time) -> SubscriptionStore:
        """Create a store seeded with the Netflix and Spotify fixture records."""
        return cls(fixture_records(), clock=clock)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, subscription_id: object) -> bool:
        return any(record.id == subscription_id for record in self._records)

    def list_all(self) -> list[SubscriptionRecord]:
        """Return every record in insertion order."""
        return list(self._records)

    def find_by_id(self, subscription_id: str) -> SubscriptionRecord | None:
        """Return the record with the given id, or None."""
        for record in self._records:
            if record.id == subscription_id:
                return record
        return None

    def list_categories(self) -> list[str]:
        """Return the distinct categories in order of first appearance."""
        return list(dict.fromkeys(record.category for record in self._records))

    def insert(self, create: SubscriptionCreate) -> SubscriptionRecord:
        """Append a new record with a store-assigned id and return it."""
        record = SubscriptionRecord(id=self._next_id(), **create.model_dump())
        self._records.append(record)

        logger.debug("Subscription inserted", subscription_id=record.id, size=len(self))
        return record

    def update(self, subscription_id: str, update: SubscriptionUpdate) -> SubscriptionRecord:
        """Overwrite the supplied fields of an existing record.

        Raises:
            SubscriptionNotFoundError: If no record has ``subscription_id``.
        """
        record = self.find_by_id(subscription_id)
        if record is None:
            raise SubscriptionNotFoundError(subscription_id)

        changes = update.changes()
        for field, value in changes.items():
            setattr(record, field, value)

        logger.debug(
            "Subscription updated", subscription_id=subscription_id, fields=sorted(changes)
        )
        return record

    def remove(self, subscription_id: str) -> bool:
        """Remove the record with the given id. Returns False if there was none."""
        for index, record in enumerate(self._records):
            if record.id == subscription_id:
                del self._records[index]
                logger.debug("Subscription removed", subscription_id=subscription_id)
                return True
        return False

    def _next_id(self) -> str:
        # Millisecond timestamp, bumped past the last issued id and any taken id
        candidate = max(int(self._clock() * 1000), self._last_issued + 1)
        while str(candidate) in self:
            candidate += 1
        self._last_issued = candidate
        return str(candidate)
