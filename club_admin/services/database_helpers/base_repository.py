# /club_admin/services/database_helpers/base_repository.py

"""
The in-memory Entity Store every repository is built on.

An `EntityStore` holds all records of one entity type in a dict keyed by
integer id, next to the counter that hands those ids out. Records are pydantic
models. The store is the only owner of its records: every read returns a deep
copy, and updates replace the stored snapshot with a merged, re-validated one.

Iteration order is insertion order. Nothing here is sorted.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, FrozenSet, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

logger = logging.getLogger("club_admin.store")

RecordT = TypeVar("RecordT", bound=BaseModel)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityStore(Generic[RecordT]):
    def __init__(
        self,
        model: Type[RecordT],
        *,
        timestamp_field: str = "createdAt",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.model = model
        self.timestamp_field = timestamp_field
        self._clock = clock
        self._records: Dict[int, RecordT] = {}
        self._counter = 1

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    @property
    def protected_fields(self) -> FrozenSet[str]:
        """Fields assigned by the store that no payload may overwrite."""
        return frozenset({"id", self.timestamp_field})

    def next_id(self) -> int:
        """The id the next successful `add` will assign. Ids are never reused."""
        return self._counter

    def add(self, data: Mapping[str, Any]) -> RecordT:
        """
        Validates `data` as a new record, stamps it with a fresh id and the
        creation time, and stores it. The counter only advances once the
        record has validated.
        """
        payload = self._without_protected(data)
        record = self.model.model_validate({
            **payload,
            "id": self._counter,
            self.timestamp_field: self._clock(),
        })
        self._records[record.id] = record
        self._counter += 1
        logger.debug("Created %s %s", self.entity_name, record.id)
        return record.model_copy(deep=True)

    def get(self, record_id: int) -> Optional[RecordT]:
        record = self._records.get(record_id)
        if record is None:
            return None
        return record.model_copy(deep=True)

    def list(self, predicate: Optional[Callable[[RecordT], bool]] = None) -> List[RecordT]:
        """Snapshot of every record, or of those matching `predicate`."""
        return [
            record.model_copy(deep=True)
            for record in self._records.values()
            if predicate is None or predicate(record)
        ]

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        """The first record, in insertion order, that matches `predicate`."""
        for record in self._records.values():
            if predicate(record):
                return record.model_copy(deep=True)
        return None

    def update(self, record_id: int, data: Mapping[str, Any]) -> Optional[RecordT]:
        """
        Merges `data` over the stored record. Fields missing from `data` keep
        their values; the id and creation timestamp cannot be changed.
        Returns None when there is no record with that id.
        """
        existing = self._records.get(record_id)
        if existing is None:
            return None

        changes = self._without_protected(data)
        merged = self.model.model_validate({**existing.model_dump(), **changes})
        self._records[record_id] = merged
        logger.debug("Updated %s %s (%s)", self.entity_name, record_id, ", ".join(sorted(changes)) or "no fields")
        return merged.model_copy(deep=True)

    def delete(self, record_id: int) -> bool:
        if self._records.pop(record_id, None) is None:
            return False
        logger.debug("Deleted %s %s", self.entity_name, record_id)
        return True

    def count(self, predicate: Optional[Callable[[RecordT], bool]] = None) -> int:
        if predicate is None:
            return len(self._records)
        return sum(1 for record in self._records.values() if predicate(record))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def _without_protected(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in data.items() if key not in self.protected_fields}
