"""
In-Memory Repository Implementation

Keeps records in a plain list for the lifetime of the process. Nothing
is persisted; a restart starts from an empty (or freshly seeded)
collection.

Every operation holds a per-collection lock, so a request handled on a
worker thread sees the same all-or-nothing behavior as one handled on
the event loop.
"""

import logging
import threading
from typing import Any, Callable, Iterable, Optional

from grubdash.repositories.base import BaseRepository, DuplicateIdError, RecordT

logger = logging.getLogger(__name__)


class InMemoryRepository(BaseRepository[RecordT]):
    """
    List-backed repository.

    Attributes:
        name: Collection name used in logs

    Example:
        >>> orders = InMemoryRepository[Order]("orders")
        >>> orders.count()
        0
    """

    def __init__(self, name: str, records: Iterable[RecordT] = ()):
        self._name = name
        self._records: list[RecordT] = []
        self._lock = threading.RLock()

        for record in records:
            self.insert(record)

    @property
    def name(self) -> str:
        return self._name

    def _index_of(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return -1

    def list_all(self) -> list[RecordT]:
        with self._lock:
            return list(self._records)

    def find(self, record_id: str) -> Optional[RecordT]:
        with self._lock:
            index = self._index_of(record_id)
            return self._records[index] if index >= 0 else None

    def exists(self, record_id: str) -> bool:
        with self._lock:
            return self._index_of(record_id) >= 0

    def insert(self, record: RecordT) -> RecordT:
        with self._lock:
            if self._index_of(record.id) >= 0:
                raise DuplicateIdError(f"{self._name}: id {record.id} already exists")
            self._records.append(record)

        logger.debug(f"{self._name}: inserted {record.id}")
        return record

    def update(self, record_id: str, changes: dict[str, Any]) -> Optional[RecordT]:
        with self._lock:
            index = self._index_of(record_id)
            if index < 0:
                return None

            record = self._records[index]
            for field, value in changes.items():
                if field != "id":
                    setattr(record, field, value)

        logger.debug(f"{self._name}: updated {record_id}")
        return record

    def remove(
        self,
        record_id: str,
        guard: Optional[Callable[[RecordT], None]] = None,
    ) -> bool:
        with self._lock:
            index = self._index_of(record_id)
            if index < 0:
                return False

            if guard is not None:
                guard(self._records[index])

            del self._records[index]

        logger.debug(f"{self._name}: removed {record_id}")
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
