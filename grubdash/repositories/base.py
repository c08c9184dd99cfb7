"""
Repository Abstract Base Class

Defines the storage contract for dish and order collections. Handlers
only talk to this interface, so the in-memory store can be swapped
for another implementation, or a stub in tests, without touching them.

Design Pattern: Repository
    - Records are pydantic models with a string ``id``
    - Insertion order is preserved by list_all()
    - Implementations serialize their own mutations
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class DuplicateIdError(ValueError):
    """Raised when inserting a record whose id is already stored."""


class BaseRepository(ABC, Generic[RecordT]):
    """
    Abstract base class for record collections.

    Example:
        >>> dishes = InMemoryRepository[Dish]("dishes")
        >>> dishes.insert(Dish(id="1", name="Taco", ...))
        >>> dishes.find("1").name
        'Taco'
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Collection name used in logs (e.g. "dishes")."""
        pass

    @abstractmethod
    def list_all(self) -> list[RecordT]:
        """Return every record in insertion order."""
        pass

    @abstractmethod
    def find(self, record_id: str) -> Optional[RecordT]:
        """Return the record with ``record_id``, or None."""
        pass

    @abstractmethod
    def exists(self, record_id: str) -> bool:
        """Check whether ``record_id`` is stored."""
        pass

    @abstractmethod
    def insert(self, record: RecordT) -> RecordT:
        """
        Append a record.

        Raises:
            DuplicateIdError: If a record with the same id is stored
        """
        pass

    @abstractmethod
    def update(self, record_id: str, changes: dict[str, Any]) -> Optional[RecordT]:
        """
        Overwrite fields of a stored record in place.

        ``id`` is never changed, even if present in ``changes``.

        Returns:
            The updated record, or None if it no longer exists
        """
        pass

    @abstractmethod
    def remove(
        self,
        record_id: str,
        guard: Optional[Callable[[RecordT], None]] = None,
    ) -> bool:
        """
        Remove a record.

        Args:
            record_id: Id of the record to remove
            guard: Called with the record before removal; an exception
                raised by it vetoes the removal and propagates

        Returns:
            True if a record was removed, False if none matched
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every record."""
        pass
