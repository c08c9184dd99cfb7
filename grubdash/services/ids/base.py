"""
Identifier Allocator Abstract Base Class

Defines the contract for generating record ids. Implementations only
produce candidates; allocate() keeps drawing until it finds one the
target collection does not already hold, so ids never collide even
when a collection was seeded with ids from another scheme.
"""

from abc import ABC, abstractmethod
from typing import Callable


class BaseIdAllocator(ABC):
    """
    Abstract base class for id allocators.

    Example:
        >>> allocator = get_id_allocator(IdStrategy.COUNTER)
        >>> allocator.allocate(dishes.exists)
        '1'
    """

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Name of the strategy (e.g. "uuid", "counter")."""
        pass

    @abstractmethod
    def next_candidate(self) -> str:
        """Produce the next candidate id."""
        pass

    def allocate(self, exists: Callable[[str], bool]) -> str:
        """
        Return a fresh id.

        Args:
            exists: Predicate telling whether an id is already taken

        Returns:
            str: An id for which ``exists`` is False
        """
        candidate = self.next_candidate()
        while exists(candidate):
            candidate = self.next_candidate()
        return candidate
