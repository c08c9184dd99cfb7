"""
Repository Module

Storage for the dish and order collections behind a common interface.

Usage:
    from grubdash.repositories import InMemoryRepository

    dishes = InMemoryRepository[Dish]("dishes")
    dishes.insert(dish)
"""

from grubdash.repositories.base import BaseRepository, DuplicateIdError
from grubdash.repositories.memory import InMemoryRepository

__all__ = [
    "BaseRepository",
    "DuplicateIdError",
    "InMemoryRepository",
]
