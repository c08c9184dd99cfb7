"""
Id Allocator Factory

Provides a single entry point for obtaining an id allocator. The rest
of the application only sees BaseIdAllocator and stays agnostic about
which scheme is in use.

Usage:
    from grubdash.services.ids import get_id_allocator

    allocator = get_id_allocator(settings.id_strategy)
    new_id = allocator.allocate(dishes.exists)

Strategy Switching:
    - ID_STRATEGY=uuid → UuidIdAllocator (default)
    - ID_STRATEGY=counter → CounterIdAllocator
"""

import logging

from grubdash.core.config import IdStrategy
from grubdash.services.ids.base import BaseIdAllocator
from grubdash.services.ids.counter import CounterIdAllocator
from grubdash.services.ids.random_hex import UuidIdAllocator

logger = logging.getLogger(__name__)


def get_id_allocator(strategy: IdStrategy = IdStrategy.UUID) -> BaseIdAllocator:
    """
    Build the id allocator for ``strategy``.

    Each call returns a new instance; the application creates one per
    collection at startup so counters advance independently.

    Returns:
        BaseIdAllocator: Configured allocator

    Example:
        >>> get_id_allocator(IdStrategy.COUNTER).strategy_name
        'counter'
    """
    if strategy == IdStrategy.COUNTER:
        allocator: BaseIdAllocator = CounterIdAllocator()
    else:
        allocator = UuidIdAllocator()

    logger.debug(f"Id allocator: using {allocator.strategy_name}")
    return allocator


__all__ = [
    "get_id_allocator",
    "BaseIdAllocator",
    "CounterIdAllocator",
    "UuidIdAllocator",
]
