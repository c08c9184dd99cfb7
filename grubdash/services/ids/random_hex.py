"""
Random Hex Id Allocator

Generates 32 character lowercase hex ids from uuid4, the default
scheme. Collisions are astronomically unlikely and are still retried
by allocate().
"""

import uuid

from grubdash.services.ids.base import BaseIdAllocator


class UuidIdAllocator(BaseIdAllocator):
    """Random uuid4-based ids."""

    @property
    def strategy_name(self) -> str:
        return "uuid"

    def next_candidate(self) -> str:
        return uuid.uuid4().hex
