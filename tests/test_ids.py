"""
Unit tests for id allocators.
"""

import re

from grubdash.core.config import IdStrategy
from grubdash.services.ids import (
    CounterIdAllocator,
    UuidIdAllocator,
    get_id_allocator,
)


class TestFactory:
    """Tests for get_id_allocator()."""

    def test_default_is_uuid(self):
        assert isinstance(get_id_allocator(), UuidIdAllocator)

    def test_counter(self):
        allocator = get_id_allocator(IdStrategy.COUNTER)

        assert isinstance(allocator, CounterIdAllocator)
        assert allocator.strategy_name == "counter"

    def test_new_instance_per_call(self):
        assert get_id_allocator(IdStrategy.COUNTER) is not get_id_allocator(IdStrategy.COUNTER)


class TestUuidIdAllocator:
    """Tests for UuidIdAllocator."""

    def test_format(self):
        new_id = UuidIdAllocator().allocate(lambda _: False)

        assert re.fullmatch(r"[0-9a-f]{32}", new_id)

    def test_unique(self):
        allocator = UuidIdAllocator()

        ids = {allocator.allocate(lambda _: False) for _ in range(1000)}

        assert len(ids) == 1000


class TestCounterIdAllocator:
    """Tests for CounterIdAllocator."""

    def test_monotonic(self):
        allocator = CounterIdAllocator()

        assert [allocator.allocate(lambda _: False) for _ in range(3)] == ["1", "2", "3"]

    def test_custom_start(self):
        assert CounterIdAllocator(start=100).allocate(lambda _: False) == "100"

    def test_skips_taken_ids(self):
        taken = {"1", "2", "4"}
        allocator = CounterIdAllocator()

        assert allocator.allocate(taken.__contains__) == "3"
        assert allocator.allocate(taken.__contains__) == "5"
