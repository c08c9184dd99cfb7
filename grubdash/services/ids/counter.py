"""
Counter Id Allocator

Generates monotonically increasing integer ids rendered as strings
("1", "2", ...). Handy for local runs and demos where short ids are
easier to type into a URL. Values are never handed out twice, even
when the record that used one has been deleted.
"""

import itertools
import threading

from grubdash.services.ids.base import BaseIdAllocator


class CounterIdAllocator(BaseIdAllocator):
    """
    Monotonic counter ids.

    Attributes:
        start: First value handed out
    """

    def __init__(self, start: int = 1):
        self.start = start
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    @property
    def strategy_name(self) -> str:
        return "counter"

    def next_candidate(self) -> str:
        with self._lock:
            return str(next(self._counter))
