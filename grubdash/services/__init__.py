"""
                        Services Module

Supporting services with a swappable implementation behind a base class.

Services:
    - ids: record id allocation (uuid or counter)
    - fixtures: bundled sample dishes and orders
"""

from grubdash.services.fixtures import load_fixtures, seed_repositories
from grubdash.services.ids import get_id_allocator

__all__ = ["load_fixtures", "seed_repositories", "get_id_allocator"]
