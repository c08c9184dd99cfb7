"""
Fixture Loader

Reads the sample menu and orders bundled in ``grubdash/data`` so a
fresh process can start with something to browse. Used at startup
when SEED_DATA is enabled.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from grubdash.repositories import BaseRepository
from grubdash.schemas import Dish, Order

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DISHES_FILE = DATA_DIR / "dishes.json"
ORDERS_FILE = DATA_DIR / "orders.json"


def load_fixtures(data_dir: Optional[Path] = None) -> tuple[list[Dish], list[Order]]:
    """
    Load fixture dishes and orders.

    Args:
        data_dir: Directory holding dishes.json and orders.json
            (defaults to the bundled data)

    Returns:
        Tuple of (dishes, orders) in file order
    """
    directory = Path(data_dir) if data_dir else DATA_DIR

    with open(directory / DISHES_FILE.name, encoding="utf-8") as f:
        dishes = [Dish.model_validate(item) for item in json.load(f)]

    with open(directory / ORDERS_FILE.name, encoding="utf-8") as f:
        orders = [Order.model_validate(item) for item in json.load(f)]

    return dishes, orders


def seed_repositories(
    dishes: BaseRepository[Dish],
    orders: BaseRepository[Order],
    data_dir: Optional[Path] = None,
) -> None:
    """Insert the fixture records into empty repositories."""
    fixture_dishes, fixture_orders = load_fixtures(data_dir)

    for dish in fixture_dishes:
        dishes.insert(dish)
    for order in fixture_orders:
        orders.insert(order)

    logger.info(
        f"Seeded {len(fixture_dishes)} dishes and {len(fixture_orders)} orders"
    )
