"""
Shared Route Dependencies

Request body parsing plus accessors for the collections and id
allocators the application owns. Routes receive all of these through
``Depends`` so tests can swap any of them via
``app.dependency_overrides``.
"""

import json
import logging
from typing import Any

from fastapi import Request

from grubdash.core.errors import ValidationError
from grubdash.repositories import BaseRepository
from grubdash.schemas import Dish, Order
from grubdash.services.ids import BaseIdAllocator

logger = logging.getLogger(__name__)


async def get_payload(request: Request) -> dict[str, Any]:
    """
    Return the ``data`` object of the JSON request body.

    A missing body, or a body whose ``data`` is absent or not an
    object, yields an empty dict so field validation reports the
    first required field.

    Raises:
        ValidationError: If the body is not valid JSON
    """
    body = await request.body()
    if not body.strip():
        return {}

    try:
        parsed = json.loads(body)
    except ValueError as e:
        logger.debug(f"Rejected malformed JSON body: {e}")
        raise ValidationError("Request body must be valid JSON")

    data = parsed.get("data") if isinstance(parsed, dict) else None
    return data if isinstance(data, dict) else {}


def get_dish_repository(request: Request) -> BaseRepository[Dish]:
    return request.app.state.dishes


def get_order_repository(request: Request) -> BaseRepository[Order]:
    return request.app.state.orders


def get_dish_ids(request: Request) -> BaseIdAllocator:
    return request.app.state.dish_ids


def get_order_ids(request: Request) -> BaseIdAllocator:
    return request.app.state.order_ids
