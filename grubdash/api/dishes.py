"""
Dish Routes

    GET  /dishes            list every dish
    POST /dishes            create a dish
    GET  /dishes/{dish_id}  read one dish
    PUT  /dishes/{dish_id}  update one dish

Dishes cannot be deleted; any verb not listed answers 405.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status

from grubdash.api.deps import get_dish_ids, get_dish_repository, get_payload
from grubdash.core.errors import NotFoundError
from grubdash.repositories import BaseRepository
from grubdash.schemas import (
    Dish,
    DishFields,
    DishListResponse,
    DishResponse,
    ErrorResponse,
)
from grubdash.services.ids import BaseIdAllocator
from grubdash.validation import validate_dish

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# DEPENDENCIES
# =============================================================================

async def dish_exists(
    dish_id: str,
    dishes: BaseRepository[Dish] = Depends(get_dish_repository),
) -> Dish:
    """Look up the routed dish or fail with 404."""
    dish = dishes.find(dish_id)
    if dish is None:
        raise NotFoundError(f"Dish id not found: {dish_id}")
    return dish


async def valid_new_dish(payload: dict[str, Any] = Depends(get_payload)) -> DishFields:
    return validate_dish(payload)


async def valid_dish_update(
    dish_id: str,
    payload: dict[str, Any] = Depends(get_payload),
) -> DishFields:
    return validate_dish(payload, route_id=dish_id)


# =============================================================================
# ROUTES
# =============================================================================

@router.get("", response_model=DishListResponse, summary="List Dishes")
async def list_dishes(
    dishes: BaseRepository[Dish] = Depends(get_dish_repository),
) -> dict[str, Any]:
    """Return every dish in the order it was created."""
    return {"data": dishes.list_all()}


@router.post(
    "",
    response_model=DishResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create Dish",
)
async def create_dish(
    fields: DishFields = Depends(valid_new_dish),
    dishes: BaseRepository[Dish] = Depends(get_dish_repository),
    ids: BaseIdAllocator = Depends(get_dish_ids),
) -> dict[str, Any]:
    """Add a dish to the menu."""
    dish = Dish(id=ids.allocate(dishes.exists), **fields.model_dump())
    dishes.insert(dish)

    logger.info(f"Dish {dish.id} created: {dish.name} (${dish.price})")
    return {"data": dish}


@router.get(
    "/{dish_id}",
    response_model=DishResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Read Dish",
)
async def read_dish(dish: Dish = Depends(dish_exists)) -> dict[str, Any]:
    return {"data": dish}


@router.put(
    "/{dish_id}",
    response_model=DishResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update Dish",
)
async def update_dish(
    dish: Dish = Depends(dish_exists),
    fields: DishFields = Depends(valid_dish_update),
    dishes: BaseRepository[Dish] = Depends(get_dish_repository),
) -> dict[str, Any]:
    """
    Overwrite a dish's name, description, price and image_url.

    The id is fixed at creation; a body id must match the route.
    """
    updated = dishes.update(dish.id, fields.model_dump())
    if updated is None:
        raise NotFoundError(f"Dish id not found: {dish.id}")

    logger.info(f"Dish {dish.id} updated")
    return {"data": updated}
