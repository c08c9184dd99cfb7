"""
Order Routes

    GET    /orders             list every order
    POST   /orders             place an order
    GET    /orders/{order_id}  read one order
    PUT    /orders/{order_id}  update one order, including its status
    DELETE /orders/{order_id}  cancel an order that is still pending

Any verb not listed answers 405.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Response, status

from grubdash.api.deps import get_order_ids, get_order_repository, get_payload
from grubdash.core.errors import NotFoundError
from grubdash.repositories import BaseRepository
from grubdash.schemas import (
    ErrorResponse,
    Order,
    OrderFields,
    OrderListResponse,
    OrderResponse,
    OrderStatusEnum,
    OrderUpdateFields,
)
from grubdash.services.ids import BaseIdAllocator
from grubdash.validation import ensure_deletable, validate_order, validate_order_update

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# DEPENDENCIES
# =============================================================================

async def order_exists(
    order_id: str,
    orders: BaseRepository[Order] = Depends(get_order_repository),
) -> Order:
    """Look up the routed order or fail with 404."""
    order = orders.find(order_id)
    if order is None:
        raise NotFoundError(f"Order id not found: {order_id}")
    return order


async def valid_new_order(payload: dict[str, Any] = Depends(get_payload)) -> OrderFields:
    return validate_order(payload)


async def valid_order_update(
    order_id: str,
    payload: dict[str, Any] = Depends(get_payload),
) -> OrderUpdateFields:
    return validate_order_update(payload, route_id=order_id)


# =============================================================================
# ROUTES
# =============================================================================

@router.get("", response_model=OrderListResponse, summary="List Orders")
async def list_orders(
    orders: BaseRepository[Order] = Depends(get_order_repository),
) -> dict[str, Any]:
    """Return every order in the order it was placed."""
    return {"data": orders.list_all()}


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create Order",
)
async def create_order(
    fields: OrderFields = Depends(valid_new_order),
    orders: BaseRepository[Order] = Depends(get_order_repository),
    ids: BaseIdAllocator = Depends(get_order_ids),
) -> dict[str, Any]:
    """Place a new order. Orders always start out pending."""
    order = Order(
        id=ids.allocate(orders.exists),
        deliver_to=fields.deliver_to,
        mobile_number=fields.mobile_number,
        dishes=fields.dishes,
        status=OrderStatusEnum.PENDING,
    )
    orders.insert(order)

    logger.info(
        f"Order {order.id} created: {len(order.dishes)} line(s) to {order.deliver_to}"
    )
    return {"data": order}


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Read Order",
)
async def read_order(order: Order = Depends(order_exists)) -> dict[str, Any]:
    return {"data": order}


@router.put(
    "/{order_id}",
    response_model=OrderResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update Order",
)
async def update_order(
    order: Order = Depends(order_exists),
    fields: OrderUpdateFields = Depends(valid_order_update),
    orders: BaseRepository[Order] = Depends(get_order_repository),
) -> dict[str, Any]:
    """
    Overwrite an order's deliverTo, mobileNumber, dishes and status.

    Any of the four statuses may be set from any other; there is no
    transition ordering beyond membership in the set.
    """
    previous_status = order.status
    updated = orders.update(order.id, dict(fields))
    if updated is None:
        raise NotFoundError(f"Order id not found: {order.id}")

    if updated.status != previous_status:
        logger.info(
            f"Order {order.id} status: {previous_status.value} → {updated.status.value}"
        )
    else:
        logger.info(f"Order {order.id} updated")
    return {"data": updated}


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete Order",
)
async def delete_order(
    order: Order = Depends(order_exists),
    orders: BaseRepository[Order] = Depends(get_order_repository),
) -> Response:
    """Remove an order. Only pending orders can be deleted."""
    if not orders.remove(order.id, guard=ensure_deletable):
        raise NotFoundError(f"Order id not found: {order.id}")

    logger.info(f"Order {order.id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
