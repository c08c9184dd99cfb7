"""
Pydantic Schemas for Records and Responses

Dishes and orders are stored as these models and serialized through
them. Field names on the wire follow the public API (``deliverTo``,
``mobileNumber``, ``image_url``); attribute names stay snake_case.

Version: 1.0.0
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================

class OrderStatusEnum(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"


# =============================================================================
# DISHES
# =============================================================================

class DishFields(BaseModel):
    """Mutable fields of a dish, as accepted on create and update."""
    name: str = Field(..., min_length=1, examples=["Dolcelatte and fennel salad"])
    description: str = Field(..., min_length=1, examples=["Paired with pears and walnuts"])
    price: int = Field(..., gt=0, examples=[19])
    image_url: str = Field(..., min_length=1, examples=["https://images.example.com/salad.jpg"])


class Dish(DishFields):
    """A menu item."""
    id: str


# =============================================================================
# ORDERS
# =============================================================================

class OrderDish(BaseModel):
    """
    One line of an order.

    References a dish by ``id`` and carries the ordered quantity. Any
    other keys a client sends with the line (a copy of the dish name,
    its price) are kept as-is.
    """
    model_config = ConfigDict(extra="allow")

    quantity: int = Field(..., gt=0, examples=[2])


class OrderFields(BaseModel):
    """Mutable fields of an order, as accepted on create."""
    model_config = ConfigDict(populate_by_name=True)

    deliver_to: str = Field(..., alias="deliverTo", min_length=1, examples=["308 Negra Arroyo Lane"])
    mobile_number: str = Field(..., alias="mobileNumber", min_length=1, examples=["(505) 143-3369"])
    dishes: List[OrderDish] = Field(..., min_length=1)


class OrderUpdateFields(OrderFields):
    """Fields accepted on order update; status becomes mandatory."""
    status: OrderStatusEnum


class Order(OrderFields):
    """A customer order tracked through delivery."""
    id: str
    status: OrderStatusEnum = OrderStatusEnum.PENDING


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class DishResponse(BaseModel):
    data: Dish


class DishListResponse(BaseModel):
    data: List[Dish]


class OrderResponse(BaseModel):
    data: Order


class OrderListResponse(BaseModel):
    data: List[Order]


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    dishes: int
    orders: int
    timestamp: datetime
