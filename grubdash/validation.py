"""
Request Payload Validation

Checks the ``data`` object of a request body against the dish and
order rules and turns it into typed fields. Checks run in a fixed
order and the first failure is raised as a ValidationError whose
message names the offending field, so the client always sees one
error at a time.
"""

from typing import Any, Optional

from grubdash.core.errors import ValidationError
from grubdash.schemas import (
    DishFields,
    Order,
    OrderDish,
    OrderFields,
    OrderStatusEnum,
    OrderUpdateFields,
)

VALID_STATUSES = [s.value for s in OrderStatusEnum]


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def positive_integer(value: Any) -> Optional[int]:
    """
    Return ``value`` as an int if it is an integer greater than 0.

    Integral floats such as ``5.0`` are accepted and narrowed; booleans,
    strings and fractional numbers are not. Returns None when rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float) and value.is_integer() and value > 0:
        return int(value)
    return None


# =============================================================================
# DISHES
# =============================================================================

def validate_dish(data: dict[str, Any], route_id: Optional[str] = None) -> DishFields:
    """
    Validate the fields of a dish create or update.

    Args:
        data: The ``data`` object of the request body
        route_id: The dish id from the route, on update

    Returns:
        DishFields: The validated fields

    Raises:
        ValidationError: On the first missing or malformed field
    """
    if not _is_filled(data.get("name")):
        raise ValidationError("Dish must include a name")

    if not _is_filled(data.get("description")):
        raise ValidationError("Dish must include a description")

    if not _is_filled(data.get("image_url")):
        raise ValidationError("Dish must include an image_url")

    price = positive_integer(data.get("price"))
    if price is None:
        raise ValidationError("Dish must have a price that is an integer greater than 0")

    body_id = data.get("id")
    if route_id is not None and body_id and body_id != route_id:
        raise ValidationError(
            f"Dish id does not match route id. Dish: {body_id}, Route: {route_id}"
        )

    return DishFields(
        name=data["name"],
        description=data["description"],
        price=price,
        image_url=data["image_url"],
    )


# =============================================================================
# ORDERS
# =============================================================================

def _validate_order_dishes(dishes: Any) -> list[OrderDish]:
    if dishes is None:
        raise ValidationError("Order must include a dish")

    if not isinstance(dishes, list) or len(dishes) == 0:
        raise ValidationError("Order must include at least one dish")

    lines = []
    for index, entry in enumerate(dishes):
        quantity = positive_integer(entry.get("quantity")) if isinstance(entry, dict) else None
        if quantity is None:
            raise ValidationError(
                f"Dish {index} must have a quantity that is an integer greater than 0"
            )
        lines.append(OrderDish.model_validate({**entry, "quantity": quantity}))
    return lines


def _validate_order_fields(data: dict[str, Any]) -> dict[str, Any]:
    if not _is_filled(data.get("deliverTo")):
        raise ValidationError("Order must include a deliverTo")

    if not _is_filled(data.get("mobileNumber")):
        raise ValidationError("Order must include a mobileNumber")

    return {
        "deliver_to": data["deliverTo"],
        "mobile_number": data["mobileNumber"],
        "dishes": _validate_order_dishes(data.get("dishes")),
    }


def validate_order(data: dict[str, Any]) -> OrderFields:
    """Validate the fields of a new order."""
    return OrderFields(**_validate_order_fields(data))


def validate_order_update(data: dict[str, Any], route_id: str) -> OrderUpdateFields:
    """
    Validate the fields of an order update.

    Runs the create checks, then rejects a body id that disagrees with
    the route and a status outside the known set.
    """
    fields = _validate_order_fields(data)

    body_id = data.get("id")
    if body_id and body_id != route_id:
        raise ValidationError(
            f"Order id does not match route id. Order: {body_id}, Route: {route_id}."
        )

    status = data.get("status")
    if status not in VALID_STATUSES:
        raise ValidationError(
            f"Order must have a status of {', '.join(VALID_STATUSES)}"
        )

    return OrderUpdateFields(**fields, status=OrderStatusEnum(status))


def ensure_deletable(order: Order) -> None:
    """Raise unless ``order`` is still pending."""
    if order.status != OrderStatusEnum.PENDING:
        raise ValidationError("An order cannot be deleted unless it is pending.")
