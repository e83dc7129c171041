"""
Order status state machine and delivery methods.

Statuses only move forward; delivered and cancelled are terminal. The table
below only decides which actions the admin is offered, the order API does the
authoritative check and can still reject a transition.
"""
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value):
        """Accept 'pending', 'PENDING' or a member. Raises ValueError otherwise."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid order status: {value!r}")
        return cls(value.strip().lower())


class DeliveryMethod(str, Enum):
    DINE_IN = "dine_in"
    DELIVERY = "delivery"
    PICKUP = "pickup"

    @classmethod
    def parse(cls, value):
        """Accept 'dine_in', 'DINE_IN', the route slug ('mesa') or a member."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid delivery method: {value!r}")
        key = value.strip().lower()
        if key in _SLUG_TO_METHOD:
            return _SLUG_TO_METHOD[key]
        return cls(key)

    @property
    def slug(self):
        """Path segment of the filtered order list, e.g. /admin/orders/mesa"""
        return _METHOD_TO_SLUG[self]


def check_exhaustive(table, enum_cls, name):
    """Fail at import time if a lookup table misses a member of its enum."""
    missing = [member.value for member in enum_cls if member not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")
    return table


_TRANSITIONS = check_exhaustive({
    OrderStatus.PENDING: (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    OrderStatus.CONFIRMED: (OrderStatus.PREPARING, OrderStatus.CANCELLED),
    OrderStatus.PREPARING: (OrderStatus.READY, OrderStatus.CANCELLED),
    OrderStatus.READY: (OrderStatus.DELIVERED,),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}, OrderStatus, "status transition table")

_METHOD_TO_SLUG = check_exhaustive({
    DeliveryMethod.DINE_IN: "mesa",
    DeliveryMethod.DELIVERY: "domicilio",
    DeliveryMethod.PICKUP: "recoger",
}, DeliveryMethod, "delivery slug table")

_SLUG_TO_METHOD = {slug: method for method, slug in _METHOD_TO_SLUG.items()}


def next_status_options(status):
    """Statuses an order in `status` may move to, in display order.

    Unknown statuses get an empty list, same as the terminal ones.
    """
    try:
        current = OrderStatus.parse(status)
    except ValueError:
        return []
    return list(_TRANSITIONS[current])


def can_transition(current, new):
    try:
        target = OrderStatus.parse(new)
    except ValueError:
        return False
    return target in next_status_options(current)


def is_terminal(status):
    return OrderStatus.parse(status) in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)


def parse_quantity(value) -> int:
    """
    Line-item quantity as an int. Accepts ints, integral floats (2.0) and
    digit strings ("3"); anything fractional or non-numeric raises ValueError.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid quantity: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Quantity must be a whole number: {value!r}")
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    raise ValueError(f"Invalid quantity: {value!r}")
