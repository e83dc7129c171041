"""
Tests for the order status state machine.
"""
import pytest

from core.order_status import (
    DeliveryMethod, OrderStatus, can_transition, check_exhaustive, is_terminal, next_status_options,
    parse_quantity
)

EXPECTED = {
    "pending": ["confirmed", "cancelled"],
    "confirmed": ["preparing", "cancelled"],
    "preparing": ["ready", "cancelled"],
    "ready": ["delivered"],
    "delivered": [],
    "cancelled": [],
}


@pytest.mark.parametrize("status", list(OrderStatus))
def test_next_status_options_match_transition_table(status):
    assert [s.value for s in next_status_options(status)] == EXPECTED[status.value]


def test_every_status_is_covered():
    assert set(EXPECTED) == {s.value for s in OrderStatus}


def test_ready_and_terminal_scenarios():
    assert next_status_options("ready") == ["delivered"]
    assert next_status_options("delivered") == []
    assert next_status_options("cancelled") == []


def test_unknown_status_has_no_options():
    assert next_status_options("lost") == []
    assert next_status_options(None) == []


def test_upper_case_tags_are_canonicalised():
    assert OrderStatus.parse("PREPARING") is OrderStatus.PREPARING
    assert next_status_options("PENDING") == next_status_options("pending")


def test_next_status_options_is_pure():
    first = next_status_options(OrderStatus.PENDING)
    first.append(OrderStatus.DELIVERED)
    next_status_options(OrderStatus.READY)
    assert next_status_options(OrderStatus.PENDING) == [OrderStatus.CONFIRMED, OrderStatus.CANCELLED]


def test_can_transition_only_forward():
    assert can_transition("pending", "confirmed")
    assert can_transition("preparing", "CANCELLED")
    assert not can_transition("ready", "cancelled")
    assert not can_transition("confirmed", "pending")
    assert not can_transition("delivered", "ready")
    assert not can_transition("pending", "teleported")


def test_terminal_statuses():
    assert is_terminal("delivered")
    assert is_terminal(OrderStatus.CANCELLED)
    assert not is_terminal("ready")


def test_delivery_method_parsing():
    assert DeliveryMethod.parse("DINE_IN") is DeliveryMethod.DINE_IN
    assert DeliveryMethod.parse("domicilio") is DeliveryMethod.DELIVERY
    assert DeliveryMethod.parse("recoger") is DeliveryMethod.PICKUP
    assert DeliveryMethod.PICKUP.slug == "recoger"
    with pytest.raises(ValueError):
        DeliveryMethod.parse("drone")


def test_incomplete_lookup_table_fails_loudly():
    with pytest.raises(RuntimeError, match="cancelled"):
        check_exhaustive({s: s.value for s in OrderStatus if s is not OrderStatus.CANCELLED},
                         OrderStatus, "labels")


@pytest.mark.parametrize("value,expected", [(3, 3), (2.0, 2), (" 4 ", 4), ("0", 0)])
def test_parse_quantity_accepts_whole_numbers(value, expected):
    assert parse_quantity(value) == expected


@pytest.mark.parametrize("value", [2.7, "2.5", "two", None, True, [1]])
def test_parse_quantity_rejects_everything_else(value):
    with pytest.raises(ValueError):
        parse_quantity(value)
