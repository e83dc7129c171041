"""
Tests for the database-backed order API.
"""
import pytest

from core.errors import OrderApiError
from core.order_status import OrderStatus, DeliveryMethod
from models.audit_log import AuditLog
from models.order import Order

RESTAURANT = "ay-wey"


def test_get_orders_is_scoped_and_newest_first(api, seeded):
    orders = api.get_orders(RESTAURANT)["orders"]

    assert [o["id"] for o in orders] == [seeded["pending"], seeded["ready"], seeded["delivered"]]
    pending = orders[0]
    assert pending["status"] is OrderStatus.PENDING
    assert pending["delivery_method"] is DeliveryMethod.DINE_IN
    assert pending["table_number"] == "4"
    assert pending["products"] == [
        {"product_id": seeded["tacos"], "name": "Taco al Pastor", "price": 12000.0, "quantity": 2}
    ]
    assert pending["total"] == 24000.0


def test_get_orders_status_filter_accepts_either_case(api, seeded):
    assert [o["id"] for o in api.get_orders(RESTAURANT, "ready")["orders"]] == [seeded["ready"]]
    assert [o["id"] for o in api.get_orders(RESTAURANT, "READY")["orders"]] == [seeded["ready"]]
    with pytest.raises(OrderApiError):
        api.get_orders(RESTAURANT, "lost")


def test_get_products_lists_available_catalog(api):
    products = api.get_products(RESTAURANT)["products"]

    assert [p["name"] for p in products] == ["Burrito", "Taco al Pastor"]


def test_update_order_status_moves_forward(api, seeded, session_factory):
    api.update_order_status(seeded["pending"], "confirmed", RESTAURANT)

    db = session_factory()
    assert db.get(Order, seeded["pending"]).status == "confirmed"
    logs = db.query(AuditLog).all()
    assert len(logs) == 1
    assert logs[0].admin_email == "admin@aywey.com"
    assert logs[0].order_id == seeded["pending"]
    assert logs[0].restaurant_id == RESTAURANT
    db.close()


@pytest.mark.parametrize("quantity", ["two", 2.5, "2.5"])
def test_non_integral_quantity_is_rejected(api, seeded, quantity):
    with pytest.raises(OrderApiError, match="whole number"):
        api.add_product_to_order(seeded["pending"], seeded["tacos"], quantity, RESTAURANT)


def test_integral_float_quantity_is_accepted(api, seeded):
    api.add_product_to_order(seeded["pending"], seeded["burrito"], 2.0, RESTAURANT)

    order = api.get_orders(RESTAURANT, "pending")["orders"][0]
    assert {item["name"]: item["quantity"] for item in order["products"]}["Burrito"] == 2


def test_unreadable_stored_status_surfaces_as_api_error(api, seeded, session_factory):
    db = session_factory()
    db.get(Order, seeded["ready"]).status = "on_hold"
    db.commit()
    db.close()

    with pytest.raises(OrderApiError, match="could not be read"):
        api.get_orders(RESTAURANT)


@pytest.mark.parametrize("order_key,status", [
    ("ready", "cancelled"),
    ("delivered", "ready"),
    ("pending", "delivered"),
])
def test_update_order_status_rejects_illegal_transitions(api, seeded, session_factory, order_key, status):
    with pytest.raises(OrderApiError):
        api.update_order_status(seeded[order_key], status, RESTAURANT)

    db = session_factory()
    assert db.query(AuditLog).count() == 0
    db.close()


def test_update_order_status_rejects_foreign_or_missing_orders(api, seeded):
    with pytest.raises(OrderApiError, match="not found"):
        api.update_order_status(seeded["other"], "confirmed", RESTAURANT)
    with pytest.raises(OrderApiError, match="not found"):
        api.update_order_status(9999, "confirmed", RESTAURANT)


def test_add_product_recomputes_total(api, seeded):
    api.add_product_to_order(seeded["pending"], seeded["burrito"], 2, RESTAURANT)
    api.add_product_to_order(seeded["pending"], seeded["tacos"], 1, RESTAURANT)

    order = api.get_orders(RESTAURANT, "pending")["orders"][0]
    quantities = {item["name"]: item["quantity"] for item in order["products"]}
    assert quantities == {"Taco al Pastor": 3, "Burrito": 2}
    assert order["total"] == 3 * 12000.0 + 2 * 25000.0


@pytest.mark.parametrize("product_key,quantity,order_key", [
    ("tacos", 0, "pending"),
    ("hidden", 1, "pending"),
    ("foreign", 1, "pending"),
    ("tacos", 1, "delivered"),
])
def test_add_product_rejections(api, seeded, product_key, quantity, order_key):
    before = api.get_orders(RESTAURANT)["orders"]

    with pytest.raises(OrderApiError):
        api.add_product_to_order(seeded[order_key], seeded[product_key], quantity, RESTAURANT)

    assert api.get_orders(RESTAURANT)["orders"] == before
