"""
Pytest configuration and fixtures.
"""
import os
import threading
from datetime import datetime, timedelta

# Never touch the real database file from tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.db import Base
from core.errors import OrderApiError
from core.order_api import OrderApi
from core.order_status import OrderStatus, DeliveryMethod
from models.admin_user import AdminUser
from models.audit_log import AuditLog
from models.order import Order, OrderItem
from models.product import Product

RESTAURANT = "ay-wey"
OTHER_RESTAURANT = "el-otro"


@pytest.fixture
def session_factory(tmp_path):
    """Fresh SQLite database per test, shared by every thread of the test."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        future=True,
        connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)
    yield factory
    engine.dispose()


@pytest.fixture
def seeded(session_factory):
    """Two products and three orders for RESTAURANT, one of each for OTHER_RESTAURANT."""
    db = session_factory()
    now = datetime.utcnow()
    tacos = Product(restaurant_id=RESTAURANT, name="Taco al Pastor", category="Tacos", price=12000.0)
    burrito = Product(restaurant_id=RESTAURANT, name="Burrito", category="Burritos", price=25000.0)
    hidden = Product(restaurant_id=RESTAURANT, name="Pozole", price=20000.0, available=False)
    foreign = Product(restaurant_id=OTHER_RESTAURANT, name="Arepa", price=8000.0)
    db.add_all([tacos, burrito, hidden, foreign])
    db.flush()

    def order(status, method, minutes_ago, restaurant=RESTAURANT, lines=(), **extra):
        o = Order(
            restaurant_id=restaurant,
            status=status.value,
            delivery_method=method.value,
            customer_name="Laura",
            customer_phone="3001234567",
            created_at=now - timedelta(minutes=minutes_ago),
            **extra
        )
        for product, quantity in lines:
            o.items.append(OrderItem(product_id=product.id, name=product.name,
                                     unit_price=product.price, quantity=quantity))
        o.recompute_total()
        db.add(o)
        return o

    pending = order(OrderStatus.PENDING, DeliveryMethod.DINE_IN, 5, lines=[(tacos, 2)], table_number="4")
    ready = order(OrderStatus.READY, DeliveryMethod.PICKUP, 20, lines=[(burrito, 1)])
    delivered = order(OrderStatus.DELIVERED, DeliveryMethod.DELIVERY, 90, lines=[(tacos, 1)],
                      delivery_address="Calle 45 #12-30")
    other = order(OrderStatus.PENDING, DeliveryMethod.PICKUP, 1, restaurant=OTHER_RESTAURANT, lines=[(foreign, 1)])
    db.commit()
    ids = {
        "tacos": tacos.id, "burrito": burrito.id, "hidden": hidden.id, "foreign": foreign.id,
        "pending": pending.id, "ready": ready.id, "delivered": delivered.id, "other": other.id,
    }
    db.close()
    return ids


@pytest.fixture
def api(session_factory, seeded):
    return OrderApi(session_factory, admin_email="admin@aywey.com")


class MemoryStorage:
    """Stand-in for page.client_storage."""

    def __init__(self, data=None):
        self.data = dict(data or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value

    def remove(self, key):
        self.data.pop(key, None)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def make_order():
    def _make(order_id, status="pending", method="dine_in", total=0.0, minutes_ago=0):
        return {
            "id": order_id,
            "restaurant_id": RESTAURANT,
            "status": OrderStatus.parse(status),
            "delivery_method": DeliveryMethod.parse(method),
            "customer": {"name": "Laura", "phone": "3001234567", "email": None},
            "table_number": None,
            "delivery_address": None,
            "products": [],
            "total": total,
            "created_at": datetime.utcnow() - timedelta(minutes=minutes_ago),
        }
    return _make


class FakeApi:
    """Records every call; methods named in `fail_on` raise, those in `block` wait for their event."""

    def __init__(self, orders=None, products=None):
        self.orders = list(orders or [])
        self.products = list(products or [])
        self.calls = []
        self.fail_on = set()
        self.block = {}

    def _enter(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.block:
            self.block[name].wait(5)
        if name in self.fail_on:
            raise OrderApiError(f"{name} failed")

    def called(self, name):
        return [c for c in self.calls if c[0] == name]

    def get_orders(self, restaurant_id, status_filter=None):
        self._enter("get_orders", restaurant_id, status_filter)
        return {"orders": [dict(o) for o in self.orders
                           if status_filter is None or o["status"] == status_filter]}

    def get_products(self, restaurant_id):
        self._enter("get_products", restaurant_id)
        return {"products": [dict(p) for p in self.products]}

    def get_orders_by_restaurant(self, restaurant_id):
        self._enter("get_orders_by_restaurant", restaurant_id)
        return [dict(o) for o in self.orders]

    def update_order_status(self, order_id, status, restaurant_id):
        self._enter("update_order_status", order_id, status, restaurant_id)

    def add_product_to_order(self, order_id, product_id, quantity, restaurant_id):
        self._enter("add_product_to_order", order_id, product_id, quantity, restaurant_id)


@pytest.fixture
def fake_api(make_order):
    return FakeApi(
        orders=[make_order(1, "pending", "dine_in", 10000), make_order(2, "ready", "pickup", 25000)],
        products=[{"id": 7, "name": "Taco al Pastor", "price": 12000.0, "category": "Tacos"}]
    )


@pytest.fixture
def blocker():
    """Event used to hold a FakeApi call in flight."""
    event = threading.Event()
    yield event
    event.set()
