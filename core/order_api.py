"""
Order/Product API backed by the restaurant database.

This is the authoritative side of every order mutation: it re-checks status
transitions and recomputes totals. Each call opens its own session so the
views can run calls from several threads at once.
"""
from contextlib import contextmanager
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from core.db import SessionLocal
from core.errors import OrderApiError
from core.order_status import OrderStatus, can_transition, is_terminal, parse_quantity
from models.audit_log import AuditLog
from models.order import Order, OrderItem
from models.product import Product


class OrderApi:

    def __init__(self, session_factory=None, admin_email: Optional[str] = None):
        self.session_factory = session_factory or SessionLocal
        self.admin_email = admin_email

    @contextmanager
    def _session(self):
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except OrderApiError:
            db.rollback()
            raise
        except SQLAlchemyError as e:
            db.rollback()
            print(f"❌ Order API database error: {e}")
            raise OrderApiError("Order service unavailable") from e
        except ValueError as e:
            # a stored status or delivery method that no longer parses
            db.rollback()
            print(f"❌ Order API data error: {e}")
            raise OrderApiError("Order data could not be read") from e
        finally:
            db.close()

    def _audit(self, db, order, action):
        db.add(AuditLog(
            admin_email=self.admin_email or "system",
            restaurant_id=order.restaurant_id,
            order_id=order.id,
            action=action
        ))

    def _get_order(self, db, order_id, restaurant_id):
        order = db.query(Order).filter(Order.id == order_id).first()
        if not order or order.restaurant_id != restaurant_id:
            raise OrderApiError(f"Order #{order_id} not found")
        return order

    # ===================== QUERIES =====================

    def get_orders(self, restaurant_id: str, status_filter=None) -> dict:
        """Orders of a restaurant, newest first, optionally only one status."""
        with self._session() as db:
            query = db.query(Order).filter(Order.restaurant_id == restaurant_id)
            if status_filter:
                try:
                    status = OrderStatus.parse(status_filter)
                except ValueError as e:
                    raise OrderApiError(str(e)) from e
                query = query.filter(Order.status == status.value)
            orders = query.order_by(Order.created_at.desc(), Order.id.desc()).all()
            return {"orders": [o.to_dict() for o in orders]}

    def get_orders_by_restaurant(self, restaurant_id: str) -> list:
        """Full order list used by the dashboard aggregates."""
        return self.get_orders(restaurant_id)["orders"]

    def get_products(self, restaurant_id: str) -> dict:
        with self._session() as db:
            products = (
                db.query(Product)
                .filter(Product.restaurant_id == restaurant_id, Product.available == True)  # noqa: E712
                .order_by(Product.name)
                .all()
            )
            return {"products": [p.to_dict() for p in products]}

    # ===================== MUTATIONS =====================

    def update_order_status(self, order_id, status, restaurant_id: str) -> None:
        try:
            new_status = OrderStatus.parse(status)
        except ValueError as e:
            raise OrderApiError(str(e)) from e

        with self._session() as db:
            order = self._get_order(db, order_id, restaurant_id)
            if not can_transition(order.status, new_status):
                raise OrderApiError(f"Order #{order_id} cannot move from {order.status} to {new_status.value}")
            old_status = order.status
            order.status = new_status.value
            self._audit(db, order, f"Updated order #{order_id} from {old_status} to {new_status.value}")
        print(f"✅ Order #{order_id} → {new_status.value}")

    def add_product_to_order(self, order_id, product_id, quantity: int, restaurant_id: str) -> None:
        try:
            quantity = parse_quantity(quantity)
        except ValueError as e:
            raise OrderApiError("Quantity must be a whole number") from e
        if quantity < 1:
            raise OrderApiError("Quantity must be at least 1")

        with self._session() as db:
            order = self._get_order(db, order_id, restaurant_id)
            if is_terminal(order.status):
                raise OrderApiError(f"Order #{order_id} is already {order.status}")

            product = db.query(Product).filter(Product.id == product_id).first()
            if not product or product.restaurant_id != restaurant_id or not product.available:
                raise OrderApiError(f"Product #{product_id} not found")

            existing = next((i for i in order.items if i.product_id == product.id), None)
            if existing:
                existing.quantity += quantity
            else:
                order.items.append(OrderItem(
                    product_id=product.id,
                    name=product.name,
                    unit_price=product.price,
                    quantity=quantity
                ))
            order.recompute_total()
            self._audit(db, order, f"Added {quantity} x {product.name} to order #{order_id}")
        print(f"✅ Added {quantity} x product #{product_id} to order #{order_id}")
