"""
State and actions behind the order list page.

The Flet view only renders `OrdersViewState`; every change to it goes through
the methods below so the page can be driven (and tested) without a UI.
"""
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional

from core.config import DEFAULT_RESTAURANT_ID
from core.errors import ActionError, ValidationError
from core.order_status import DeliveryMethod, OrderStatus, parse_quantity

LOAD_ERROR = "Error loading dashboard data"
UPDATE_ERROR = "Error updating the order status"
ADD_PRODUCT_ERROR = "There was an error adding the product. Please try again."
ADD_PRODUCT_INVALID = "Please select a product and a valid quantity."


@dataclass
class OrdersViewState:
    restaurant_id: str
    status_filter: Optional[OrderStatus] = None
    delivery_filter: Optional[DeliveryMethod] = None
    orders: list = field(default_factory=list)
    products: list = field(default_factory=list)
    loading: bool = False
    error: str = ""
    updating: set = field(default_factory=set)  # order ids with a status update in flight
    adding_product_to: set = field(default_factory=set)
    selected_product: Optional[int] = None
    quantity: int = 1


class OrdersController:

    def __init__(self, api, session_store=None, default_restaurant_id=DEFAULT_RESTAURANT_ID):
        self.api = api
        self.session_store = session_store
        self.default_restaurant_id = default_restaurant_id
        self.state = OrdersViewState(restaurant_id=default_restaurant_id)
        self._lock = threading.Lock()

    def _current_restaurant_id(self):
        session = self.session_store.load() if self.session_store else None
        return session.restaurant_id if session else self.default_restaurant_id

    # ===================== LOAD =====================

    def load_data(self) -> bool:
        """
        Fetch orders and products together. Either failing aborts the load:
        the error is set and whatever was loaded before stays on screen.
        """
        restaurant_id = self._current_restaurant_id()
        with self._lock:
            self.state.loading = True
            self.state.error = ""
            self.state.restaurant_id = restaurant_id
            status_filter = self.state.status_filter

        try:
            with ThreadPoolExecutor(max_workers=2, thread_name_prefix="orders-load") as pool:
                orders_future = pool.submit(self.api.get_orders, restaurant_id, status_filter)
                products_future = pool.submit(self.api.get_products, restaurant_id)
                orders = orders_future.result()["orders"]
                products = products_future.result()["products"]
        except Exception as ex:
            print(f"❌ Error loading orders for {restaurant_id}: {ex}")
            with self._lock:
                self.state.error = LOAD_ERROR
                self.state.loading = False
            return False

        with self._lock:
            self.state.orders = list(orders)
            self.state.products = list(products)
            self.state.loading = False
        print(f"📦 Loaded {len(orders)} orders, {len(products)} products for {restaurant_id}")
        return True

    # ===================== FILTERS =====================

    def set_status_filter(self, status):
        with self._lock:
            self.state.status_filter = OrderStatus.parse(status) if status else None

    def set_delivery_filter(self, method):
        with self._lock:
            self.state.delivery_filter = DeliveryMethod.parse(method) if method else None

    def visible_orders(self):
        with self._lock:
            orders = list(self.state.orders)
            method = self.state.delivery_filter
        if method is None:
            return orders
        return [o for o in orders if o["delivery_method"] == method]

    def summary_line(self):
        count = len(self.visible_orders())
        return f"{self.state.restaurant_id} • {count} order{'' if count == 1 else 's'}"

    # ===================== STATUS UPDATE =====================

    def is_updating(self, order_id) -> bool:
        with self._lock:
            return order_id in self.state.updating

    def update_order_status(self, order_id, new_status, on_started=None):
        """
        Ask the API to move an order to `new_status`, then patch only that
        order's status locally. One update per order may be in flight.

        `on_started` is called once the order is marked in flight, before the
        API call, so the view can show the disabled buttons.
        """
        try:
            new_status = OrderStatus.parse(new_status)
        except ValueError as ex:
            raise ValidationError(str(ex)) from ex

        with self._lock:
            if order_id in self.state.updating:
                raise ActionError(f"Order #{order_id} is already being updated")
            self.state.updating.add(order_id)
            restaurant_id = self.state.restaurant_id

        try:
            if on_started:
                on_started()
            self.api.update_order_status(order_id, new_status, restaurant_id)
        except Exception as ex:
            print(f"❌ Error updating order #{order_id}: {ex}")
            raise ActionError(UPDATE_ERROR) from ex
        else:
            with self._lock:
                self.state.orders = [
                    dict(order, status=new_status) if order["id"] == order_id else order
                    for order in self.state.orders
                ]
        finally:
            with self._lock:
                self.state.updating.discard(order_id)

    # ===================== ADD PRODUCT =====================

    def select_product(self, product_id):
        with self._lock:
            self.state.selected_product = int(product_id) if product_id else None

    def set_quantity(self, quantity):
        with self._lock:
            self.state.quantity = quantity

    def is_adding_product(self, order_id) -> bool:
        with self._lock:
            return order_id in self.state.adding_product_to

    def add_product_to_order(self, order_id, product_id=None, quantity=None, on_started=None):
        """
        Add a product to an order, then reload everything so the line items
        and total come from the API. Bad input never reaches the API.
        `on_started` works as in update_order_status.
        """
        with self._lock:
            product_id = self.state.selected_product if product_id is None else product_id
            quantity = self.state.quantity if quantity is None else quantity
        try:
            quantity = parse_quantity(quantity)
        except ValueError as ex:
            raise ValidationError(ADD_PRODUCT_INVALID) from ex
        if not product_id or quantity < 1:
            raise ValidationError(ADD_PRODUCT_INVALID)

        with self._lock:
            self.state.adding_product_to.add(order_id)
            restaurant_id = self.state.restaurant_id

        try:
            if on_started:
                on_started()
            self.api.add_product_to_order(order_id, product_id, quantity, restaurant_id)
        except Exception as ex:
            print(f"❌ Error adding product #{product_id} to order #{order_id}: {ex}")
            raise ActionError(ADD_PRODUCT_ERROR) from ex
        finally:
            with self._lock:
                self.state.adding_product_to.discard(order_id)

        self.load_data()
        with self._lock:
            self.state.selected_product = None
            self.state.quantity = 1
