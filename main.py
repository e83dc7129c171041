from dotenv import load_dotenv
import flet as ft

# Load environment variables
load_dotenv()

# Import all models FIRST to ensure SQLAlchemy relationships are registered
from models.admin_user import AdminUser
from models.product import Product
from models.order import Order, OrderItem
from models.audit_log import AuditLog

from core.db import Base, engine
from core.auth_gate import AuthGate, LOGIN_ROUTE, SIGNUP_ROUTE, HOME_ROUTE
from core.session_store import SessionStore
from core.order_api import OrderApi
from core.order_status import DeliveryMethod
from core.poller import PollerRegistry
from core.logger import log_action

# Import views
from ui.admin_layout import admin_layout
from ui.login_view import login_view
from ui.signup_view import signup_view
from ui.dashboard_view import dashboard_view
from ui.orders_view import orders_view
from ui.products_view import products_view

ORDERS_ROUTE = "/admin/orders"
PRODUCTS_ROUTE = "/admin/products"


def main(page: ft.Page):
    page.window.width = 1280
    page.window.height = 800
    page.padding = 0
    page.spacing = 0
    page.title = "Restaurant Admin"
    page.theme_mode = ft.ThemeMode.DARK
    page.vertical_alignment = ft.MainAxisAlignment.START

    gate = AuthGate(SessionStore(page.client_storage))
    pollers = PollerRegistry()

    def logout():
        session = gate.session
        pollers.stop_all()
        if session:
            log_action(session.email, "Logged out")
        page.open(ft.SnackBar(ft.Text("You have been logged out.")))
        page.go(gate.logout())

    def build_admin_page(route):
        """Content for a protected route, or None if the route is unknown."""
        session = gate.session
        api = OrderApi(admin_email=session.email)

        if route in ("/admin", HOME_ROUTE):
            return dashboard_view(page, api, session, pollers)
        if route == ORDERS_ROUTE:
            return orders_view(page, api, gate.store)
        if route.startswith(ORDERS_ROUTE + "/"):
            try:
                method = DeliveryMethod.parse(route[len(ORDERS_ROUTE) + 1:])
            except ValueError:
                return None
            return orders_view(page, api, gate.store, delivery_method=method)
        if route == PRODUCTS_ROUTE:
            return products_view(page, api, session)
        return None

    def route_change(e):
        # Pollers belong to the page being left
        pollers.stop_all()
        # Dialogs and the alarm belong to the page being left, snack bars survive
        page.overlay[:] = [c for c in page.overlay if isinstance(c, ft.SnackBar)]
        page.clean()

        route = page.route
        redirect = gate.check(route)
        if redirect:
            page.go(redirect)
            return

        if route == LOGIN_ROUTE:
            login_view(page, gate)
            return
        if route == SIGNUP_ROUTE:
            signup_view(page, gate)
            return

        content = build_admin_page(route)
        if content is None:
            print(f"⚠️ Unknown route {route}, going to dashboard")
            page.go(HOME_ROUTE)
            return

        page.add(admin_layout(page, gate.session, content, on_logout=logout))
        page.update()

    def on_disconnect(e):
        pollers.stop_all()

    page.on_route_change = route_change
    page.on_disconnect = on_disconnect
    page.go(HOME_ROUTE)


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    ft.app(target=main, assets_dir="assets")
