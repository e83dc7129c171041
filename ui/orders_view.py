"""
Orders page: filterable order list with status actions and the add-product form
"""
import threading
import flet as ft
from core.errors import ActionError, ValidationError
from core.order_status import DeliveryMethod, OrderStatus, next_status_options
from core.orders_controller import OrdersController
from ui.admin_constants import (
    STATUS_LABELS, STATUS_COLORS, DELIVERY_LABELS, DELIVERY_ICONS,
    YELLOW, CARD_BG
)
from ui.admin_utils import format_currency, format_time_elapsed, show_alert, error_banner

ALL_STATUSES = "all"


def orders_view(page: ft.Page, api, store, delivery_method: DeliveryMethod = None):
    """
    Build the order list page

    Args:
        page: Flet page object
        api: OrderApi used for every fetch and mutation
        store: SessionStore, read on each load for the restaurant id
        delivery_method: Only show this delivery method (/admin/orders/<slug>)

    Returns:
        ft.Control: Page content for the admin layout
    """
    controller = OrdersController(api, store)
    controller.set_delivery_filter(delivery_method)
    state = controller.state

    summary = ft.Text("", size=13, color="grey400")
    banner_slot = ft.Container()
    orders_list = ft.Column(spacing=12, scroll=ft.ScrollMode.AUTO, expand=True)

    # ===================== CARD BUILDER =====================

    def badge(text, color):
        return ft.Container(
            content=ft.Text(text, color="white", size=12, weight="bold"),
            bgcolor=color,
            padding=ft.padding.symmetric(horizontal=8, vertical=4),
            border_radius=12
        )

    def fulfilment_line(order):
        method = order["delivery_method"]
        if method is DeliveryMethod.DINE_IN and order["table_number"]:
            return ft.Text(f"Table {order['table_number']}", size=13, color="grey300")
        if method is DeliveryMethod.DELIVERY and order["delivery_address"]:
            return ft.Text(f"📍 {order['delivery_address']}", size=13, color="grey300")
        if method is DeliveryMethod.PICKUP:
            return ft.Text("Customer picks up at the counter", size=13, color="grey300")
        return ft.Container()

    def build_order_card(order):
        order_id = order["id"]
        status = order["status"]
        customer = order["customer"]
        updating = controller.is_updating(order_id)
        adding = controller.is_adding_product(order_id)

        customer_info = [
            ft.Text(customer["name"], size=14, weight="bold", color="white"),
            ft.Text(f"📞 {customer['phone']}", size=12, color="grey400"),
        ]
        if customer.get("email"):
            customer_info.append(ft.Text(f"✉️ {customer['email']}", size=12, color="grey400"))

        product_rows = [
            ft.Row([
                ft.Text(f"{item['quantity']}x {item['name']}", size=13, color="grey200"),
                ft.Text(format_currency(item["price"] * item["quantity"]), size=13, color="grey200")
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN)
            for item in order["products"]
        ]

        status_buttons = [
            ft.ElevatedButton(
                STATUS_LABELS[target],
                on_click=lambda e, t=target: change_status(order_id, t),
                disabled=updating,
                bgcolor=STATUS_COLORS[target],
                color="white",
                height=35
            )
            for target in next_status_options(status)
        ]

        product_picker = ft.Dropdown(
            hint_text="Select product...",
            options=[
                ft.dropdown.Option(key=str(p["id"]), text=f"{p['name']} - {format_currency(p['price'])}")
                for p in state.products
            ],
            on_change=lambda e: controller.select_product(e.control.value),
            disabled=adding,
            width=260,
            dense=True
        )
        quantity_field = ft.TextField(
            value="1",
            width=70,
            dense=True,
            keyboard_type=ft.KeyboardType.NUMBER,
            on_change=lambda e: controller.set_quantity(e.control.value),
            disabled=adding
        )
        add_form = ft.Row([
            product_picker,
            quantity_field,
            ft.ElevatedButton(
                "Adding..." if adding else "Add",
                on_click=lambda e: add_product(order_id),
                disabled=adding,
                bgcolor=YELLOW,
                color="black",
                height=35
            )
        ], spacing=8, wrap=True)

        return ft.Container(
            content=ft.Column([
                # Header: id, status, delivery method, age
                ft.Row([
                    ft.Row([
                        ft.Text(f"Order #{order_id}", weight="bold", size=16, color="white"),
                        badge(STATUS_LABELS.get(status, str(status)), STATUS_COLORS.get(status, "grey700")),
                        badge(
                            f"{DELIVERY_ICONS[order['delivery_method']]} {DELIVERY_LABELS[order['delivery_method']]}",
                            "grey700"
                        ),
                    ], spacing=8, wrap=True),
                    ft.Text(format_time_elapsed(order["created_at"]), size=12, color="grey400")
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                # Customer + fulfilment
                ft.Row([
                    ft.Column(customer_info, spacing=2, expand=True),
                    ft.Column([fulfilment_line(order)], expand=True)
                ], vertical_alignment=ft.CrossAxisAlignment.START),
                ft.Divider(height=1, color="grey700"),
                ft.Column(product_rows, spacing=4),
                ft.Row([
                    ft.Text("Total", size=14, weight="bold", color="white"),
                    ft.Text(format_currency(order["total"]), size=16, weight="bold", color="green400")
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                ft.Row(status_buttons, spacing=8, wrap=True),
                ft.Text("Add product to order", size=12, color="grey400"),
                add_form
            ], spacing=8),
            padding=15,
            bgcolor=CARD_BG,
            border_radius=12
        )

    # ===================== RENDER =====================

    def render():
        summary.value = controller.summary_line()
        banner_slot.content = error_banner(state.error)
        orders_list.controls.clear()

        orders = controller.visible_orders()
        if state.loading and not orders:
            orders_list.controls.append(
                ft.Container(content=ft.ProgressRing(color=YELLOW), alignment=ft.alignment.center, padding=40)
            )
        elif not orders:
            if state.status_filter:
                empty_text = f'No orders found with status "{STATUS_LABELS[state.status_filter]}"'
            else:
                empty_text = "No orders available right now"
            orders_list.controls.append(
                ft.Container(
                    content=ft.Column([
                        ft.Icon(ft.Icons.RECEIPT_LONG_OUTLINED, size=60, color="grey"),
                        ft.Text(empty_text, size=14, color="grey400")
                    ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=10),
                    padding=40,
                    alignment=ft.alignment.center
                )
            )
        else:
            for order in orders:
                orders_list.controls.append(build_order_card(order))
        page.update()

    def load():
        render()
        controller.load_data()
        render()

    # ===================== ACTIONS =====================

    def change_status(order_id, new_status):
        try:
            controller.update_order_status(order_id, new_status, on_started=render)
        except (ActionError, ValidationError) as ex:
            render()
            show_alert(page, "Could not update order", str(ex))
            return
        page.open(ft.SnackBar(
            ft.Text(f"✅ Order #{order_id} → {STATUS_LABELS[OrderStatus.parse(new_status)]}"),
            bgcolor=ft.Colors.GREEN
        ))
        render()

    def add_product(order_id):
        try:
            controller.add_product_to_order(order_id, on_started=render)
        except (ActionError, ValidationError) as ex:
            render()
            show_alert(page, "Could not add product", str(ex))
            return
        page.open(ft.SnackBar(ft.Text(f"✅ Product added to order #{order_id}")))
        render()

    def on_filter_change(e):
        value = e.control.value
        controller.set_status_filter(None if value == ALL_STATUSES else value)
        threading.Thread(target=load, daemon=True).start()

    status_dropdown = ft.Dropdown(
        value=ALL_STATUSES,
        options=[ft.dropdown.Option(key=ALL_STATUSES, text="All statuses")] + [
            ft.dropdown.Option(key=s.value, text=STATUS_LABELS[s]) for s in OrderStatus
        ],
        on_change=on_filter_change,
        width=200,
        dense=True
    )

    title = "Orders"
    if delivery_method is not None:
        title = f"{DELIVERY_ICONS[delivery_method]} {DELIVERY_LABELS[delivery_method]} orders"

    content = ft.Column([
        ft.Row([
            ft.Column([
                ft.Text(title, size=18, weight="bold", color="white"),
                summary
            ], spacing=2),
            ft.Row([
                status_dropdown,
                ft.ElevatedButton(
                    "🔄 Refresh",
                    on_click=lambda e: load(),
                    bgcolor=YELLOW,
                    color="black"
                )
            ], spacing=8)
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN, wrap=True),
        banner_slot,
        orders_list
    ], expand=True, spacing=12)

    # Initial load runs after the layout is on screen
    threading.Thread(target=load, daemon=True).start()
    return content
