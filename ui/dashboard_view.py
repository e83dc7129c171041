import flet as ft
from flet.plotly_chart import PlotlyChart
import plotly.graph_objects as go
from core.config import DASHBOARD_POLL_INTERVAL, NOTIFICATION_POLL_INTERVAL, ALARM_SOUND_URL
from core.dashboard_controller import DashboardController
from core.notification_service import OrderNotifier
from core.order_status import DeliveryMethod
from core.poller import Poller
from ui.admin_constants import (
    STATUS_LABELS, STATUS_COLORS, DELIVERY_LABELS, DELIVERY_ICONS,
    BREAKPOINT, YELLOW, CARD_BG
)
from ui.admin_utils import format_currency, format_time_elapsed, error_banner

# Dashboard column key -> delivery method
COLUMNS = [
    ("dine_in", DeliveryMethod.DINE_IN),
    ("delivery", DeliveryMethod.DELIVERY),
    ("pickup", DeliveryMethod.PICKUP),
]


def dashboard_view(page: ft.Page, api, session, pollers):
    """
    Live dashboard: summary cards, orders per delivery method and the
    new-order alarm. Both pollers are handed to `pollers` so the router
    stops them when the admin leaves the page.
    """
    restaurant_id = session.restaurant_id
    is_desktop = (page.window.width or 0) > BREAKPOINT
    controller = DashboardController(api, restaurant_id)
    state = controller.state

    alarm = ft.Audio(src=ALARM_SOUND_URL, autoplay=False)
    page.overlay.append(alarm)

    # ===================== NOTIFICATION PANEL =====================

    new_orders_badge = ft.Container(visible=False, border_radius=8, padding=ft.padding.symmetric(horizontal=12, vertical=6))
    last_check_text = ft.Text("", size=12, color="grey400")
    silence_btn = ft.ElevatedButton("🔇 Silence", visible=False, bgcolor="red600", color="white")
    seen_btn = ft.ElevatedButton("✅ Seen", visible=False, bgcolor="green600", color="white")

    def render_notifications(notifier):
        count = notifier.new_orders_count
        new_orders_badge.visible = count > 0
        plural = "s" if count > 1 else ""
        new_orders_badge.content = ft.Text(f"{count} new order{plural}", weight="bold",
                                           color="white" if notifier.is_playing else "black")
        new_orders_badge.bgcolor = "red600" if notifier.is_playing else YELLOW
        if notifier.last_check_time:
            last_check_text.value = f"Last check: {notifier.last_check_time:%H:%M:%S}"
        silence_btn.visible = notifier.is_playing
        seen_btn.visible = count > 0
        try:
            if notifier.is_playing:
                alarm.play()
            else:
                alarm.pause()
        except Exception as ex:
            # Audio is optional, e.g. not yet mounted
            print(f"⚠️ Alarm playback error: {ex}")
        page.update()

    notifier = OrderNotifier(api, restaurant_id, NOTIFICATION_POLL_INTERVAL, on_change=render_notifications)
    silence_btn.on_click = lambda e: notifier.stop_alarm()
    seen_btn.on_click = lambda e: notifier.acknowledge()

    notification_panel = ft.Container(
        content=ft.Column([
            ft.Row([
                ft.Row([
                    ft.Icon(ft.Icons.NOTIFICATIONS_ACTIVE, color=YELLOW),
                    ft.Text("Order notifications", size=16, weight="bold", color="white"),
                    new_orders_badge,
                    last_check_text
                ], spacing=10, wrap=True),
                ft.Row([silence_btn, seen_btn], spacing=8)
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN, wrap=True),
            ft.Text(
                f"New orders are checked every {NOTIFICATION_POLL_INTERVAL} seconds and an alarm plays when one arrives.",
                size=12, color="grey400"
            )
        ], spacing=6),
        bgcolor=CARD_BG,
        border_radius=12,
        padding=15
    )

    # ===================== SUMMARY CARDS =====================

    def summary_card(value, label, color):
        return ft.Container(
            content=ft.Column([
                ft.Text(value, size=26, weight="bold", color="white"),
                ft.Text(label, size=12, color="grey400"),
            ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=3, alignment=ft.MainAxisAlignment.CENTER),
            padding=12, bgcolor=color, border_radius=8, expand=1, height=100
        )

    cards_slot = ft.Container()
    chart_slot = ft.Container(bgcolor="white", border_radius=8, padding=12)
    banner_slot = ft.Container()
    columns_slot = ft.Container()

    def build_cards(analytics):
        analytics = analytics or {"total_revenue": 0, "avg_order_value": 0, "total_orders": 0}
        cards = [
            summary_card(str(controller.active_orders()), "Active orders", "blue900"),
            summary_card(format_currency(analytics["total_revenue"]), "Total revenue", "green900"),
            summary_card(format_currency(analytics["avg_order_value"]), "Average per order", "orange900"),
            summary_card(str(analytics["total_orders"]), "Total orders", "purple900"),
        ]
        if is_desktop:
            return ft.Row(cards, spacing=8)
        return ft.Column([ft.Row(cards[:2], spacing=8), ft.Row(cards[2:], spacing=8)], spacing=8)

    def build_chart(analytics):
        if not analytics or not analytics["total_orders"]:
            return ft.Container(
                content=ft.Text("No orders yet", size=14, color="grey"),
                alignment=ft.alignment.center,
                padding=30
            )
        by_type = analytics["orders_by_type"]
        by_status = analytics["orders_by_status"]
        fig = go.Figure()
        fig.add_trace(go.Bar(
            x=[DELIVERY_LABELS[m] for _, m in COLUMNS],
            y=[by_type[m.name] for _, m in COLUMNS],
            marker=dict(color=[YELLOW, "#2196F3", "#4CAF50"]),
            text=[by_type[m.name] for _, m in COLUMNS],
            textposition="auto",
            name="By delivery method"
        ))
        fig.update_layout(
            title=dict(text=f"Orders by delivery method ({len(by_status)} statuses in use)", font=dict(size=14)),
            height=280 if is_desktop else 220,
            margin=dict(l=40, r=20, t=40, b=40),
            font=dict(size=10)
        )
        return PlotlyChart(fig, expand=True)

    # ===================== DELIVERY COLUMNS =====================

    def build_preview_row(order):
        status = order["status"]
        return ft.Container(
            content=ft.Row([
                ft.Column([
                    ft.Text(f"#{order['id']} · {order['customer']['name']}", size=13, weight="bold", color="white"),
                    ft.Text(f"{format_currency(order['total'])} · {format_time_elapsed(order['created_at'])}",
                            size=12, color="grey400"),
                ], spacing=2, expand=True),
                ft.Container(
                    content=ft.Text(STATUS_LABELS.get(status, str(status)), size=11, color="white"),
                    bgcolor=STATUS_COLORS.get(status, "grey700"),
                    padding=ft.padding.symmetric(horizontal=8, vertical=3),
                    border_radius=10
                )
            ]),
            padding=8,
            border=ft.border.all(1, "grey800"),
            border_radius=8
        )

    def build_column(key, method):
        orders = state.groups.get(key, [])
        shown = controller.previews()[key]
        rows = [build_preview_row(o) for o in shown] or [
            ft.Text(f"No {DELIVERY_LABELS[method].lower()} orders", size=12, color="grey500")
        ]
        return ft.Container(
            content=ft.Column([
                ft.Row([
                    ft.Text(f"{DELIVERY_ICONS[method]} {DELIVERY_LABELS[method]} ({len(orders)})",
                            size=15, weight="bold", color="white"),
                    ft.TextButton("View all →", on_click=lambda e, m=method: page.go(f"/admin/orders/{m.slug}"))
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                ft.Column(rows, spacing=6)
            ], spacing=8),
            bgcolor=CARD_BG,
            border_radius=12,
            padding=12,
            expand=1
        )

    # ===================== REFRESH =====================

    def refresh():
        controller.refresh()
        banner_slot.content = error_banner(state.error)
        cards_slot.content = build_cards(state.analytics)
        chart_slot.content = build_chart(state.analytics)
        columns = [build_column(key, method) for key, method in COLUMNS]
        columns_slot.content = ft.Row(columns, spacing=12, vertical_alignment=ft.CrossAxisAlignment.START) \
            if is_desktop else ft.Column(columns, spacing=12)
        page.update()

    cards_slot.content = build_cards(None)
    columns_slot.content = ft.Container(content=ft.ProgressRing(color=YELLOW), alignment=ft.alignment.center, padding=40)

    pollers.add(Poller(DASHBOARD_POLL_INTERVAL, refresh, name=f"dashboard[{restaurant_id}]")).start()
    pollers.add(notifier.poller)
    notifier.start()

    return ft.Column([
        notification_panel,
        banner_slot,
        cards_slot,
        chart_slot,
        columns_slot,
        ft.Container(height=20)
    ], spacing=12, expand=True, scroll=ft.ScrollMode.AUTO)
