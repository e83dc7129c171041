"""
Admin chrome: sidebar navigation, header and the content slot
"""
import flet as ft
from ui.admin_constants import (
    BREAKPOINT, SIDEBAR_WIDTH, NAV_ITEMS, PAGE_TITLES,
    YELLOW, LIGHT_YELLOW, DARK_BG, CARD_BG
)
from ui.admin_utils import format_long_date


def _is_active(route: str, target: str) -> bool:
    if target == "/admin/orders":
        return route.startswith("/admin/orders")
    return route == target


def admin_layout(page: ft.Page, session, content: ft.Control, on_logout):
    """
    Wrap a page's content in the admin chrome

    Args:
        page: Flet page object
        session: AdminSession of the logged in admin
        content: Control rendered in the content slot
        on_logout: Called when the admin clicks "Log out"

    Returns:
        ft.Control: Complete layout
    """
    route = page.route or ""
    is_desktop = (page.window.width or 0) > BREAKPOINT

    # ===================== SIDEBAR =====================

    def nav_link(target, label, icon_name):
        active = _is_active(route, target)
        return ft.Container(
            content=ft.Row([
                ft.Icon(getattr(ft.Icons, icon_name), color=YELLOW if active else "grey300", size=20),
                ft.Text(label, color=YELLOW if active else "grey300", weight="bold" if active else None)
            ], spacing=10),
            bgcolor=LIGHT_YELLOW if active else None,
            border_radius=8,
            padding=ft.padding.symmetric(horizontal=12, vertical=10),
            on_click=lambda e, t=target: page.go(t),
            ink=True
        )

    sidebar = ft.Container(
        content=ft.Column([
            # Restaurant
            ft.Container(
                content=ft.Column([
                    ft.Text(session.restaurant_name, size=20, weight="bold", color=YELLOW),
                    ft.Text("Admin Panel", size=12, color="grey400"),
                ], spacing=2),
                padding=ft.padding.only(bottom=10)
            ),
            ft.Divider(height=1, color="grey700"),
            # Admin
            ft.Container(
                content=ft.Column([
                    ft.Text(session.name, size=14, weight="bold", color="white"),
                    ft.Text(session.email, size=12, color="grey400"),
                ], spacing=2),
                padding=ft.padding.symmetric(vertical=10)
            ),
            ft.Divider(height=1, color="grey700"),
            ft.Column([nav_link(*item) for item in NAV_ITEMS], spacing=4, expand=True),
            ft.TextButton(
                "Log out",
                icon=ft.Icons.LOGOUT,
                on_click=lambda e: on_logout(),
                style=ft.ButtonStyle(color="red300")
            )
        ], spacing=8, expand=True),
        width=SIDEBAR_WIDTH,
        bgcolor=CARD_BG,
        padding=15,
        visible=is_desktop
    )

    def toggle_sidebar(e):
        sidebar.visible = not sidebar.visible
        page.update()

    # ===================== HEADER =====================

    title = PAGE_TITLES.get(route)
    if title is None and route.startswith("/admin/orders"):
        title = PAGE_TITLES["/admin/orders"]

    header = ft.Container(
        content=ft.Row([
            ft.Row([
                ft.IconButton(
                    icon=ft.Icons.MENU,
                    icon_color="white",
                    tooltip="Open menu",
                    on_click=toggle_sidebar,
                    visible=not is_desktop
                ),
                ft.Text(title or "", size=20, weight="bold", color="white"),
            ], spacing=5),
            ft.Text(format_long_date(), size=12, color="grey400")
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
        padding=ft.padding.only(top=15, left=15, right=15, bottom=8),
        bgcolor=CARD_BG
    )

    return ft.Container(
        content=ft.Row([
            sidebar,
            ft.Column([
                header,
                ft.Container(content=content, expand=True, padding=15)
            ], expand=True, spacing=0)
        ], expand=True, spacing=0, vertical_alignment=ft.CrossAxisAlignment.STRETCH),
        bgcolor=DARK_BG,
        expand=True,
        padding=0
    )
