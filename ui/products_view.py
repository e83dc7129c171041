"""
Products page: read-only catalog of the restaurant
"""
import threading
import flet as ft
from ui.admin_constants import BREAKPOINT, GRID_SPACING, GRID_RUN_SPACING, YELLOW, CARD_BG
from ui.admin_utils import format_currency, error_banner


def products_view(page: ft.Page, api, session):
    is_desktop = (page.window.width or 0) > BREAKPOINT

    banner_slot = ft.Container()
    count_text = ft.Text("", size=13, color="grey400")
    products_grid = ft.GridView(
        runs_count=3,
        max_extent=360,
        child_aspect_ratio=3.0,
        spacing=GRID_SPACING,
        run_spacing=GRID_RUN_SPACING,
        expand=True
    ) if is_desktop else ft.Column(spacing=10, scroll=ft.ScrollMode.AUTO, expand=True)

    def build_product_card(product):
        return ft.Container(
            content=ft.Row([
                ft.Container(
                    content=ft.Icon(ft.Icons.RESTAURANT, size=26, color="grey500"),
                    width=50, height=50, bgcolor="grey800", border_radius=8,
                    alignment=ft.alignment.center
                ),
                ft.Column([
                    ft.Text(product["name"], weight="bold", size=15, color="white"),
                    ft.Text(product.get("category") or "Uncategorized", size=12, color="grey400"),
                    ft.Text(format_currency(product["price"]), color="green400", weight="bold"),
                ], spacing=3, expand=True)
            ], spacing=10, vertical_alignment=ft.CrossAxisAlignment.CENTER),
            padding=10,
            bgcolor=CARD_BG,
            border_radius=12
        )

    def load_products():
        products_grid.controls.clear()
        try:
            products = api.get_products(session.restaurant_id)["products"]
        except Exception as ex:
            print(f"❌ Error loading products: {ex}")
            banner_slot.content = error_banner("Error loading the product catalog")
            page.update()
            return
        banner_slot.content = None
        count_text.value = f"{session.restaurant_name} • {len(products)} products"
        for product in products:
            products_grid.controls.append(build_product_card(product))
        page.update()

    threading.Thread(target=load_products, daemon=True).start()

    return ft.Column([
        ft.Row([
            ft.Column([
                ft.Text("Catalog", size=18, weight="bold", color="white"),
                count_text
            ], spacing=2),
            ft.ElevatedButton("🔄 Refresh", on_click=lambda e: load_products(), bgcolor=YELLOW, color="black")
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
        banner_slot,
        products_grid
    ], expand=True, spacing=12)
