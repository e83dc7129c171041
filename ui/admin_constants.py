"""
Shared constants for admin panel components
"""
from core.order_status import DeliveryMethod, OrderStatus, check_exhaustive

# ===== RESPONSIVE LAYOUT CONSTANTS =====
BREAKPOINT = 800  # Mobile vs Desktop threshold (px)
SIDEBAR_WIDTH = 240

# Grid spacing
GRID_SPACING = 10
GRID_RUN_SPACING = 10

# ===== BRAND COLORS =====
YELLOW = "#CA8A04"
LIGHT_YELLOW = "#FEF9C3"
DARK_BG = "#111827"
CARD_BG = "#1F2937"

# ===== ORDER STATUS =====
STATUS_LABELS = check_exhaustive({
    OrderStatus.PENDING: "Pending",
    OrderStatus.CONFIRMED: "Confirmed",
    OrderStatus.PREPARING: "Preparing",
    OrderStatus.READY: "Ready",
    OrderStatus.DELIVERED: "Delivered",
    OrderStatus.CANCELLED: "Cancelled",
}, OrderStatus, "status labels")

STATUS_COLORS = check_exhaustive({
    OrderStatus.PENDING: "yellow700",
    OrderStatus.CONFIRMED: "blue600",
    OrderStatus.PREPARING: "orange600",
    OrderStatus.READY: "green600",
    OrderStatus.DELIVERED: "grey600",
    OrderStatus.CANCELLED: "red600",
}, OrderStatus, "status colors")

# ===== DELIVERY METHOD =====
DELIVERY_LABELS = check_exhaustive({
    DeliveryMethod.DINE_IN: "Dine-in",
    DeliveryMethod.DELIVERY: "Delivery",
    DeliveryMethod.PICKUP: "Pickup",
}, DeliveryMethod, "delivery labels")

DELIVERY_ICONS = check_exhaustive({
    DeliveryMethod.DINE_IN: "🪑",
    DeliveryMethod.DELIVERY: "🚚",
    DeliveryMethod.PICKUP: "🏪",
}, DeliveryMethod, "delivery icons")

# ===== NAVIGATION =====
NAV_ITEMS = [
    ("/admin/dashboard", "Dashboard", "DASHBOARD"),
    ("/admin/orders", "Orders", "RECEIPT_LONG"),
    ("/admin/products", "Products", "RESTAURANT_MENU"),
]

PAGE_TITLES = {
    "/admin/dashboard": "Dashboard",
    "/admin/orders": "All Orders",
    "/admin/products": "Product Management",
}
