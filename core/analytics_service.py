from collections import defaultdict

from core.order_status import DeliveryMethod, OrderStatus, check_exhaustive

ANALYTICS_PERIOD_DAYS = 7

# Keys of the fixed delivery buckets in the analytics payload
TYPE_BUCKETS = check_exhaustive({
    DeliveryMethod.DINE_IN: "DINE_IN",
    DeliveryMethod.DELIVERY: "DELIVERY",
    DeliveryMethod.PICKUP: "PICKUP",
}, DeliveryMethod, "analytics type buckets")

# Keys of the dashboard column groups
GROUP_KEYS = check_exhaustive({
    DeliveryMethod.DINE_IN: "dine_in",
    DeliveryMethod.DELIVERY: "delivery",
    DeliveryMethod.PICKUP: "pickup",
}, DeliveryMethod, "dashboard group keys")


def status_key(status):
    """Canonical status string, or the raw value lower-cased if it is not a known status."""
    try:
        return OrderStatus.parse(status).value
    except ValueError:
        return str(status).strip().lower()


def delivery_method_of(order):
    """The order's DeliveryMethod, or None (logged) when it does not parse."""
    try:
        return DeliveryMethod.parse(order["delivery_method"])
    except ValueError:
        print(f"⚠️ Order #{order.get('id')} has unknown delivery method {order['delivery_method']!r}, skipped")
        return None


def compute_analytics(orders):
    """
    Summary of an order snapshot for the dashboard cards.
    Returns: dict with totals, average and per-type / per-status counts
    """
    total_revenue = sum(order["total"] for order in orders)
    avg_order_value = total_revenue / len(orders) if orders else 0

    by_type = {bucket: 0 for bucket in TYPE_BUCKETS.values()}
    by_status = defaultdict(int)

    for order in orders:
        by_status[status_key(order["status"])] += 1
        method = delivery_method_of(order)
        if method is not None:
            by_type[TYPE_BUCKETS[method]] += 1

    return {
        "total_orders": len(orders),
        "total_revenue": total_revenue,
        "avg_order_value": avg_order_value,
        "orders_by_type": by_type,
        "orders_by_status": dict(by_status),
        "period_days": ANALYTICS_PERIOD_DAYS
    }


def partition_by_delivery(orders):
    """Split a snapshot into the three dashboard columns, keeping order."""
    groups = {key: [] for key in GROUP_KEYS.values()}
    for order in orders:
        method = delivery_method_of(order)
        if method is not None:
            groups[GROUP_KEYS[method]].append(order)
    return groups


def preview(orders, limit=5):
    return list(orders[:limit])


def active_order_count(groups):
    return sum(len(group) for group in groups.values())
