"""
Tests for the dashboard aggregates.
"""
from core.analytics_service import active_order_count, compute_analytics, partition_by_delivery, preview


def test_revenue_and_average_scenario(make_order):
    orders = [make_order(1, "pending", "dine_in", 10000), make_order(2, "ready", "pickup", 25000)]

    analytics = compute_analytics(orders)

    assert analytics["total_orders"] == 2
    assert analytics["total_revenue"] == 35000
    assert analytics["avg_order_value"] == 17500
    assert analytics["orders_by_status"] == {"pending": 1, "ready": 1}
    assert analytics["orders_by_type"] == {"DINE_IN": 1, "DELIVERY": 0, "PICKUP": 1}
    assert analytics["period_days"] == 7


def test_empty_list_has_zero_average():
    analytics = compute_analytics([])

    assert analytics["avg_order_value"] == 0
    assert analytics["total_revenue"] == 0
    assert analytics["orders_by_type"] == {"DINE_IN": 0, "DELIVERY": 0, "PICKUP": 0}
    assert analytics["orders_by_status"] == {}


def test_bucket_counts_sum_to_order_count(make_order):
    orders = [
        make_order(1, "pending", "dine_in", 100),
        make_order(2, "pending", "delivery", 200),
        make_order(3, "cancelled", "delivery", 300),
        make_order(4, "delivered", "pickup", 400),
        make_order(5, "PREPARING", "DINE_IN", 500),
    ]

    analytics = compute_analytics(orders)

    assert sum(analytics["orders_by_type"].values()) == len(orders)
    assert sum(analytics["orders_by_status"].values()) == len(orders)
    assert analytics["avg_order_value"] == 300
    # upper-case input is folded into the canonical key
    assert analytics["orders_by_status"]["preparing"] == 1


def test_partition_keeps_order_within_each_group(make_order):
    orders = [
        make_order(1, method="delivery"),
        make_order(2, method="dine_in"),
        make_order(3, method="delivery"),
    ]

    groups = partition_by_delivery(orders)

    assert [o["id"] for o in groups["delivery"]] == [1, 3]
    assert [o["id"] for o in groups["dine_in"]] == [2]
    assert groups["pickup"] == []
    assert active_order_count(groups) == 3


def test_preview_is_capped(make_order):
    orders = [make_order(i) for i in range(8)]

    assert [o["id"] for o in preview(orders)] == [0, 1, 2, 3, 4]
    assert preview(orders[:2], limit=5) == orders[:2]


def test_unknown_values_do_not_break_aggregates(make_order):
    odd = make_order(1, total=100)
    odd["status"] = "ON_HOLD"
    stray = make_order(2, total=300)
    stray["delivery_method"] = "drone"

    analytics = compute_analytics([odd, stray])

    assert analytics["orders_by_status"] == {"on_hold": 1, "pending": 1}
    # an unknown delivery method is left out of the fixed buckets
    assert analytics["orders_by_type"] == {"DINE_IN": 1, "DELIVERY": 0, "PICKUP": 0}
    assert analytics["total_orders"] == 2
    assert analytics["avg_order_value"] == 200
    groups = partition_by_delivery([odd, stray])
    assert groups["dine_in"] == [odd]
    assert active_order_count(groups) == 1
