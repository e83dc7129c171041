"""
Tests for the dashboard snapshot and the new-order notifier.
"""
from core.dashboard_controller import LOAD_ERROR, DashboardController
from core.notification_service import OrderNotifier


def test_refresh_recomputes_analytics_and_groups(fake_api):
    controller = DashboardController(fake_api, "ay-wey")

    assert controller.refresh()

    state = controller.state
    assert state.analytics["total_revenue"] == 35000
    assert state.analytics["avg_order_value"] == 17500
    assert [o["id"] for o in state.groups["dine_in"]] == [1]
    assert [o["id"] for o in state.groups["pickup"]] == [2]
    assert state.groups["delivery"] == []
    assert controller.active_orders() == 2
    assert state.last_refresh is not None
    assert not state.loading


def test_refresh_failure_keeps_last_snapshot(fake_api, make_order):
    controller = DashboardController(fake_api, "ay-wey")
    controller.refresh()
    fake_api.orders.append(make_order(3, total=5000))
    fake_api.fail_on.add("get_orders_by_restaurant")

    assert not controller.refresh()

    assert controller.state.error == LOAD_ERROR
    assert controller.state.analytics["total_orders"] == 2


def test_error_clears_on_next_successful_refresh(fake_api):
    controller = DashboardController(fake_api, "ay-wey")
    fake_api.fail_on.add("get_orders_by_restaurant")
    controller.refresh()
    fake_api.fail_on.clear()

    controller.refresh()

    assert controller.state.error == ""


def test_previews_show_at_most_limit(fake_api, make_order):
    fake_api.orders = [make_order(i, method="delivery") for i in range(7)]
    controller = DashboardController(fake_api, "ay-wey", preview_limit=5)
    controller.refresh()

    previews = controller.previews()

    assert len(previews["delivery"]) == 5
    assert len(controller.state.groups["delivery"]) == 7


def test_first_check_is_baseline(fake_api):
    notifier = OrderNotifier(fake_api, "ay-wey", poll_interval=15)

    assert notifier.check() == 0

    assert notifier.new_orders_count == 0
    assert not notifier.is_playing
    assert notifier.last_check_time is not None


def test_new_orders_raise_alarm(fake_api, make_order):
    changes = []
    notifier = OrderNotifier(fake_api, "ay-wey", poll_interval=15, on_change=changes.append)
    notifier.check()
    fake_api.orders += [make_order(3), make_order(4)]

    assert notifier.check() == 2
    assert notifier.check() == 0

    assert notifier.new_orders_count == 2
    assert notifier.is_playing
    assert len(changes) == 3


def test_stop_alarm_keeps_count_and_acknowledge_resets(fake_api, make_order):
    notifier = OrderNotifier(fake_api, "ay-wey", poll_interval=15)
    notifier.check()
    fake_api.orders.append(make_order(3))
    notifier.check()

    notifier.stop_alarm()
    assert not notifier.is_playing
    assert notifier.new_orders_count == 1

    notifier.reset_new_orders_count()
    assert notifier.new_orders_count == 0

    fake_api.orders.append(make_order(4))
    notifier.check()
    notifier.acknowledge()
    assert notifier.new_orders_count == 0
    assert not notifier.is_playing


def test_failed_check_leaves_counters(fake_api, make_order):
    notifier = OrderNotifier(fake_api, "ay-wey", poll_interval=15)
    notifier.check()
    fake_api.orders.append(make_order(3))
    notifier.check()
    fake_api.fail_on.add("get_orders_by_restaurant")

    assert notifier.check() == 0
    assert notifier.new_orders_count == 1
    assert notifier.is_playing


def test_unknown_status_is_counted_under_its_own_key(fake_api, make_order):
    odd = make_order(3, total=5000)
    odd["status"] = "on_hold"
    fake_api.orders.append(odd)
    controller = DashboardController(fake_api, "ay-wey")

    assert controller.refresh()

    assert controller.state.analytics["orders_by_status"] == {"pending": 1, "ready": 1, "on_hold": 1}
    assert controller.state.error == ""


def test_unreadable_order_fails_refresh_and_keeps_snapshot(fake_api, make_order):
    controller = DashboardController(fake_api, "ay-wey")
    controller.refresh()
    broken = make_order(3)
    del broken["total"]
    fake_api.orders.append(broken)

    assert not controller.refresh()

    assert controller.state.error == LOAD_ERROR
    assert controller.state.analytics["total_orders"] == 2
