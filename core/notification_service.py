"""
New-order notifications for the dashboard.

Polls the restaurant's orders, counts ids it has not seen before and raises
the alarm when there are any. The first check only records a baseline.
"""
import threading
from datetime import datetime
from typing import Optional

from core.poller import Poller


class OrderNotifier:

    def __init__(self, api, restaurant_id: str, poll_interval: float = 15, on_change=None):
        self.api = api
        self.restaurant_id = restaurant_id
        self.poll_interval = poll_interval
        self.on_change = on_change

        self.new_orders_count = 0
        self.is_playing = False
        self.last_check_time: Optional[datetime] = None

        self._known_ids = None
        self._lock = threading.Lock()
        self._poller = Poller(poll_interval, self.check, name=f"order-notifier[{restaurant_id}]")

    def check(self) -> int:
        """One poll. Returns how many new orders were found."""
        try:
            orders = self.api.get_orders_by_restaurant(self.restaurant_id)
        except Exception as ex:
            print(f"⚠️ New order check failed: {ex}")
            return 0

        ids = {order["id"] for order in orders}
        with self._lock:
            if self._known_ids is None:
                fresh = set()
                self._known_ids = ids
            else:
                fresh = ids - self._known_ids
                self._known_ids |= ids
            if fresh:
                self.new_orders_count += len(fresh)
                self.is_playing = True
            self.last_check_time = datetime.now()

        if fresh:
            print(f"🔔 {len(fresh)} new order(s) for {self.restaurant_id}")
        self._notify()
        return len(fresh)

    def stop_alarm(self):
        with self._lock:
            self.is_playing = False
        self._notify()

    def reset_new_orders_count(self):
        with self._lock:
            self.new_orders_count = 0
        self._notify()

    def acknowledge(self):
        """'Seen' button: clear the counter and silence the alarm."""
        with self._lock:
            self.new_orders_count = 0
            self.is_playing = False
        self._notify()

    def _notify(self):
        if self.on_change:
            self.on_change(self)

    @property
    def poller(self) -> Poller:
        return self._poller

    def start(self):
        self._poller.start()
        return self

    def stop(self):
        self._poller.stop()
