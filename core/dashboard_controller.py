"""
Dashboard snapshot: analytics and delivery columns recomputed from the full
order list on every poll tick.
"""
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from core.analytics_service import active_order_count, compute_analytics, partition_by_delivery, preview
from core.config import DASHBOARD_PREVIEW_LIMIT

LOAD_ERROR = "Error loading dashboard data"


@dataclass
class DashboardState:
    restaurant_id: str
    analytics: Optional[dict] = None
    groups: dict = field(default_factory=lambda: {"dine_in": [], "delivery": [], "pickup": []})
    loading: bool = True
    error: str = ""
    last_refresh: Optional[datetime] = None


class DashboardController:

    def __init__(self, api, restaurant_id: str, preview_limit: int = DASHBOARD_PREVIEW_LIMIT):
        self.api = api
        self.preview_limit = preview_limit
        self.state = DashboardState(restaurant_id=restaurant_id)
        self._lock = threading.Lock()

    def refresh(self) -> bool:
        try:
            orders = self.api.get_orders_by_restaurant(self.state.restaurant_id)
            analytics = compute_analytics(orders)
            groups = partition_by_delivery(orders)
        except Exception as ex:
            print(f"❌ Dashboard refresh failed: {ex}")
            with self._lock:
                self.state.error = LOAD_ERROR
                self.state.loading = False
            return False

        with self._lock:
            self.state.analytics = analytics
            self.state.groups = groups
            self.state.error = ""
            self.state.loading = False
            self.state.last_refresh = datetime.now()
        return True

    def previews(self):
        """First few orders of each delivery column."""
        with self._lock:
            groups = self.state.groups
        return {key: preview(orders, self.preview_limit) for key, orders in groups.items()}

    def active_orders(self):
        with self._lock:
            return active_order_count(self.state.groups)
