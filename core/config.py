# core/config.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///restaurant_admin.db")

DEFAULT_RESTAURANT_ID = os.getenv("DEFAULT_RESTAURANT_ID", "ay-wey")
DEFAULT_RESTAURANT_NAME = os.getenv("DEFAULT_RESTAURANT_NAME", "Ay Wey")

# Seconds between polls of the order list / new-order check
DASHBOARD_POLL_INTERVAL = int(os.getenv("DASHBOARD_POLL_INTERVAL", "15"))
NOTIFICATION_POLL_INTERVAL = int(os.getenv("NOTIFICATION_POLL_INTERVAL", "15"))
DASHBOARD_PREVIEW_LIMIT = int(os.getenv("DASHBOARD_PREVIEW_LIMIT", "5"))

ALARM_SOUND_URL = os.getenv("ALARM_SOUND_URL", "assets/sounds/new_order.mp3")
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")

ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin Ay Wey")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@aywey.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
