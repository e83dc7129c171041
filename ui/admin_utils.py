"""
Shared utility functions for admin panel
"""
import re
from datetime import datetime, date

import flet as ft

from core.config import CURRENCY_SYMBOL

def is_valid_email(email_str: str) -> bool:
    """Check if email format is valid"""
    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return re.match(pattern, email_str) is not None

def format_currency(amount) -> str:
    """Whole-unit amount with thousands separators, e.g. $35,000"""
    return f"{CURRENCY_SYMBOL}{round(amount or 0):,.0f}"

def format_time_elapsed(created_at: datetime, now: datetime = None) -> str:
    """Age of an order: '12 min' under an hour, '2h 5m' after that."""
    if created_at is None:
        return ""
    now = now or datetime.utcnow()
    minutes = max(0, int((now - created_at).total_seconds() // 60))
    if minutes < 60:
        return f"{minutes} min"
    return f"{minutes // 60}h {minutes % 60}m"

def format_long_date(day: date = None) -> str:
    """Header date, e.g. 'Monday, October 19, 2026'"""
    day = day or date.today()
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"

def close_dialog(page, dialog):
    """Close a dialog and update the page"""
    dialog.open = False
    page.update()

def show_alert(page, title: str, message: str):
    """Blocking alert for a failed action."""
    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text(title, weight="bold"),
        content=ft.Text(message),
        actions=[ft.TextButton("OK", on_click=lambda e: close_dialog(page, dlg))],
        actions_alignment=ft.MainAxisAlignment.END
    )
    page.overlay.append(dlg)
    dlg.open = True
    page.update()

def error_banner(message: str):
    """Inline banner for a failed load; stays until the next successful load."""
    return ft.Container(
        content=ft.Row([
            ft.Icon(ft.Icons.ERROR_OUTLINE, color="red200"),
            ft.Text(message, color="red200", size=13)
        ], spacing=8),
        bgcolor="#7F1D1D",
        border=ft.border.all(1, "red700"),
        border_radius=8,
        padding=12,
        visible=bool(message)
    )
