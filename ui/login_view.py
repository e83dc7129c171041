import flet as ft

from core.db import SessionLocal
from core.auth_gate import SIGNUP_ROUTE
from core.auth_service import authenticate_admin, issue_token, session_user
from core.logger import log_action

# ===== BRAND COLORS =====
YELLOW = "#CA8A04"
LIGHT_GRAY = "#D9D9D9"
DARK_GRAY = "#9CA3AF"
WHITE = "#FFFFFF"
DARK_BG = "#111827"

FORM_WIDTH = 350


def form_field(label, hint, icon, password=False):
    """Text field shared by the login and signup forms."""
    return ft.TextField(
        label=label,
        label_style=ft.TextStyle(color="#000000"),
        hint_text=hint,
        hint_style=ft.TextStyle(color="#555555"),
        color="#000000",
        password=password,
        can_reveal_password=password,
        width=FORM_WIDTH,
        border_radius=12,
        filled=True,
        bgcolor=LIGHT_GRAY,
        border_color="transparent",
        focused_border_color=YELLOW,
        prefix_icon=icon,
        text_size=14,
        height=55
    )


def login_view(page: ft.Page, gate):
    page.title = "Login - Restaurant Admin"

    email = form_field("Email Address", "Enter your Email", ft.Icons.EMAIL_OUTLINED)
    password = form_field("Password", "Enter your Password", ft.Icons.LOCK_OUTLINE, password=True)
    message = ft.Text(value="", color="red", size=12, text_align=ft.TextAlign.CENTER)

    def handle_login(e):
        email_val = (email.value or "").strip()
        pwd_val = (password.value or "").strip()

        if not email_val or not pwd_val:
            message.value = "Please enter email and password"
            page.update()
            return

        db = SessionLocal()
        try:
            admin, status = authenticate_admin(db, email_val, pwd_val)
        except Exception as ex:
            print("Login error:", ex)
            message.value = "An error occurred during login."
            page.update()
            return
        finally:
            db.close()

        if not admin:
            message.value = status
            page.update()
            return

        target = gate.login(issue_token(), session_user(admin))
        log_action(admin.email, "Logged in")
        page.open(ft.SnackBar(ft.Text(f"Welcome, {admin.name}!"), bgcolor=ft.Colors.GREEN))
        page.go(target)

    password.on_submit = handle_login

    login_btn = ft.Container(
        content=ft.Text("Sign In", size=18, weight="bold", color=WHITE),
        width=FORM_WIDTH,
        height=50,
        bgcolor=YELLOW,
        border_radius=12,
        alignment=ft.alignment.center,
        on_click=handle_login,
        ink=True
    )
    signup_row = ft.Row([
        ft.Text("Don't have an account?", size=13, color=DARK_GRAY),
        ft.Container(
            content=ft.Text("Sign Up", size=13, color=YELLOW, weight="bold"),
            on_click=lambda e: page.go(SIGNUP_ROUTE),
            ink=True
        )
    ], spacing=5, alignment=ft.MainAxisAlignment.CENTER)

    page.add(
        ft.Container(
            content=ft.Column([
                ft.Container(height=40),
                ft.Text("Welcome back!", size=24, weight="bold", color=WHITE),
                ft.Text("Sign in to the restaurant admin panel", size=12, color=DARK_GRAY),
                ft.Container(height=25),
                email,
                ft.Container(height=8),
                password,
                ft.Container(height=20),
                login_btn,
                ft.Container(height=4),
                message,
                ft.Container(height=10),
                signup_row,
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            scroll=ft.ScrollMode.AUTO,
            spacing=0
            ),
            expand=True,
            padding=ft.padding.symmetric(horizontal=25),
            bgcolor=DARK_BG,
            alignment=ft.alignment.center
        )
    )
    page.update()
