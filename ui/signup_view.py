import flet as ft

from core.db import SessionLocal
from core.auth_gate import LOGIN_ROUTE
from core.auth_service import create_admin, issue_token, session_user
from core.logger import log_action
from ui.admin_utils import is_valid_email
from ui.login_view import form_field, FORM_WIDTH, YELLOW, WHITE, DARK_GRAY, DARK_BG


def signup_view(page: ft.Page, gate):
    page.title = "Sign Up - Restaurant Admin"

    name = form_field("Full Name", "Enter your Full Name", ft.Icons.PERSON_OUTLINE)
    email = form_field("Email Address", "Enter your Email", ft.Icons.EMAIL_OUTLINED)
    restaurant_name = form_field("Restaurant Name", "e.g. Ay Wey", ft.Icons.STOREFRONT)
    restaurant_id = form_field("Restaurant ID", "e.g. ay-wey", ft.Icons.TAG)
    password = form_field("Password", "Create a Password", ft.Icons.LOCK_OUTLINE, password=True)
    confirm = form_field("Confirm Password", "Repeat the Password", ft.Icons.LOCK_OUTLINE, password=True)
    message = ft.Text(value="", color="red", size=12, text_align=ft.TextAlign.CENTER)

    def fail(text):
        message.value = text
        page.update()

    def handle_signup(e):
        if not is_valid_email((email.value or "").strip()):
            fail("Please enter a valid email")
            return
        if (password.value or "") != (confirm.value or ""):
            fail("Passwords do not match")
            return

        db = SessionLocal()
        try:
            admin, status = create_admin(
                db,
                name=name.value,
                email=email.value,
                password=password.value,
                restaurant_id=restaurant_id.value,
                restaurant_name=restaurant_name.value
            )
        except Exception as ex:
            print("Signup error:", ex)
            db.rollback()
            fail("An error occurred during sign up.")
            return
        finally:
            db.close()

        if not admin:
            fail(status)
            return

        target = gate.login(issue_token(), session_user(admin))
        log_action(admin.email, f"Created admin account for {admin.restaurant_id}")
        page.open(ft.SnackBar(ft.Text(f"Welcome, {admin.name}!"), bgcolor=ft.Colors.GREEN))
        page.go(target)

    signup_btn = ft.Container(
        content=ft.Text("Create Account", size=18, weight="bold", color=WHITE),
        width=FORM_WIDTH,
        height=50,
        bgcolor=YELLOW,
        border_radius=12,
        alignment=ft.alignment.center,
        on_click=handle_signup,
        ink=True
    )
    login_row = ft.Row([
        ft.Text("Already have an account?", size=13, color=DARK_GRAY),
        ft.Container(
            content=ft.Text("Sign In", size=13, color=YELLOW, weight="bold"),
            on_click=lambda e: page.go(LOGIN_ROUTE),
            ink=True
        )
    ], spacing=5, alignment=ft.MainAxisAlignment.CENTER)

    page.add(
        ft.Container(
            content=ft.Column([
                ft.Container(height=30),
                ft.Text("Create your admin account", size=22, weight="bold", color=WHITE),
                ft.Container(height=20),
                name,
                email,
                restaurant_name,
                restaurant_id,
                password,
                confirm,
                ft.Container(height=12),
                signup_btn,
                message,
                login_row,
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            scroll=ft.ScrollMode.AUTO,
            spacing=8
            ),
            expand=True,
            padding=ft.padding.symmetric(horizontal=25),
            bgcolor=DARK_BG,
            alignment=ft.alignment.center
        )
    )
    page.update()
