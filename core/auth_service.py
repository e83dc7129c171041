# core/auth_service.py
import bcrypt
import secrets
from sqlalchemy.orm import Session
from models.admin_user import AdminUser

MIN_PASSWORD_LENGTH = 6

def hash_password(password: str) -> str:
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False

def issue_token() -> str:
    """Opaque session token stored on the client."""
    return secrets.token_urlsafe(32)

def session_user(admin: AdminUser) -> dict:
    """Record stored under `admin_user` in the client storage."""
    return {
        "id": str(admin.id),
        "name": admin.name,
        "email": admin.email,
        "restaurant_id": admin.restaurant_id,
        "restaurant_name": admin.restaurant_name
    }

def create_admin(db: Session, name, email, password, restaurant_id, restaurant_name):
    """Return (admin, message). admin is None when the signup is rejected."""
    email = (email or "").strip().lower()
    if not all([name, email, password, restaurant_id, restaurant_name]):
        return None, "All fields are required."
    if len(password) < MIN_PASSWORD_LENGTH:
        return None, f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
    if db.query(AdminUser).filter(AdminUser.email == email).first():
        return None, "Email already registered."
    admin = AdminUser(name=name.strip(), email=email, password_hash=hash_password(password),
                      restaurant_id=restaurant_id.strip(), restaurant_name=restaurant_name.strip())
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin, "Account created."

def authenticate_admin(db: Session, email, password):
    """Return (admin, message). message is helpful for UI."""
    email = (email or "").strip().lower()
    admin = db.query(AdminUser).filter(AdminUser.email == email).first()
    if not admin or not verify_password(password or "", admin.password_hash):
        return None, "Invalid email or password."
    return admin, "Login successful."
