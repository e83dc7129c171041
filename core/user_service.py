# core/user_service.py
from sqlalchemy.orm import Session
from models.admin_user import AdminUser
from core.auth_service import hash_password
from core.config import ADMIN_NAME, ADMIN_EMAIL, ADMIN_PASSWORD, DEFAULT_RESTAURANT_ID, DEFAULT_RESTAURANT_NAME

def create_default_admin(db: Session):
    existing = db.query(AdminUser).filter(AdminUser.email == ADMIN_EMAIL).first()
    if existing:
        print("Admin already exists.")
        return existing
    admin = AdminUser(
        name=ADMIN_NAME,
        email=ADMIN_EMAIL,
        password_hash=hash_password(ADMIN_PASSWORD),
        restaurant_id=DEFAULT_RESTAURANT_ID,
        restaurant_name=DEFAULT_RESTAURANT_NAME
    )
    db.add(admin)
    db.commit()
    print(f"✅ Default admin created: {ADMIN_EMAIL} / {ADMIN_PASSWORD}")
    return admin
