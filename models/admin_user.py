from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from core.db import Base

class AdminUser(Base):
    __tablename__ = "admin_users"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    restaurant_id = Column(String, nullable=False)
    restaurant_name = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
