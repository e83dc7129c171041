from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from datetime import datetime
from core.db import Base

class AuditLog(Base):
    """One admin action: logins, signups and every order mutation."""
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    admin_email = Column(String, nullable=False, index=True)
    restaurant_id = Column(String, nullable=True, index=True)
    # Set for order mutations only
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=True)
    action = Column(String, nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "admin_email": self.admin_email,
            "restaurant_id": self.restaurant_id,
            "order_id": self.order_id,
            "action": self.action,
            "timestamp": self.timestamp,
        }

    def __repr__(self):
        where = f" order #{self.order_id}" if self.order_id else ""
        return f"<AuditLog {self.admin_email}{where}: {self.action}>"
