# core/logger.py
from datetime import datetime

from core.db import SessionLocal
from models.audit_log import AuditLog

def log_action(admin_email: str, action: str, session_factory=None):
    """Record an admin action into the audit log. Never raises."""
    session = (session_factory or SessionLocal)()
    try:
        session.add(AuditLog(admin_email=admin_email or "unknown", action=action, timestamp=datetime.utcnow()))
        session.commit()
    except Exception as e:
        print("Audit log error:", e)
        session.rollback()
    finally:
        session.close()
