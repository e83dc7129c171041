# core/db.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from core.config import DATABASE_URL

# Views load orders and products from worker threads, so SQLite must allow it
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, future=True, connect_args=connect_args)

# expire_on_commit=False keeps loaded rows readable after the session closes
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)

Base = declarative_base()


def get_db():
    """Yield a SQLAlchemy session (use: `for db in get_db():`)."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
