"""Database connection for SQLite."""
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from mailstore.config import settings

# Ensure data directory exists
db_dir = os.path.dirname(settings.sqlite_db_path)
if db_dir:
    os.makedirs(db_dir, exist_ok=True)

SQLITE_URL = f"sqlite:///{settings.sqlite_db_path}"

engine = create_engine(
    SQLITE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    echo=settings.debug
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Get database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize the database tables."""
    from mailstore.models import email  # noqa
    Base.metadata.create_all(bind=engine)


def reset_db():
    """Reset the database (for development)."""
    from mailstore.models import email  # noqa
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
