"""
Pytest configuration and fixtures for all tests.
"""

import os
import tempfile

import pytest

# Set up test environment variables before importing any modules
_data_dir = tempfile.mkdtemp(prefix="mailstore-tests-")
os.environ.setdefault("SQLITE_DB_PATH", os.path.join(_data_dir, "emails.db"))
os.environ.setdefault("ENABLE_SCHEDULER", "false")
os.environ.setdefault("SPAM_FILTER_ADDRESSES", "[]")

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mailstore.database import Base
from mailstore.core.repository import InMemoryEmailRepository
from mailstore.core.sql_repository import SqlEmailRepository
from mailstore.models.email import EmailState
from mailstore.schemas.email import Email
from mailstore.services.email_store_service import EmailStoreService
from mailstore.services.spam_filter_service import FilterAddressSet, SpamFilterService
from tests.factories import make_email_create


@pytest.fixture
def repository():
    return InMemoryEmailRepository()


@pytest.fixture
def store(repository):
    return EmailStoreService(repository)


@pytest.fixture
def filter_addresses():
    return FilterAddressSet()


@pytest.fixture
def spam_filter(repository, filter_addresses):
    return SpamFilterService(repository, filter_addresses)


@pytest.fixture
def db_session():
    """Session on a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def sql_repository(db_session):
    return SqlEmailRepository(db_session)


@pytest.fixture
def stored_draft(store) -> Email:
    return store.insert_email(make_email_create(EmailState.DRAFT))


@pytest.fixture
def stored_sent(store) -> Email:
    return store.insert_email(make_email_create(EmailState.SENT))
