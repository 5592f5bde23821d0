"""API dependencies."""
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from mailstore.database import get_db
from mailstore.core.repository import EmailRepository
from mailstore.core.sql_repository import SqlEmailRepository
from mailstore.services.email_store_service import EmailStoreService
from mailstore.services.spam_filter_service import FilterAddressSet, SpamFilterService

__all__ = [
    "get_db", "get_email_repository", "get_email_store",
    "get_filter_addresses", "get_spam_filter",
]


def get_email_repository(db: Session = Depends(get_db)) -> EmailRepository:
    return SqlEmailRepository(db)


def get_email_store(repository: EmailRepository = Depends(get_email_repository)) -> EmailStoreService:
    return EmailStoreService(repository)


def get_filter_addresses(request: Request) -> FilterAddressSet:
    """Filter addresses owned by the running application."""
    return request.app.state.filter_addresses


def get_spam_filter(
    repository: EmailRepository = Depends(get_email_repository),
    filter_addresses: FilterAddressSet = Depends(get_filter_addresses)
) -> SpamFilterService:
    return SpamFilterService(repository, filter_addresses)
