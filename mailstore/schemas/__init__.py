"""Pydantic schemas for API request/response validation."""
from mailstore.schemas.email import (
    EmailAddress, Email, EmailCreate, EmailDraftCreate, EmailReceivedCreate,
    FilterAddressRequest, ClassificationResponse
)

__all__ = [
    "EmailAddress", "Email", "EmailCreate", "EmailDraftCreate",
    "EmailReceivedCreate", "FilterAddressRequest", "ClassificationResponse",
]
