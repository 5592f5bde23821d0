"""SQLAlchemy models."""
from mailstore.models.email import EmailState, StoredEmail

__all__ = ["EmailState", "StoredEmail"]
