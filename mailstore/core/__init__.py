"""Storage backends."""
from mailstore.core.repository import EmailRepository, InMemoryEmailRepository
from mailstore.core.sql_repository import SqlEmailRepository

__all__ = ["EmailRepository", "InMemoryEmailRepository", "SqlEmailRepository"]
