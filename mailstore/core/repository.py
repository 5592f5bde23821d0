"""Persistence contract for emails and an in-memory implementation."""
import itertools
import threading
from typing import Dict, Iterable, List, Optional, Protocol

from mailstore.schemas.email import Email


class EmailRepository(Protocol):
    """Storage operations the email services rely on."""

    def save(self, email: Email) -> Email:
        """Insert or overwrite an email. Emails without id get one assigned."""
        ...

    def save_all(self, emails: Iterable[Email]) -> List[Email]: ...

    def find_by_id(self, email_id: int) -> Optional[Email]: ...

    def find_all_by_id(self, ids: Iterable[int]) -> List[Email]:
        """Return the emails found; missing ids are left out."""
        ...

    def exists_by_id(self, email_id: int) -> bool: ...

    def delete_by_id(self, email_id: int) -> None: ...

    def delete_all_by_id(self, ids: Iterable[int]) -> None: ...

    def find_all_by_sender_address(self, address: str) -> List[Email]: ...

    def count(self) -> int: ...


class InMemoryEmailRepository:
    """
    Thread-safe repository keeping emails in a dict.

    Stored emails are copies, so callers mutating a returned email do not
    change the stored one until they save it again.
    """

    def __init__(self):
        self._emails: Dict[int, Email] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, email: Email) -> Email:
        with self._lock:
            return self._save(email)

    def save_all(self, emails: Iterable[Email]) -> List[Email]:
        with self._lock:
            return [self._save(email) for email in emails]

    def _save(self, email: Email) -> Email:
        stored = email.model_copy(deep=True)
        if stored.id is None:
            stored.id = next(self._ids)
        self._emails[stored.id] = stored
        return stored.model_copy(deep=True)

    def find_by_id(self, email_id: int) -> Optional[Email]:
        with self._lock:
            email = self._emails.get(email_id)
            return email.model_copy(deep=True) if email else None

    def find_all_by_id(self, ids: Iterable[int]) -> List[Email]:
        with self._lock:
            found = []
            for email_id in dict.fromkeys(ids):
                if email_id in self._emails:
                    found.append(self._emails[email_id].model_copy(deep=True))
            return found

    def exists_by_id(self, email_id: int) -> bool:
        with self._lock:
            return email_id in self._emails

    def delete_by_id(self, email_id: int) -> None:
        with self._lock:
            self._emails.pop(email_id, None)

    def delete_all_by_id(self, ids: Iterable[int]) -> None:
        with self._lock:
            for email_id in ids:
                self._emails.pop(email_id, None)

    def find_all_by_sender_address(self, address: str) -> List[Email]:
        with self._lock:
            return [
                email.model_copy(deep=True)
                for email in self._emails.values()
                if email.sender.address == address
            ]

    def count(self) -> int:
        with self._lock:
            return len(self._emails)
