"""SQLAlchemy-backed email repository."""
import json
from typing import Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from mailstore.models.email import EmailState, StoredEmail
from mailstore.schemas.email import Email, EmailAddress


def _dump_addresses(addresses: List[EmailAddress]) -> str:
    return json.dumps([a.model_dump() for a in addresses])


def _load_addresses(raw: Optional[str]) -> List[EmailAddress]:
    return [EmailAddress(**a) for a in json.loads(raw)] if raw else []


def to_email(row: StoredEmail) -> Email:
    """Convert a database row to an email."""
    return Email(
        id=row.id,
        state=EmailState(row.state),
        sender=EmailAddress(address=row.from_address, display_name=row.from_display_name),
        to=_load_addresses(row.recipients),
        cc=_load_addresses(row.cc),
        subject=row.subject,
        body=row.body,
        modified_date=row.modified_date,
    )


def apply_email(row: StoredEmail, email: Email) -> StoredEmail:
    """Copy state and content of an email onto a database row."""
    row.state = email.state.value
    row.from_address = email.sender.address
    row.from_display_name = email.sender.display_name
    row.recipients = _dump_addresses(email.to)
    row.cc = _dump_addresses(email.cc)
    row.subject = email.subject
    row.body = email.body
    row.modified_date = email.modified_date
    return row


class SqlEmailRepository:
    """Repository storing emails in the ``emails`` table."""

    def __init__(self, db: Session):
        self.db = db

    def _to_row(self, email: Email) -> StoredEmail:
        row = None
        if email.id is not None:
            row = self.db.get(StoredEmail, email.id)
        if row is None:
            row = StoredEmail(id=email.id)
            self.db.add(row)
        return apply_email(row, email)

    def save(self, email: Email) -> Email:
        row = self._to_row(email)
        self.db.commit()
        self.db.refresh(row)
        return to_email(row)

    def save_all(self, emails: Iterable[Email]) -> List[Email]:
        rows = [self._to_row(email) for email in emails]
        self.db.commit()
        for row in rows:
            self.db.refresh(row)
        return [to_email(row) for row in rows]

    def find_by_id(self, email_id: int) -> Optional[Email]:
        row = self.db.get(StoredEmail, email_id)
        return to_email(row) if row else None

    def find_all_by_id(self, ids: Iterable[int]) -> List[Email]:
        ids = list(ids)
        if not ids:
            return []
        rows = self.db.query(StoredEmail).filter(StoredEmail.id.in_(ids)).all()
        by_id = {row.id: row for row in rows}
        # Keep the order of the requested ids
        return [to_email(by_id[i]) for i in dict.fromkeys(ids) if i in by_id]

    def exists_by_id(self, email_id: int) -> bool:
        count = self.db.query(func.count(StoredEmail.id)).filter(StoredEmail.id == email_id).scalar()
        return count > 0

    def delete_by_id(self, email_id: int) -> None:
        row = self.db.get(StoredEmail, email_id)
        if row:
            self.db.delete(row)
            self.db.commit()

    def delete_all_by_id(self, ids: Iterable[int]) -> None:
        ids = list(ids)
        if not ids:
            return
        for row in self.db.query(StoredEmail).filter(StoredEmail.id.in_(ids)).all():
            self.db.delete(row)
        self.db.commit()

    def find_all_by_sender_address(self, address: str) -> List[Email]:
        rows = (
            self.db.query(StoredEmail)
            .filter(StoredEmail.from_address == address)
            .order_by(StoredEmail.id)
            .all()
        )
        return [to_email(row) for row in rows]

    def count(self) -> int:
        return self.db.query(func.count(StoredEmail.id)).scalar()
