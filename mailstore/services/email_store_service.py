"""Email store service enforcing the email lifecycle."""
import logging
from typing import Iterable, List

from mailstore.core.repository import EmailRepository
from mailstore.exceptions import EmailNotFoundError, EmailUpdateNotAllowedError
from mailstore.models.email import EmailState
from mailstore.schemas.email import Email, EmailCreate

logger = logging.getLogger(__name__)


class EmailStoreService:
    """Service for inserting, querying, updating and deleting emails."""

    def __init__(self, repository: EmailRepository):
        self.repository = repository

    def insert_email(self, new_email: EmailCreate) -> Email:
        """
        Store a new email.

        The repository assigns the id, so the returned email can differ
        from the given one.
        """
        return self.repository.save(new_email.to_email())

    def insert_emails(self, new_emails: Iterable[EmailCreate]) -> List[Email]:
        """Store new emails and return whatever the repository stored."""
        return self.repository.save_all([e.to_email() for e in new_emails])

    def get_email(self, email_id: int) -> Email:
        """Get email by ID. Raises EmailNotFoundError if there is none."""
        email = self.repository.find_by_id(email_id)
        if email is None:
            raise EmailNotFoundError(email_id)
        return email

    def get_emails(self, ids: Iterable[int]) -> List[Email]:
        """Get emails by IDs. Unknown ids are ignored, so the result can be empty."""
        return self.repository.find_all_by_id(ids)

    def update_email(self, email_id: int, updated: Email) -> None:
        """
        Overwrite the stored email with the updated version.

        Args:
            email_id: ID of the email to update
            updated: New version of the email, including its id

        Raises:
            EmailNotFoundError: no email with the given id
            EmailUpdateNotAllowedError: the update breaks a lifecycle rule
        """
        stored = self.get_email(email_id)

        check_update_allowed(stored, updated)

        stored.state = updated.state
        stored.sender = updated.sender
        stored.to = list(updated.to)
        stored.cc = list(updated.cc)
        stored.subject = updated.subject
        stored.body = updated.body
        stored.modified_date = updated.modified_date

        self.repository.save(stored)

    def delete_email(self, email_id: int) -> None:
        """Move an email to DELETED. Raises EmailNotFoundError if there is none."""
        email = self.get_email(email_id)
        email.state = EmailState.DELETED
        self.repository.save(email)

    def delete_emails(self, ids: Iterable[int]) -> None:
        """Move all found emails to DELETED. Unknown ids are ignored."""
        emails = self.repository.find_all_by_id(ids)
        for email in emails:
            email.state = EmailState.DELETED
        self.repository.save_all(emails)


def check_update_allowed(orig: Email, updated: Email) -> None:
    """
    Check whether ``orig`` may be replaced by ``updated``.

    Rules:
    1) the id never changes
    2) a DRAFT can stay DRAFT or become SENT
    3) content of a DRAFT can only change while it stays DRAFT
    4) a non-DRAFT email can move between SENT, DELETED and SPAM, never back to DRAFT
    5) content of a non-DRAFT email never changes

    Raises EmailUpdateNotAllowedError naming the broken rule.
    """
    if updated.id != orig.id:
        _reject(orig, "changed id")

    if orig.state == EmailState.DRAFT:
        if updated.state not in (EmailState.DRAFT, EmailState.SENT):
            _reject(orig, "DRAFT to other than DRAFT or SENT")

        if updated.state != EmailState.DRAFT and not orig.has_same_content(updated):
            _reject(orig, "no content change on DRAFT to SENT")
    else:
        if updated.state == EmailState.DRAFT:
            _reject(orig, "non-DRAFT to DRAFT")

        if not orig.has_same_content(updated):
            _reject(orig, "non-DRAFT changed content")


def _reject(orig: Email, reason: str):
    logger.info(f"Rejected update of email {orig.id} ({orig.state.value}): {reason}")
    raise EmailUpdateNotAllowedError(orig.id, reason)
