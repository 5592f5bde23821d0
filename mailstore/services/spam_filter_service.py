"""Spam filter service classifying stored emails by sender address."""
import logging
import threading
from typing import FrozenSet, Iterable, List, Optional

from mailstore.core.repository import EmailRepository
from mailstore.models.email import EmailState
from mailstore.schemas.email import Email, EmailAddress

logger = logging.getLogger(__name__)


class FilterAddressSet:
    """
    Sender addresses treated as spam sources.

    Shared between the code registering filters and the classifier run,
    so every access goes through one lock.
    """

    def __init__(self, addresses: Optional[Iterable[EmailAddress]] = None):
        self._addresses = set(addresses or [])
        self._lock = threading.Lock()

    def add(self, address: EmailAddress) -> bool:
        """Add an address. Returns False if it was already present."""
        with self._lock:
            if address in self._addresses:
                return False
            self._addresses.add(address)
            return True

    def remove(self, address: EmailAddress) -> bool:
        """Remove an address. Returns False if it was not present."""
        with self._lock:
            if address not in self._addresses:
                return False
            self._addresses.discard(address)
            return True

    def snapshot(self) -> FrozenSet[EmailAddress]:
        with self._lock:
            return frozenset(self._addresses)

    def __contains__(self, address) -> bool:
        with self._lock:
            return address in self._addresses

    def __len__(self) -> int:
        with self._lock:
            return len(self._addresses)


class SpamFilterService:
    """Service marking SENT emails from filtered senders as SPAM."""

    def __init__(self, repository: EmailRepository, filter_addresses: FilterAddressSet):
        self.repository = repository
        self.filter_addresses = filter_addresses

    def add_filter_address(self, address: EmailAddress) -> bool:
        """Register a sender address as spam source."""
        added = self.filter_addresses.add(address)
        if added:
            logger.debug(f"Added new filter address: {address.address}")
        return added

    def remove_filter_address(self, address: EmailAddress) -> bool:
        """Unregister a sender address."""
        removed = self.filter_addresses.remove(address)
        if removed:
            logger.debug(f"Removed filter address: {address.address}")
        return removed

    def get_filter_addresses(self) -> List[EmailAddress]:
        return sorted(self.filter_addresses.snapshot(), key=lambda a: a.address)

    def classify_spam_emails(self) -> List[Email]:
        """
        Mark stored SENT emails from any filter address as SPAM.

        DRAFT, DELETED and SPAM emails are left alone, as is the modified
        date of reclassified emails. The batch save runs even when nothing
        matched.

        Returns:
            The emails reclassified as SPAM
        """
        addresses = self.filter_addresses.snapshot()
        logger.info(
            f"Running spam classification with filter addresses: "
            f"{sorted(a.address for a in addresses)}"
        )

        spam_emails = []
        for address in addresses:
            for email in self.repository.find_all_by_sender_address(address.address):
                # Only SENT mail, not drafts, deleted or already spam
                if email.state == EmailState.SENT:
                    email.state = EmailState.SPAM
                    spam_emails.append(email)

        saved = self.repository.save_all(spam_emails)

        logger.info(f"Classified {len(spam_emails)} mails as SPAM")
        return saved
