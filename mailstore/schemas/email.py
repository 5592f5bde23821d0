"""Email Pydantic schemas."""
from datetime import datetime, timezone
from typing import Annotated, Optional, List
from pydantic import BaseModel, ConfigDict, Field, AfterValidator

from mailstore.models.email import EmailState


def _to_naive_utc(value: datetime) -> datetime:
    """Convert aware timestamps to naive UTC, the form stored in SQLite."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


Timestamp = Annotated[datetime, AfterValidator(_to_naive_utc)]


class EmailAddress(BaseModel):
    """
    Address used to send and receive emails.

    Two addresses are equal when their ``address`` matches; the
    display name is cosmetic.
    """
    address: str
    display_name: Optional[str] = None

    def __eq__(self, other):
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return self.address == other.address

    def __hash__(self):
        return hash(self.address)

    def __str__(self):
        return self.display_name if self.display_name is not None else self.address


def _address_key(address: EmailAddress) -> tuple:
    return (address.address, address.display_name)


class EmailFields(BaseModel):
    """Sender, recipients and text shared by all email schemas."""
    sender: EmailAddress = Field(alias="from")
    to: List[EmailAddress] = []
    cc: List[EmailAddress] = []
    subject: str = ""
    body: str = ""

    model_config = ConfigDict(populate_by_name=True)


class Email(EmailFields):
    """A stored email as seen by services and API callers."""
    id: Optional[int] = None
    state: EmailState
    modified_date: Timestamp

    def content(self) -> tuple:
        """
        All fields except ``id`` and ``state``.

        Addresses are compared with their display names here, unlike
        ``EmailAddress.__eq__``.
        """
        return (
            _address_key(self.sender),
            [_address_key(a) for a in self.to],
            [_address_key(a) for a in self.cc],
            self.subject,
            self.body,
            self.modified_date,
        )

    def has_same_content(self, other: "Email") -> bool:
        """Compare content fields, disregarding state."""
        return self.content() == other.content()


class EmailCreate(EmailFields):
    """Schema for inserting an email with an explicit state."""
    state: EmailState
    modified_date: Timestamp

    def to_email(self) -> Email:
        """Build the email to store; the id is assigned on save."""
        return Email(**self.model_dump())


class EmailDraftCreate(EmailFields):
    """Schema for inserting a newly composed mail. Always stored as DRAFT."""
    modified_date: Timestamp = Field(default_factory=utcnow)

    def to_create(self) -> EmailCreate:
        return EmailCreate(state=EmailState.DRAFT, **self.model_dump())


class EmailReceivedCreate(EmailFields):
    """
    Schema for inserting a received mail. Always stored as SENT.

    The receive date is used as the modified date.
    """
    date: Timestamp

    def to_create(self) -> EmailCreate:
        data = self.model_dump(exclude={"date"})
        return EmailCreate(state=EmailState.SENT, modified_date=self.date, **data)


class FilterAddressRequest(BaseModel):
    """Sender address to register as spam filter."""
    address: str = Field(..., min_length=1)
    display_name: Optional[str] = None

    def to_address(self) -> EmailAddress:
        return EmailAddress(address=self.address, display_name=self.display_name)


class ClassificationResponse(BaseModel):
    """Result of a spam classification run."""
    classified: int
    email_ids: List[int] = []
