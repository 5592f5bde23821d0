"""
Tests for email schemas.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from mailstore.models.email import EmailState
from mailstore.schemas.email import (
    Email, EmailAddress, EmailCreate, EmailDraftCreate, EmailReceivedCreate,
    FilterAddressRequest
)
from tests.factories import ALICE, BOB, make_email_create


class TestEmailAddress:
    """Test EmailAddress identity."""

    def test_equal_by_address_only(self):
        assert EmailAddress(address="a@example.com", display_name="A") == EmailAddress(address="a@example.com")

    def test_different_address_not_equal(self):
        assert EmailAddress(address="a@example.com") != EmailAddress(address="b@example.com")

    def test_hash_ignores_display_name(self):
        addresses = {
            EmailAddress(address="a@example.com", display_name="A"),
            EmailAddress(address="a@example.com", display_name="Someone else"),
        }
        assert len(addresses) == 1

    def test_str_prefers_display_name(self):
        assert str(ALICE) == "Alice"
        assert str(BOB) == "bob@example.com"


class TestEmailContent:
    """Test content comparison ignoring state."""

    def test_state_is_not_content(self):
        email = make_email_create(EmailState.DRAFT).to_email()
        other = email.model_copy(update={"state": EmailState.SPAM})

        assert email.has_same_content(other)
        assert email != other

    @pytest.mark.parametrize("field, value", [
        ("subject", "Changed"),
        ("body", "Changed"),
        ("sender", EmailAddress(address="mallory@example.com")),
        ("to", []),
        ("cc", [ALICE]),
        ("modified_date", datetime(2024, 3, 2)),
    ])
    def test_any_content_field_counts(self, field, value):
        email = make_email_create().to_email()
        other = email.model_copy(update={field: value})

        assert not email.has_same_content(other)

    def test_display_names_count_as_content(self):
        email = make_email_create(cc=[EmailAddress(address="carol@example.com", display_name="Carol")]).to_email()
        other = email.model_copy(update={"cc": [EmailAddress(address="carol@example.com")]})

        assert email.cc == other.cc
        assert not email.has_same_content(other)

    def test_recipient_order_matters(self):
        email = make_email_create(to=[ALICE, BOB]).to_email()
        other = email.model_copy(update={"to": [BOB, ALICE]})

        assert not email.has_same_content(other)


class TestEmailParsing:
    """Test JSON field names and timestamp handling."""

    def test_from_alias(self):
        email = Email.model_validate({
            "id": 3,
            "state": "SENT",
            "from": {"address": "alice@example.com"},
            "modified_date": "2024-03-01T09:30:00",
        })

        assert email.sender == ALICE
        assert email.to == []
        assert email.subject == ""
        assert email.model_dump(by_alias=True)["from"]["address"] == "alice@example.com"

    def test_sender_accepted_by_field_name(self):
        assert Email.model_config["populate_by_name"] is True

        email = Email(state=EmailState.SENT, sender=ALICE, modified_date=datetime(2024, 3, 1))

        assert email.sender == ALICE

    def test_missing_sender_rejected(self):
        with pytest.raises(ValidationError):
            Email.model_validate({"state": "SENT", "modified_date": "2024-03-01T09:30:00"})

    def test_unknown_state_rejected(self):
        with pytest.raises(ValidationError):
            make_email_create(state="ARCHIVED")

    def test_aware_timestamp_normalized_to_utc(self):
        tz = timezone(timedelta(hours=2))
        email = make_email_create(modified_date=datetime(2024, 3, 1, 11, 30, tzinfo=tz))

        assert email.modified_date == datetime(2024, 3, 1, 9, 30)
        assert email.modified_date.tzinfo is None


class TestInsertSchemas:
    """Test conversion of insert payloads."""

    def test_create_to_email_has_no_id(self):
        email = make_email_create(EmailState.SENT).to_email()

        assert email.id is None
        assert email.state == EmailState.SENT
        assert email.subject == "Quarterly report"

    def test_draft_is_always_draft(self):
        draft = EmailDraftCreate(sender=ALICE, to=[BOB], subject="Hi")
        create = draft.to_create()

        assert isinstance(create, EmailCreate)
        assert create.state == EmailState.DRAFT
        assert create.subject == "Hi"
        assert create.modified_date is not None

    def test_received_is_sent_with_receive_date(self):
        received = EmailReceivedCreate.model_validate({
            "from": {"address": "bob@example.com"},
            "to": [{"address": "alice@example.com"}],
            "body": "Hello",
            "date": "2024-02-10T08:00:00Z",
        })
        create = received.to_create()

        assert create.state == EmailState.SENT
        assert create.modified_date == datetime(2024, 2, 10, 8, 0)
        assert create.sender == BOB

    def test_filter_request_requires_address(self):
        with pytest.raises(ValidationError):
            FilterAddressRequest(address="")

    def test_filter_request_to_address(self):
        address = FilterAddressRequest(address="x@example.com", display_name="X").to_address()
        assert address == EmailAddress(address="x@example.com")
        assert address.display_name == "X"
