"""Errors raised by the email store."""


class EmailStoreError(Exception):
    """Base class for email store errors."""


class EmailNotFoundError(EmailStoreError):
    """No stored email matches the given id."""

    def __init__(self, email_id):
        self.email_id = email_id
        super().__init__(f"There is no email with id '{email_id}'.")


class EmailUpdateNotAllowedError(EmailStoreError):
    """An update violates the state or content rules of the stored email."""

    def __init__(self, email_id, reason: str):
        self.email_id = email_id
        self.reason = reason
        super().__init__(f"Update of email (id: {email_id}) is not allowed, reason: {reason}.")
