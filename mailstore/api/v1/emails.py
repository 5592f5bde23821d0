"""Email API endpoints."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query

from mailstore.api.deps import get_email_store
from mailstore.exceptions import EmailNotFoundError, EmailUpdateNotAllowedError
from mailstore.services.email_store_service import EmailStoreService
from mailstore.schemas.email import (
    Email, EmailCreate, EmailDraftCreate, EmailReceivedCreate
)

router = APIRouter()


@router.post("", response_model=Email, status_code=201)
def insert_email(new_email: EmailCreate, service: EmailStoreService = Depends(get_email_store)):
    """Insert an email and return it with its assigned id."""
    return service.insert_email(new_email)


@router.post("/bulk", response_model=List[Email], status_code=201)
def insert_emails(new_emails: List[EmailCreate], service: EmailStoreService = Depends(get_email_store)):
    """Insert a list of emails and return all emails stored."""
    return service.insert_emails(new_emails)


@router.post("/drafts", response_model=Email, status_code=201)
def insert_draft(draft: EmailDraftCreate, service: EmailStoreService = Depends(get_email_store)):
    """Insert a newly composed email as DRAFT."""
    return service.insert_email(draft.to_create())


@router.post("/received", response_model=Email, status_code=201)
def insert_received(received: EmailReceivedCreate, service: EmailStoreService = Depends(get_email_store)):
    """Insert a received email as SENT, dated with its receive date."""
    return service.insert_email(received.to_create())


@router.get("", response_model=List[Email])
def get_emails(
    ids: List[int] = Query(...),
    service: EmailStoreService = Depends(get_email_store)
):
    """
    Get the emails matching the given ids.

    Ids without email are skipped, so the result can be shorter than
    the list of ids or empty.
    """
    return service.get_emails(ids)


@router.get("/{email_id}", response_model=Email)
def get_email(email_id: int, service: EmailStoreService = Depends(get_email_store)):
    """Get a single email."""
    try:
        return service.get_email(email_id)
    except EmailNotFoundError:
        raise HTTPException(status_code=404, detail=f"No email found matching id '{email_id}'")


@router.put("/{email_id}")
def update_email(
    email_id: int,
    updated_email: Email,
    service: EmailStoreService = Depends(get_email_store)
):
    """
    Update an email.

    - **DRAFT** emails can be edited, or sent without content changes
    - **SENT**, **DELETED** and **SPAM** emails can change state among
      themselves, their content is frozen
    """
    try:
        service.update_email(email_id, updated_email)
    except EmailNotFoundError:
        raise HTTPException(status_code=404, detail=f"No email found to update with id '{email_id}'")
    except EmailUpdateNotAllowedError as e:
        raise HTTPException(status_code=400, detail=f"Update of email not allowed: {e.reason}")

    return {"message": "Email updated successfully"}


@router.delete("/{email_id}")
def delete_email(email_id: int, service: EmailStoreService = Depends(get_email_store)):
    """Move an email to DELETED."""
    try:
        service.delete_email(email_id)
    except EmailNotFoundError:
        raise HTTPException(status_code=404, detail=f"No email found to delete with id '{email_id}'")

    return {"message": "Email deleted successfully"}


@router.delete("")
def delete_emails(
    ids: List[int] = Query(...),
    service: EmailStoreService = Depends(get_email_store)
):
    """Move all emails with the given ids to DELETED. Unknown ids are ignored."""
    service.delete_emails(ids)
    return {"message": "Emails deleted successfully"}
