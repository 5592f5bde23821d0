"""Spam filter API endpoints."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException

from mailstore.api.deps import get_spam_filter
from mailstore.services.spam_filter_service import SpamFilterService
from mailstore.schemas.email import (
    EmailAddress, FilterAddressRequest, ClassificationResponse
)

router = APIRouter()


@router.get("/filters", response_model=List[EmailAddress])
def list_filter_addresses(service: SpamFilterService = Depends(get_spam_filter)):
    """List sender addresses treated as spam."""
    return service.get_filter_addresses()


@router.post("/filters", status_code=201)
def add_filter_address(request: FilterAddressRequest, service: SpamFilterService = Depends(get_spam_filter)):
    """Register a sender address as spam source. Adding it twice has no effect."""
    added = service.add_filter_address(request.to_address())
    return {"address": request.address, "added": added}


@router.delete("/filters/{address}")
def remove_filter_address(address: str, service: SpamFilterService = Depends(get_spam_filter)):
    """Unregister a sender address."""
    if not service.remove_filter_address(EmailAddress(address=address)):
        raise HTTPException(status_code=404, detail=f"No filter address '{address}'")
    return {"message": "Filter address removed"}


@router.post("/classify", response_model=ClassificationResponse)
def classify_spam(service: SpamFilterService = Depends(get_spam_filter)):
    """Run the spam classification now instead of waiting for the scheduler."""
    classified = service.classify_spam_emails()
    return ClassificationResponse(
        classified=len(classified),
        email_ids=[e.id for e in classified]
    )
