"""Main API v1 router."""
from fastapi import APIRouter

from mailstore.api.v1 import emails, spam, system

api_router = APIRouter()

api_router.include_router(emails.router, prefix="/emails", tags=["Emails"])
api_router.include_router(spam.router, prefix="/spam", tags=["Spam"])
api_router.include_router(system.router, prefix="/system", tags=["System"])
