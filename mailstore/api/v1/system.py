"""System API endpoints."""
from fastapi import APIRouter, Depends

from mailstore.api.deps import get_email_repository, get_filter_addresses
from mailstore.core.repository import EmailRepository
from mailstore.config import settings
from mailstore.database import init_db, reset_db
from mailstore.services.spam_filter_service import FilterAddressSet

router = APIRouter()


@router.get("/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name
    }


@router.get("/stats")
def get_stats(
    repository: EmailRepository = Depends(get_email_repository),
    filter_addresses: FilterAddressSet = Depends(get_filter_addresses)
):
    """Get system statistics."""
    return {
        "emails": repository.count(),
        "filter_addresses": len(filter_addresses)
    }


@router.post("/init")
def initialize_database():
    """Create database tables."""
    init_db()
    return {"message": "Database initialized successfully"}


@router.post("/reset")
def reset_database(confirm: bool = False):
    """
    Reset the database (DESTRUCTIVE).
    
    Deletes all data and recreates tables.
    Requires confirm=true parameter.
    """
    if not confirm:
        return {
            "error": "This will delete all data. Pass confirm=true to proceed."
        }
    
    reset_db()
    return {"message": "Database reset successfully"}
