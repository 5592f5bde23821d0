"""FastAPI application entry point."""
import logging

from fastapi import FastAPI

from mailstore.config import settings
from mailstore.database import init_db
from mailstore.api.v1.router import api_router
from mailstore.schemas.email import EmailAddress
from mailstore.services.spam_filter_service import FilterAddressSet
from mailstore.services.scheduler_service import SchedulerService

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Email Store API - email lifecycle management with spam classification.
    
    ## Features
    
    - **Emails**: Insert, query, update and delete emails
    - **Lifecycle**: DRAFT emails can be edited and sent; sent mail is frozen
      and only moves between SENT, DELETED and SPAM
    - **Spam Filter**: Sender addresses registered as filters get their SENT
      mail reclassified as SPAM on a fixed schedule
    """,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Filter addresses shared by the API and the scheduled classification
app.state.filter_addresses = FilterAddressSet(
    EmailAddress(address=address) for address in settings.spam_filter_addresses_list
)
scheduler_service = SchedulerService(app.state.filter_addresses)

# Include API router
app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.on_event("startup")
async def startup_event():
    """Initialize on startup."""
    init_db()
    
    if settings.enable_scheduler:
        scheduler_service.start()
    
    logger.info(f"{settings.app_name} v{settings.app_version} started, API docs available at /docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown."""
    scheduler_service.shutdown()


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "health": f"{settings.api_v1_prefix}/system/health"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "mailstore.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
