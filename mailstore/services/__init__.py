"""Business logic services."""
from mailstore.services.email_store_service import EmailStoreService
from mailstore.services.spam_filter_service import FilterAddressSet, SpamFilterService
from mailstore.services.scheduler_service import SchedulerService

__all__ = [
    "EmailStoreService",
    "FilterAddressSet",
    "SpamFilterService",
    "SchedulerService",
]
