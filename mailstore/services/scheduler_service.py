"""Scheduler Service for periodic spam classification."""
from typing import Callable, Optional
from threading import Thread
import logging

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy.orm import Session

from mailstore.config import settings
from mailstore.database import SessionLocal
from mailstore.core.sql_repository import SqlEmailRepository
from mailstore.services.spam_filter_service import FilterAddressSet, SpamFilterService

logger = logging.getLogger(__name__)

SPAM_JOB_ID = "spam_classification"


class SchedulerService:
    """Service running the spam classifier in the background."""

    def __init__(
        self,
        filter_addresses: FilterAddressSet,
        session_factory: Callable[[], Session] = SessionLocal,
        scheduler: Optional[BackgroundScheduler] = None
    ):
        self.filter_addresses = filter_addresses
        self.session_factory = session_factory
        self.scheduler = scheduler or BackgroundScheduler()

    @property
    def is_running(self) -> bool:
        return self.scheduler.running

    def start(self):
        """Start the scheduler."""
        if not settings.enable_scheduler:
            logger.info("Spam classification scheduler is disabled in settings")
            return

        if self.is_running:
            logger.warning("Scheduler is already running")
            return

        self.scheduler.add_job(
            self.run_spam_classification,
            trigger=IntervalTrigger(minutes=settings.spam_check_interval_minutes),
            id=SPAM_JOB_ID,
            name="Classify spam emails",
            replace_existing=True
        )
        self.scheduler.start()
        logger.info(
            f"Scheduler started - classifying spam every {settings.spam_check_interval_minutes} minutes"
        )

    def shutdown(self):
        """Shutdown the scheduler."""
        if self.is_running:
            self.scheduler.shutdown(wait=False)
            logger.info("Scheduler stopped")

    def trigger_now(self) -> Thread:
        """Run one classification pass in the background."""
        logger.info("Triggering immediate spam classification")
        thread = Thread(target=self.run_spam_classification, daemon=True)
        thread.start()
        return thread

    def run_spam_classification(self) -> int:
        """
        Classify spam with a fresh database session.

        Returns the number of reclassified emails, 0 if the run failed.
        """
        db = self.session_factory()
        try:
            service = SpamFilterService(SqlEmailRepository(db), self.filter_addresses)
            return len(service.classify_spam_emails())
        except Exception as e:
            logger.error(f"Error in scheduled spam classification: {e}")
            db.rollback()
            return 0
        finally:
            db.close()
