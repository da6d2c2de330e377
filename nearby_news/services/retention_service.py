# services/retention_service.py

"""
Expiry sweep for news items and location pings.

Queries already exclude expired records, so the sweep only reclaims space.
A failed or delayed sweep never makes an expired item visible again.
"""

from typing import Callable, Dict, Optional
from datetime import datetime, timezone

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from ..core.exceptions import StorageFailureError
from ..core.retention import RetentionPolicy, utc_now
from ..interfaces.location_repository_interface import LocationRepositoryInterface
from ..interfaces.news_repository_interface import NewsRepositoryInterface
from common.logger import LoggerFactory, LoggerType, LogLevel

SWEEP_JOB_ID = "retention-sweep"


class RetentionService:
    """Deletes records older than the retention policy allows"""

    def __init__(
        self,
        news_repository: NewsRepositoryInterface,
        location_repository: LocationRepositoryInterface,
        retention_policy: Optional[RetentionPolicy] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.news_repository = news_repository
        self.location_repository = location_repository
        self.retention_policy = retention_policy or RetentionPolicy()
        self.clock = clock
        self.last_sweep_at: Optional[datetime] = None
        self.logger = LoggerFactory.get_logger(
            name="retention-service",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
            file_level=LogLevel.DEBUG,
            log_file="logs/retention_service.log",
        )

    async def sweep(self, now: Optional[datetime] = None) -> Dict[str, int]:
        """
        Remove expired news items and pings

        Returns:
            Dict[str, int]: Number of removed records per collection

        Raises:
            StorageFailureError: A repository failed
        """
        cutoff = self.retention_policy.cutoff(now or self.clock())
        removed_news = await self.news_repository.delete_expired(cutoff)
        removed_pings = await self.location_repository.delete_expired(cutoff)
        self.last_sweep_at = self.clock()

        live_news = await self.news_repository.count_news(created_after=cutoff)
        remaining_pings = await self.location_repository.count_pings()
        self.logger.info(
            f"Retention sweep (cutoff {cutoff.isoformat()}): "
            f"{removed_news} news items, {removed_pings} pings removed; "
            f"{live_news} news items, {remaining_pings} pings remain"
        )
        return {"news_items": removed_news, "location_pings": removed_pings}

    async def run_scheduled_sweep(self) -> None:
        """Scheduler entry point, failures are logged and retried next run"""
        try:
            await self.sweep()
        except StorageFailureError as e:
            self.logger.error(f"Retention sweep failed: {e}")


class RetentionScheduler:
    """Runs RetentionService.sweep periodically with APScheduler"""

    def __init__(self, retention_service: RetentionService, interval_seconds: int):
        self.retention_service = retention_service
        self.interval_seconds = interval_seconds
        self.scheduler: Optional[AsyncIOScheduler] = None
        self.logger = LoggerFactory.get_logger(
            name="retention-scheduler",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
        )

    def start(self) -> None:
        """Start the scheduler; must be called from a running event loop"""
        if self.is_running():
            return

        self.scheduler = AsyncIOScheduler(timezone=timezone.utc)
        self.scheduler.add_job(
            self.retention_service.run_scheduled_sweep,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=SWEEP_JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self.scheduler.start()
        self.logger.info(f"📅 Retention sweep scheduled every {self.interval_seconds}s")

    def stop(self) -> None:
        if self.scheduler and self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            self.logger.info("Retention scheduler stopped")
        self.scheduler = None

    def is_running(self) -> bool:
        return bool(self.scheduler and self.scheduler.running)

    def next_run_time(self) -> Optional[datetime]:
        if not self.scheduler:
            return None
        job = self.scheduler.get_job(SWEEP_JOB_ID)
        return job.next_run_time if job else None
