"""Background polling of the DMC mirror."""

import threading
from datetime import datetime, timedelta, timezone
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from loguru import logger

from floodwatch.core.errors import FloodwatchError
from floodwatch.core.models import Snapshot
from floodwatch.core.snapshot import SnapshotBuilder
from floodwatch.utils.config import settings


class SnapshotPoller:
    """Re-run ingestion on a fixed interval and keep the latest good snapshot.

    Failed refreshes are logged and leave the previous snapshot in place.
    """

    def __init__(
        self,
        builder: SnapshotBuilder,
        interval_seconds: Optional[int] = None,
        stale_seconds: Optional[int] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        include_history: Optional[bool] = None,
    ):
        self.builder = builder
        self.interval_seconds = interval_seconds or settings.poller.interval_seconds
        self.stale_after = timedelta(seconds=stale_seconds or settings.poller.stale_seconds)
        self.start_date = start_date
        self.end_date = end_date
        self.include_history = include_history
        self.scheduler = BackgroundScheduler()
        self.is_running = False
        self.last_error: Optional[str] = None
        self._snapshot: Optional[Snapshot] = None
        self._updated_at: Optional[datetime] = None
        self._lock = threading.Lock()

    def start(self):
        if not self.is_running:
            self.scheduler.add_job(
                self.refresh,
                IntervalTrigger(seconds=self.interval_seconds),
                id="refresh_snapshot",
                replace_existing=True,
                max_instances=1,
                next_run_time=datetime.now(),  # run immediately on startup
            )
            self.scheduler.start()
            self.is_running = True
            logger.info(f"Poller started, interval {self.interval_seconds}s")

    def shutdown(self):
        if self.is_running:
            self.scheduler.shutdown(wait=False)
            self.is_running = False
            logger.info("Poller stopped")

    def refresh(self) -> Optional[Snapshot]:
        """Run one ingestion pass. Returns the new snapshot or None on failure."""
        try:
            snapshot = self.builder.ingest(self.start_date, self.end_date, self.include_history)
        except FloodwatchError as e:
            self.last_error = e.message
            logger.error(f"Refresh failed: {e.message}")
            return None

        with self._lock:
            self._snapshot = snapshot
            self._updated_at = datetime.now(timezone.utc)
            self.last_error = None
        logger.info(f"Flood data updated: {snapshot.total_affected} affected, {snapshot.critical_areas} critical")
        return snapshot

    def current(self) -> Optional[Snapshot]:
        with self._lock:
            return self._snapshot

    def is_stale(self, now: Optional[datetime] = None) -> bool:
        with self._lock:
            if self._updated_at is None:
                return True
            now = now or datetime.now(timezone.utc)
            return now - self._updated_at > self.stale_after
