"""Deadline sweeper - periodic overdue check."""

import logging
from datetime import datetime, timezone

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .core.store import TaskStore
from .core.tasks import Task, filter_overdue
from .ports.notifier import Notifier

logger = logging.getLogger(__name__)

JOB_ID = "deadline_sweep"
DEFAULT_INTERVAL_SECONDS = 60


class DeadlineSweeper:
    """
    Notify about overdue, incomplete tasks on a fixed interval.

    Every sweep notifies once per overdue task; nothing is deduplicated
    across sweeps. Use as a context manager so the interval job is always
    cancelled when the owning session ends.
    """

    def __init__(
        self,
        store: TaskStore,
        notifier: Notifier,
        interval_seconds: int = DEFAULT_INTERVAL_SECONDS,
        scheduler=None,
    ):
        if interval_seconds <= 0:
            raise ValueError(f"Sweep interval must be positive, got {interval_seconds}")
        self.store = store
        self.notifier = notifier
        self.interval_seconds = interval_seconds
        # An injected scheduler may carry other jobs; only shut down our own
        self._owns_scheduler = scheduler is None
        self._scheduler = scheduler if scheduler is not None else BackgroundScheduler(timezone="UTC")
        self._job = None

    @property
    def running(self) -> bool:
        return self._job is not None

    def sweep(self, now: datetime | None = None) -> list[Task]:
        """Run one overdue check against the store's current contents."""
        now = now or datetime.now(timezone.utc)
        overdue = filter_overdue(self.store.snapshot(), now)

        for task in overdue:
            try:
                self.notifier.notify(task.text)
            except Exception as e:
                logger.error(f"Failed to notify for task {task.id}: {e}")

        if overdue:
            logger.info(f"Sweep found {len(overdue)} overdue task(s)")
        else:
            logger.debug("Sweep found no overdue tasks")
        return overdue

    def start(self) -> None:
        """Schedule the sweep and start the scheduler."""
        if self._job is not None:
            raise RuntimeError("Deadline sweeper already started")

        self._job = self._scheduler.add_job(
            self.sweep,
            IntervalTrigger(seconds=self.interval_seconds),
            id=JOB_ID,
            replace_existing=True,
        )
        if not self._scheduler.running:
            self._scheduler.start()
        logger.info(f"Deadline sweep scheduled every {self.interval_seconds}s")

    def stop(self) -> None:
        """Cancel the sweep job. Safe to call more than once."""
        if self._job is None:
            return

        job, self._job = self._job, None
        job.remove()
        if self._owns_scheduler and self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        logger.info("Deadline sweep stopped")

    def __enter__(self) -> "DeadlineSweeper":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
