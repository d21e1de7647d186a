"""Background polling for due reminders."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler as APScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .config import BaseConfig
from .models.reminder import Reminder
from .services.tracker import HabitTracker

logger = logging.getLogger("habitflow.scheduler")

REMINDER_JOB_ID = "due_reminders"


class BackgroundScheduler:
    """Checks for due reminders on an interval and hands them to ``notify``.

    Delivering the notification (and deciding to snooze or mark it done) is
    up to the caller; this class only finds reminders that are due.
    """

    def __init__(
        self,
        tracker: HabitTracker,
        notify: Callable[[Reminder], None],
        *,
        config: Optional[BaseConfig] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the scheduler.

        Args:
            tracker: Service exposing the due-reminder query
            notify: Called once per due reminder on each poll
            config: Supplies REMINDER_POLL_SECONDS (defaults to BaseConfig())
            clock: Source of the current local time
        """
        self.tracker = tracker
        self.notify = notify
        self.config = config or BaseConfig()
        self.clock = clock
        self.scheduler: Optional[APScheduler] = None

    def start(self) -> None:
        """Start polling."""
        if self.scheduler is not None:
            logger.warning("Scheduler already running")
            return

        self.scheduler = APScheduler()
        self.scheduler.add_job(
            func=self.check_due_reminders,
            trigger=IntervalTrigger(seconds=self.config.REMINDER_POLL_SECONDS),
            id=REMINDER_JOB_ID,
            name="Due Reminder Check",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self.scheduler.start()
        logger.info(f"Reminder polling every {self.config.REMINDER_POLL_SECONDS}s")

    def stop(self) -> None:
        """Stop the background scheduler gracefully."""
        if self.scheduler is not None:
            self.scheduler.shutdown(wait=True)
            self.scheduler = None
            logger.info("Background scheduler stopped")

    @property
    def running(self) -> bool:
        return self.scheduler is not None and self.scheduler.running

    def check_due_reminders(self) -> list[Reminder]:
        """Run one poll; returns the reminders that were handed to ``notify``."""
        try:
            due = self.tracker.due_reminders(now=self.clock())
        except Exception as exc:
            logger.error(f"Due reminder query failed: {exc}", exc_info=True)
            return []

        delivered = []
        for reminder in due:
            try:
                self.notify(reminder)
                delivered.append(reminder)
            except Exception as exc:
                # One broken reminder must not starve the rest.
                logger.error(
                    f"Reminder callback failed for habit {reminder.habit_id}: {exc}",
                    exc_info=True,
                )
        if due:
            logger.info(f"Processed {len(delivered)}/{len(due)} due reminders")
        return delivered


def create_scheduler(
    tracker: HabitTracker,
    notify: Callable[[Reminder], None],
    *,
    config: Optional[BaseConfig] = None,
    auto_start: bool = False,
) -> BackgroundScheduler:
    """Create and optionally start a reminder scheduler."""
    scheduler = BackgroundScheduler(tracker, notify, config=config)
    if auto_start:
        scheduler.start()
    return scheduler
