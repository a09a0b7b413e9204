"""
APScheduler-backed debounce for goal recomputation.

Each input edit pushes the single recompute job further into the future;
the job fires only once the user stops typing for the debounce window.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.date import DateTrigger

logger = logging.getLogger(__name__)

JOB_ID = "goal_recompute"


class DebouncedRecomputeScheduler:
    """
    Coalesces bursts of edits into one recompute.

    Runs on the caller's asyncio loop: the recompute callback executes
    as a coroutine job on that loop, never on a worker thread.
    """

    def __init__(
        self,
        callback: Callable[[], object],
        debounce_seconds: float = 0.6,
    ) -> None:
        """
        Initialize scheduler.

        Args:
            callback: Synchronous recompute entry point
            debounce_seconds: Quiet period required before firing
        """
        self._callback = callback
        self._debounce = timedelta(seconds=debounce_seconds)
        self.scheduler: Optional[AsyncIOScheduler] = None
        self.fired = 0

    def start(self) -> None:
        """Create and start the scheduler on the running event loop."""
        if self.scheduler is not None and self.scheduler.running:
            logger.warning("Debounce scheduler already running")
            return

        self.scheduler = AsyncIOScheduler(
            timezone="UTC",
            job_defaults={
                "coalesce": True,
                "max_instances": 1,
                "misfire_grace_time": 60,
            },
        )
        self.scheduler.start()
        logger.info(
            "Debounce scheduler started (window=%.0f ms)",
            self._debounce.total_seconds() * 1000,
        )

    def notify(self) -> None:
        """Register an edit: (re)arm the recompute deadline."""
        if self.scheduler is None:
            raise RuntimeError("Scheduler not initialized")

        run_date = datetime.now(timezone.utc) + self._debounce
        self.scheduler.add_job(
            self._run,
            trigger=DateTrigger(run_date=run_date, timezone="UTC"),
            id=JOB_ID,
            name="Goal recompute",
            replace_existing=True,
        )

    @property
    def pending(self) -> bool:
        """True while a recompute is armed but has not fired yet."""
        if self.scheduler is None:
            return False
        return self.scheduler.get_job(JOB_ID) is not None

    def cancel(self) -> None:
        """Drop a pending recompute without running it."""
        if self.pending and self.scheduler is not None:
            self.scheduler.remove_job(JOB_ID)

    async def _run(self) -> None:
        self.fired += 1
        logger.debug("Debounce window elapsed, recomputing")
        self._callback()

    def shutdown(self, wait: bool = False) -> None:
        """
        Shutdown scheduler.

        Args:
            wait: If True, wait for running jobs to complete
        """
        if self.scheduler is None or not self.scheduler.running:
            logger.warning("Debounce scheduler not running")
            return

        self.scheduler.shutdown(wait=wait)
        logger.info("Debounce scheduler shutdown (wait=%s)", wait)
