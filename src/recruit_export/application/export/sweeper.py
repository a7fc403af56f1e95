"""Application export – ExpirySweeper, an APScheduler interval job."""
from __future__ import annotations

import threading

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from recruit_export.application.export.store import ExportStore
from recruit_export.observability.logging import get_logger

__all__ = ["ExpirySweeper"]

logger = get_logger(__name__)

JOB_ID = "export-expiry-sweep"


class ExpirySweeper:
    """Runs :meth:`ExportStore.sweep` every ``interval_seconds``.

    The sweep is a single interval job on a daemon ``BackgroundScheduler``;
    overlapping runs are coalesced.  Entries become unreadable at their
    expiry instant regardless of when the next run happens.
    """

    def __init__(self, store: ExportStore, interval_seconds: float = 30.0) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._store = store
        self._interval = interval_seconds
        self._scheduler: BackgroundScheduler | None = None
        self._lock = threading.Lock()

    def start(self) -> None:
        with self._lock:
            if self._scheduler is not None and self._scheduler.running:
                return
            # a stopped scheduler keeps its jobs; start from a fresh one
            scheduler = BackgroundScheduler(daemon=True)
            scheduler.add_job(
                self._sweep,
                trigger=IntervalTrigger(seconds=self._interval),
                id=JOB_ID,
                max_instances=1,
                coalesce=True,
            )
            scheduler.start()
            self._scheduler = scheduler
        logger.debug("export.sweeper_started", interval_seconds=self._interval)

    def stop(self, wait: bool = True) -> None:
        with self._lock:
            scheduler, self._scheduler = self._scheduler, None
        if scheduler is not None and scheduler.running:
            scheduler.shutdown(wait=wait)

    @property
    def is_running(self) -> bool:
        scheduler = self._scheduler
        return scheduler is not None and scheduler.running

    def _sweep(self) -> None:
        try:
            self._store.sweep()
        except Exception:  # noqa: BLE001 - the next run retries
            logger.exception("export.sweep_failed")

    def __enter__(self) -> "ExpirySweeper":
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()
