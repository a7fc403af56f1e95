"""Application export – ExportService: limit check, encode, store, poll."""
from __future__ import annotations

import asyncio
import threading
import time
import uuid
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Callable, Mapping, Sequence, TypeVar

from recruit_export.application.export.artifact import ExportArtifact
from recruit_export.application.export.encoders import Encoder, default_encoders
from recruit_export.application.export.errors import (
    ExportLimitExceededError,
    ExportProcessingError,
    UnsupportedExportFormatError,
)
from recruit_export.application.export.request import ColumnDef, ExportFormat
from recruit_export.application.export.source import (
    ListRowSource,
    PageFetch,
    PagedRowSource,
    RowSource,
)
from recruit_export.application.export.store import ExportStore
from recruit_export.application.export.sweeper import ExpirySweeper
from recruit_export.config.export import ExportSettings
from recruit_export.kernel.errors import BaseError
from recruit_export.kernel.time import Clock, SystemClock
from recruit_export.observability.logging import get_logger

__all__ = ["ExportHandle", "ExportService", "ExportStatus", "SourceBuilder"]

T = TypeVar("T")

SourceBuilder = Callable[[], RowSource[Any]]

logger = get_logger(__name__)

FILENAME_STEM = "exported-data"


class ExportStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"
    EXPIRED = "expired"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ExportHandle:
    """Returned by :meth:`ExportService.submit`; resolves to the export id."""

    export_id: str
    format: ExportFormat
    future: Future[str]

    def done(self) -> bool:
        return self.future.done()

    def result(self, timeout: float | None = None) -> str:
        """Block until the export finishes; re-raises the export's failure."""
        return self.future.result(timeout)

    def exception(self, timeout: float | None = None) -> BaseException | None:
        return self.future.exception(timeout)


@dataclass(frozen=True)
class _Failure:
    error: BaseException
    failed_at: datetime


class ExportService:
    """Runs exports synchronously or on a bounded worker pool.

    Each export checks the relation size against the format's ceiling,
    encodes the rows, and registers the artifact in the :class:`ExportStore`
    under an id generated at submission time, so the id can be polled while
    the export is still running.  Failures are never stored as artifacts:
    they surface through the handle's future and through :meth:`status`.
    """

    def __init__(
        self,
        settings: ExportSettings | None = None,
        store: ExportStore | None = None,
        *,
        clock: Clock | None = None,
        executor: Executor | None = None,
        encoders: Mapping[ExportFormat, Encoder] | None = None,
    ) -> None:
        self._settings = settings or ExportSettings()
        self._clock: Clock = clock or SystemClock()
        self._store = store or ExportStore(
            ttl=timedelta(minutes=self._settings.expiration_minutes),
            clock=self._clock,
        )
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self._settings.max_workers,
            thread_name_prefix="export",
        )
        self._encoders: dict[ExportFormat, Encoder] = dict(encoders or default_encoders())
        self._sweeper = ExpirySweeper(self._store, self._settings.sweep_interval_seconds)
        self._pending: dict[str, Future[str]] = {}
        self._failures: dict[str, _Failure] = {}
        self._lock = threading.Lock()
        self._closed = False

    @property
    def store(self) -> ExportStore:
        return self._store

    @property
    def settings(self) -> ExportSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the background expiry sweeper.

        Optional: the first stored artifact starts it as well.
        """
        self._closed = False
        self._sweeper.start()

    def shutdown(self, wait: bool = True) -> None:
        self._closed = True
        self._sweeper.stop()
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "ExportService":
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.shutdown()

    # ------------------------------------------------------------------
    # Synchronous export
    # ------------------------------------------------------------------

    def export(self, export_format: ExportFormat | str, source: RowSource[Any]) -> ExportArtifact:
        """Check the ceiling, encode *source* and return the artifact (not stored)."""
        fmt = ExportFormat.parse(export_format)
        total = source.total_count()
        max_allowed = self._settings.limit_for(fmt)
        if total > max_allowed:
            logger.warning(
                "export.limit_exceeded",
                format=fmt.value,
                max_allowed=max_allowed,
                requested=total,
            )
            raise ExportLimitExceededError(fmt, max_allowed, total)

        encoder = self._encoder(fmt)
        try:
            data = encoder.encode(source)
        except BaseError:
            raise
        except Exception as exc:
            raise ExportProcessingError(
                fmt, f"Failed to encode {fmt.value} export: {exc}", cause=exc
            ) from exc
        return ExportArtifact(
            data=data,
            filename=f"{FILENAME_STEM}.{encoder.file_extension}",
            content_type=encoder.mime_type,
        )

    def run_export(
        self,
        export_id: str,
        export_format: ExportFormat | str,
        build_source: SourceBuilder,
    ) -> str:
        """Build the source, export it and store the artifact under *export_id*."""
        fmt = ExportFormat.parse(export_format)
        log = logger.bind(export_id=export_id, format=fmt.value)
        log.info("export.started")
        t0 = time.monotonic()
        try:
            artifact = self.export(fmt, build_source())
        except Exception as exc:
            log.error("export.failed", error=repr(exc))
            raise
        if not self._closed:
            self._sweeper.start()
        entry = self._store.put(export_id, artifact)
        log.info(
            "export.completed",
            size=artifact.size,
            duration_ms=round((time.monotonic() - t0) * 1000, 2),
            expires_at=entry.expires_at.isoformat(),
        )
        return export_id

    # ------------------------------------------------------------------
    # Background export
    # ------------------------------------------------------------------

    def submit(self, export_format: ExportFormat | str, build_source: SourceBuilder) -> ExportHandle:
        """Queue an export on the worker pool and return immediately.

        An unknown format raises :class:`UnsupportedExportFormatError` here,
        before anything is queued.
        """
        fmt = ExportFormat.parse(export_format)
        export_id = uuid.uuid4().hex
        self._prune_failures()
        with self._lock:
            future = self._executor.submit(self.run_export, export_id, fmt, build_source)
            self._pending[export_id] = future
        future.add_done_callback(lambda f: self._on_done(export_id, f))
        logger.debug("export.submitted", export_id=export_id, format=fmt.value)
        return ExportHandle(export_id=export_id, format=fmt, future=future)

    def export_all(
        self,
        export_format: ExportFormat | str,
        columns: Sequence[ColumnDef[T]],
        rows: Sequence[T],
    ) -> ExportHandle:
        """Export an already materialised relation in the background."""
        return self.submit(export_format, lambda: ListRowSource(rows, columns))

    def export_page(
        self,
        export_format: ExportFormat | str,
        columns: Sequence[ColumnDef[T]],
        page_fetch: PageFetch[T],
    ) -> ExportHandle:
        """Export a relation read page by page through *page_fetch*."""
        return self.submit(export_format, lambda: PagedRowSource(page_fetch, columns))

    async def submit_async(self, export_format: ExportFormat | str, build_source: SourceBuilder) -> str:
        """Await an export from asyncio code without blocking the event loop."""
        handle = self.submit(export_format, build_source)
        return await asyncio.wrap_future(handle.future)

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------

    def result(self, export_id: str) -> ExportArtifact | None:
        """Return the artifact, or ``None`` if unknown, expired or still running."""
        return self._store.get(export_id)

    def status(self, export_id: str) -> ExportStatus:
        self._prune_failures()
        # a worker stores its artifact before its future resolves
        with self._lock:
            if export_id in self._failures:
                return ExportStatus.FAILED
            future = self._pending.get(export_id)
        if future is not None and not future.done():
            return ExportStatus.PENDING
        if self._store.get(export_id) is not None:
            return ExportStatus.READY
        if self._store.was_expired(export_id):
            return ExportStatus.EXPIRED
        if future is not None and (future.cancelled() or future.exception() is not None):
            # done callback has not run yet
            return ExportStatus.FAILED
        return ExportStatus.NOT_FOUND

    def failure(self, export_id: str) -> BaseException | None:
        """Return the error a failed export ended with, while it is retained."""
        with self._lock:
            failure = self._failures.get(export_id)
        return failure.error if failure is not None else None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _encoder(self, fmt: ExportFormat) -> Encoder:
        try:
            return self._encoders[fmt]
        except KeyError:
            raise UnsupportedExportFormatError(fmt) from None

    def _on_done(self, export_id: str, future: Future[str]) -> None:
        error = None if future.cancelled() else future.exception()
        with self._lock:
            self._pending.pop(export_id, None)
            if error is not None:
                self._failures[export_id] = _Failure(error, self._clock.now())

    def _prune_failures(self) -> None:
        cutoff = self._clock.now() - self._store.ttl
        with self._lock:
            stale = [eid for eid, f in self._failures.items() if f.failed_at <= cutoff]
            for eid in stale:
                del self._failures[eid]
