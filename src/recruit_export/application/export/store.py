"""Application export – ExportStore, the in-memory result store."""
from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta

from recruit_export.application.export.artifact import ExportArtifact
from recruit_export.kernel.time import Clock, SystemClock
from recruit_export.observability.logging import get_logger

__all__ = ["ExportStore", "StoredExport"]

logger = get_logger(__name__)


@dataclass(frozen=True)
class StoredExport:
    """An artifact registered under an export id, with its lifetime."""

    export_id: str
    artifact: ExportArtifact
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class ExportStore:
    """Thread-safe map of export id -> :class:`StoredExport`.

    Entries expire ``ttl`` after they are stored.  :meth:`get` already treats
    an expired entry as absent; :meth:`sweep` physically removes expired
    entries and is driven by :class:`~recruit_export.application.export.sweeper.ExpirySweeper`
    in production or called directly by tests with a frozen clock.

    Evicted ids are remembered for one further ``ttl`` so that
    :meth:`was_expired` can tell an expired export from an unknown one.
    """

    def __init__(self, ttl: timedelta = timedelta(minutes=5), clock: Clock | None = None) -> None:
        if ttl <= timedelta(0):
            raise ValueError("ttl must be positive")
        self._ttl = ttl
        self._clock: Clock = clock or SystemClock()
        self._entries: dict[str, StoredExport] = {}
        self._tombstones: dict[str, datetime] = {}
        self._lock = threading.Lock()

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def put(self, export_id: str, artifact: ExportArtifact, ttl: timedelta | None = None) -> StoredExport:
        """Store *artifact* under *export_id*, replacing any previous entry."""
        if ttl is None:
            ttl = self._ttl
        elif ttl <= timedelta(0):
            raise ValueError("ttl must be positive")
        now = self._clock.now()
        entry = StoredExport(
            export_id=export_id,
            artifact=artifact,
            created_at=now,
            expires_at=now + ttl,
        )
        with self._lock:
            self._entries[export_id] = entry
            self._tombstones.pop(export_id, None)
        return entry

    def entry(self, export_id: str) -> StoredExport | None:
        now = self._clock.now()
        with self._lock:
            entry = self._entries.get(export_id)
        if entry is None or entry.is_expired(now):
            return None
        return entry

    def get(self, export_id: str) -> ExportArtifact | None:
        entry = self.entry(export_id)
        return entry.artifact if entry is not None else None

    def remove(self, export_id: str) -> bool:
        with self._lock:
            return self._entries.pop(export_id, None) is not None

    def was_expired(self, export_id: str) -> bool:
        now = self._clock.now()
        with self._lock:
            if export_id in self._tombstones:
                return True
            entry = self._entries.get(export_id)
        return entry is not None and entry.is_expired(now)

    def sweep(self) -> list[str]:
        """Evict expired entries and stale tombstones; return the evicted ids."""
        now = self._clock.now()
        with self._lock:
            evicted = [eid for eid, entry in self._entries.items() if entry.is_expired(now)]
            for eid in evicted:
                del self._entries[eid]
                self._tombstones[eid] = now
            stale = [eid for eid, at in self._tombstones.items() if now - at >= self._ttl]
            for eid in stale:
                del self._tombstones[eid]
        for eid in evicted:
            logger.info("export.evicted", export_id=eid)
        return evicted

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, export_id: object) -> bool:
        return isinstance(export_id, str) and self.entry(export_id) is not None
