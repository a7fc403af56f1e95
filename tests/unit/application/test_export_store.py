"""Unit tests for ExportStore and ExpirySweeper."""

from __future__ import annotations

import threading
import time
from datetime import timedelta

import pytest

from recruit_export.application.export import ExpirySweeper, ExportArtifact, ExportStore
from recruit_export.kernel.time import FrozenClock


def _artifact(name: str = "exported-data.csv") -> ExportArtifact:
    return ExportArtifact(data=b"ID\n1\n", filename=name, content_type="text/csv")


# ---------------------------------------------------------------------------
# ExportArtifact
# ---------------------------------------------------------------------------


class TestExportArtifact:
    def test_size_and_disposition(self) -> None:
        art = _artifact()
        assert art.size == 5
        assert art.content_disposition == 'attachment; filename="exported-data.csv"'

    def test_repr_hides_payload(self) -> None:
        assert "b'ID" not in repr(_artifact())


# ---------------------------------------------------------------------------
# ExportStore
# ---------------------------------------------------------------------------


class TestExportStore:
    def test_rejects_non_positive_ttl(self) -> None:
        with pytest.raises(ValueError):
            ExportStore(ttl=timedelta(0))

    def test_put_and_get(self, clock: FrozenClock) -> None:
        store = ExportStore(clock=clock)
        entry = store.put("a", _artifact())
        assert store.get("a") == _artifact()
        assert entry.created_at == clock.now()
        assert entry.expires_at == clock.now() + timedelta(minutes=5)
        assert "a" in store
        assert len(store) == 1

    def test_unknown_id(self, clock: FrozenClock) -> None:
        store = ExportStore(clock=clock)
        assert store.get("nope") is None
        assert store.entry("nope") is None
        assert not store.was_expired("nope")

    def test_expired_entry_is_unreadable_before_sweep(self, clock: FrozenClock) -> None:
        store = ExportStore(ttl=timedelta(minutes=1), clock=clock)
        store.put("a", _artifact())
        clock.advance(seconds=59)
        assert store.get("a") is not None
        clock.advance(seconds=1)
        assert store.get("a") is None
        assert "a" not in store
        assert store.was_expired("a")

    def test_per_entry_ttl(self, clock: FrozenClock) -> None:
        store = ExportStore(ttl=timedelta(minutes=5), clock=clock)
        store.put("short", _artifact(), ttl=timedelta(seconds=10))
        clock.advance(seconds=10)
        assert store.get("short") is None

    @pytest.mark.parametrize("ttl", [timedelta(0), timedelta(seconds=-1)])
    def test_put_rejects_non_positive_ttl(self, clock: FrozenClock, ttl: timedelta) -> None:
        store = ExportStore(clock=clock)
        with pytest.raises(ValueError):
            store.put("a", _artifact(), ttl=ttl)
        assert len(store) == 0

    def test_sweep_evicts_and_leaves_tombstone(self, clock: FrozenClock) -> None:
        store = ExportStore(ttl=timedelta(minutes=1), clock=clock)
        store.put("old", _artifact())
        clock.advance(seconds=30)
        store.put("new", _artifact())
        clock.advance(seconds=30)
        assert store.sweep() == ["old"]
        assert len(store) == 1
        assert store.was_expired("old")
        assert not store.was_expired("new")

    def test_tombstone_dropped_after_one_ttl(self, clock: FrozenClock) -> None:
        store = ExportStore(ttl=timedelta(minutes=1), clock=clock)
        store.put("a", _artifact())
        clock.advance(minutes=1)
        store.sweep()
        clock.advance(minutes=1)
        assert store.sweep() == []
        assert not store.was_expired("a")

    def test_put_again_clears_tombstone(self, clock: FrozenClock) -> None:
        store = ExportStore(ttl=timedelta(minutes=1), clock=clock)
        store.put("a", _artifact())
        clock.advance(minutes=1)
        store.sweep()
        store.put("a", _artifact())
        assert not store.was_expired("a")
        assert store.get("a") is not None

    def test_remove(self, clock: FrozenClock) -> None:
        store = ExportStore(clock=clock)
        store.put("a", _artifact())
        assert store.remove("a") is True
        assert store.remove("a") is False
        assert store.get("a") is None

    def test_concurrent_put_and_get(self, clock: FrozenClock) -> None:
        store = ExportStore(clock=clock)
        errors: list[BaseException] = []

        def worker(n: int) -> None:
            try:
                for i in range(200):
                    eid = f"{n}-{i}"
                    store.put(eid, _artifact())
                    assert store.get(eid) is not None
            except BaseException as exc:  # noqa: BLE001
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert errors == []
        assert len(store) == 1600


# ---------------------------------------------------------------------------
# ExpirySweeper
# ---------------------------------------------------------------------------


class TestExpirySweeper:
    def test_rejects_non_positive_interval(self, clock: FrozenClock) -> None:
        with pytest.raises(ValueError):
            ExpirySweeper(ExportStore(clock=clock), interval_seconds=0)

    def test_sweeps_in_background(self, clock: FrozenClock) -> None:
        store = ExportStore(ttl=timedelta(minutes=1), clock=clock)
        store.put("a", _artifact())
        clock.advance(minutes=2)
        with ExpirySweeper(store, interval_seconds=0.01) as sweeper:
            assert sweeper.is_running
            deadline = time.monotonic() + 5
            while len(store) and time.monotonic() < deadline:
                time.sleep(0.01)
        assert len(store) == 0
        assert not sweeper.is_running

    def test_start_is_idempotent(self, clock: FrozenClock) -> None:
        sweeper = ExpirySweeper(ExportStore(clock=clock), interval_seconds=60)
        sweeper.start()
        sweeper.start()
        assert sweeper.is_running
        sweeper.stop()
        assert not sweeper.is_running

    def test_restart_after_stop(self, clock: FrozenClock) -> None:
        store = ExportStore(ttl=timedelta(minutes=1), clock=clock)
        sweeper = ExpirySweeper(store, interval_seconds=0.01)
        sweeper.start()
        sweeper.stop()
        store.put("a", _artifact())
        clock.advance(minutes=2)
        with sweeper:
            deadline = time.monotonic() + 5
            while len(store) and time.monotonic() < deadline:
                time.sleep(0.01)
        assert len(store) == 0

    def test_survives_failing_sweep(self, clock: FrozenClock) -> None:
        calls: list[int] = []

        class FlakyStore(ExportStore):
            def sweep(self) -> list[str]:
                calls.append(1)
                if len(calls) == 1:
                    raise RuntimeError("boom")
                return super().sweep()

        with ExpirySweeper(FlakyStore(clock=clock), interval_seconds=0.01):
            deadline = time.monotonic() + 5
            while len(calls) < 2 and time.monotonic() < deadline:
                time.sleep(0.01)
        assert len(calls) >= 2
