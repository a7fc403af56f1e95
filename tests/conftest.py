"""Shared fixtures for the recruit-export test suite."""
from __future__ import annotations

from concurrent.futures import Executor, Future
from datetime import UTC, datetime
from typing import Any

import pytest

from recruit_export.application.export import ColumnDef
from recruit_export.application.pagination import Page, PageRequest
from recruit_export.kernel.time import FrozenClock


@pytest.fixture
def clock() -> FrozenClock:
    """Frozen clock pinned to 2026-01-01 12:00 UTC."""
    return FrozenClock(datetime(2026, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def columns() -> list[ColumnDef[dict[str, Any]]]:
    return [ColumnDef.of("id", "ID"), ColumnDef.of("name", "Name")]


def make_rows(count: int) -> list[dict[str, Any]]:
    return [{"id": i, "name": f"row-{i}"} for i in range(count)]


class CountingPageFetch:
    """page_fetch over a list that records every call."""

    def __init__(self, rows: list[Any]) -> None:
        self.rows = rows
        self.calls: list[tuple[int, int]] = []

    def __call__(self, page: int, size: int) -> Page[Any]:
        self.calls.append((page, size))
        return Page.of(self.rows, PageRequest(page=page, size=size))


@pytest.fixture
def rows_factory():
    return make_rows


@pytest.fixture
def fetch_factory():
    return CountingPageFetch


class InlineExecutor(Executor):
    """Executor running each task on the submitting thread."""

    def submit(self, fn, /, *args, **kwargs):  # type: ignore[override]
        future: Future[Any] = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        return future


@pytest.fixture
def inline_executor() -> InlineExecutor:
    return InlineExecutor()
