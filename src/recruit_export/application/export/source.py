"""Application export – RowSource and its list- and page-backed forms.

A row source hands rows to an encoder in ``offset``/``limit`` slices so that
no encoder needs the whole relation in memory at once.
"""
from __future__ import annotations

import abc
from typing import Any, Callable, Generic, Iterator, Sequence, TypeVar

from recruit_export.application.export.request import ColumnDef
from recruit_export.application.export.values import CellValue
from recruit_export.application.pagination import Page, PageRequest

__all__ = ["ListRowSource", "PageFetch", "PagedRowSource", "RowSource"]

T = TypeVar("T")

PageFetch = Callable[[int, int], Page[T]]
"""``page_fetch(page_index, page_size) -> Page`` with the relation's total."""


def _check_window(offset: int, limit: int) -> None:
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")


class RowSource(abc.ABC, Generic[T]):
    """Port: a relation of rows of type ``T`` plus its column layout."""

    def __init__(self, columns: Sequence[ColumnDef[T]]) -> None:
        self._columns = tuple(columns)

    def headers(self) -> list[str]:
        return [col.header for col in self._columns]

    def extractors(self) -> list[Callable[[T], Any]]:
        return [col.extract for col in self._columns]

    @abc.abstractmethod
    def fetch(self, offset: int, limit: int) -> list[T]:
        """Return at most ``limit`` rows starting at ``offset`` (empty past the end)."""

    @abc.abstractmethod
    def total_count(self) -> int: ...

    def row_values(self, row: T) -> list[CellValue]:
        """Apply every extractor to *row*, in header order."""
        return [CellValue.of(col.extract(row)) for col in self._columns]

    def chunks(self, chunk_size: int) -> Iterator[list[T]]:
        """Yield successive ``fetch(offset, chunk_size)`` slices until exhausted."""
        total = self.total_count()
        offset = 0
        while offset < total:
            rows = self.fetch(offset, chunk_size)
            if not rows:
                # relation shrank underneath us
                return
            yield rows
            offset += chunk_size


class ListRowSource(RowSource[T]):
    """Row source over an already materialised, ordered sequence."""

    def __init__(self, rows: Sequence[T], columns: Sequence[ColumnDef[T]]) -> None:
        super().__init__(columns)
        self._rows = rows

    def fetch(self, offset: int, limit: int) -> list[T]:
        _check_window(offset, limit)
        size = len(self._rows)
        return list(self._rows[min(offset, size):min(offset + limit, size)])

    def total_count(self) -> int:
        return len(self._rows)


class PagedRowSource(RowSource[T]):
    """Row source that pulls pages from a ``page_fetch`` callable.

    ``fetch(offset, limit)`` asks for page ``offset // limit`` of size
    ``limit``, so every call made during one export must use the same
    ``limit``; an ``offset`` that is not a multiple of ``limit`` is rejected.
    The relation's total is cached for the lifetime of the instance: it comes
    from the first page fetched, or from a single ``page_fetch(0, 1)`` when
    :meth:`total_count` is called first.
    """

    def __init__(self, page_fetch: PageFetch[T], columns: Sequence[ColumnDef[T]]) -> None:
        super().__init__(columns)
        self._page_fetch = page_fetch
        self._total: int | None = None

    def fetch(self, offset: int, limit: int) -> list[T]:
        _check_window(offset, limit)
        request = PageRequest.containing(offset, limit)
        if self._total is not None and offset >= self._total:
            return []
        page = self._page_fetch(request.page, request.size)
        if self._total is None:
            self._total = max(page.total, 0)
        return list(page.items[:limit])

    def total_count(self) -> int:
        if self._total is None:
            self._total = max(self._page_fetch(0, 1).total, 0)
        return self._total
