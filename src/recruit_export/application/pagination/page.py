"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
from typing import Generic, Sequence, TypeVar

from recruit_export.application.pagination.page_request import PageRequest

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """Rows of one page plus the size of the whole relation.

    ``total`` is what paged row sources rely on: it is the row count of the
    relation, not of this page.
    """

    items: Sequence[T]
    total: int
    page: int = 0
    size: int = 100

    @property
    def total_pages(self) -> int:
        if self.total <= 0:
            return 0
        return -(-self.total // self.size)

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @classmethod
    def of(cls, rows: Sequence[T], request: PageRequest) -> "Page[T]":
        """Cut the page *request* names out of an in-memory relation."""
        window = rows[request.offset:request.offset + request.size]
        return cls(items=list(window), total=len(rows), page=request.page, size=request.size)


__all__ = ["Page"]
