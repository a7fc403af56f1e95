"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Zero-based page index and page size."""

    page: int = 0
    size: int = 100

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError(f"page must be >= 0, got {self.page}")
        if self.size < 1:
            raise ValueError(f"size must be >= 1, got {self.size}")

    @classmethod
    def containing(cls, offset: int, size: int) -> "PageRequest":
        """The page of *size* rows that starts at *offset* (a multiple of *size*)."""
        if size < 1:
            raise ValueError(f"size must be >= 1, got {size}")
        if offset % size:
            raise ValueError(f"offset {offset} is not aligned to page size {size}")
        return cls(page=offset // size, size=size)

    @property
    def offset(self) -> int:
        return self.page * self.size


__all__ = ["PageRequest"]
