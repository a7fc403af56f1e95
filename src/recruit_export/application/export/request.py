"""Application export – ExportFormat, ColumnDef, ExportScope and ExportRequest."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from recruit_export.application.export.errors import UnsupportedExportFormatError
from recruit_export.application.pagination import PageRequest
from recruit_export.kernel.errors import FieldError, ValidationError

__all__ = ["ColumnDef", "ExportFormat", "ExportRequest", "ExportScope"]

T = TypeVar("T")

_ALIASES = {"xlsx": "excel"}


class ExportFormat(str, Enum):
    CSV = "csv"
    EXCEL = "excel"
    PDF = "pdf"

    @classmethod
    def parse(cls, tag: "ExportFormat | str") -> "ExportFormat":
        """Resolve a format tag case-insensitively (``"xlsx"`` means EXCEL)."""
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            key = tag.strip().lower()
            try:
                return cls(_ALIASES.get(key, key))
            except ValueError:
                pass
        raise UnsupportedExportFormatError(tag)


def _read(row: Any, key: str) -> Any:
    if isinstance(row, dict):
        return row.get(key)
    return getattr(row, key, None)


@dataclass(frozen=True)
class ColumnDef(Generic[T]):
    """One export column: the header text and how to pull its value from a row."""

    header: str
    extract: Callable[[T], Any]

    @classmethod
    def of(cls, key: str, header: str | None = None) -> "ColumnDef[Any]":
        """Column reading *key* from a dict row or an attribute of an object row."""
        return cls(header=header or key, extract=lambda row: _read(row, key))


@dataclass(frozen=True)
class ExportScope:
    """Either every row of the relation or one page of it."""

    page: PageRequest | None = None

    @classmethod
    def all_rows(cls) -> "ExportScope":
        return cls()

    @classmethod
    def paged(cls, page: int, size: int) -> "ExportScope":
        return cls(PageRequest(page=page, size=size))

    @property
    def is_all(self) -> bool:
        return self.page is None


@dataclass(frozen=True)
class ExportRequest:
    """Describes a data export to be performed."""

    format: ExportFormat
    scope: ExportScope = ExportScope()

    @classmethod
    def from_params(
        cls,
        format: ExportFormat | str | None,
        *,
        export_all: bool = False,
        page: int = 0,
        size: int = 100,
    ) -> "ExportRequest":
        """Validate raw request parameters.

        Raises :class:`ValidationError` listing every invalid field.
        """
        errors: list[FieldError] = []
        resolved: ExportFormat | None = None
        if format is None:
            errors.append(FieldError("format", "export format is required"))
        else:
            try:
                resolved = ExportFormat.parse(format)
            except UnsupportedExportFormatError as exc:
                errors.extend(exc.errors)
        if not export_all:
            if page < 0:
                errors.append(FieldError("page", "page must be >= 0"))
            if size < 1:
                errors.append(FieldError("size", "size must be >= 1"))
        if errors or resolved is None:
            raise ValidationError("Invalid export request", errors=errors)
        scope = ExportScope.all_rows() if export_all else ExportScope.paged(page, size)
        return cls(format=resolved, scope=scope)
