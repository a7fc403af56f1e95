"""Application export – CellValue, the tagged value every encoder consumes."""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

__all__ = ["CellKind", "CellValue"]


class CellKind(str, Enum):
    NULL = "null"
    NUMBER = "number"
    BOOL = "bool"
    DATE = "date"
    DATETIME = "datetime"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class CellValue:
    """A single extracted value, classified once at the extractor layer."""

    kind: CellKind
    value: Any = None

    @classmethod
    def of(cls, raw: Any) -> "CellValue":
        """Classify *raw*; anything unrecognised becomes TEXT via ``str()``."""
        if raw is None:
            return _NULL
        if isinstance(raw, CellValue):
            return raw
        # bool before number: bool is an int subclass
        if isinstance(raw, bool):
            return cls(CellKind.BOOL, raw)
        if isinstance(raw, numbers.Number):
            return cls(CellKind.NUMBER, raw)
        # datetime before date: datetime is a date subclass
        if isinstance(raw, datetime):
            return cls(CellKind.DATETIME, raw)
        if isinstance(raw, date):
            return cls(CellKind.DATE, raw)
        if isinstance(raw, Enum):
            return cls(CellKind.TEXT, raw.name)
        return cls(CellKind.TEXT, str(raw))

    @property
    def is_null(self) -> bool:
        return self.kind is CellKind.NULL

    def as_text(self) -> str:
        """Default textual rendering (ISO-8601 for dates, empty for null)."""
        if self.kind is CellKind.NULL:
            return ""
        if self.kind in (CellKind.DATE, CellKind.DATETIME):
            return self.value.isoformat()
        return str(self.value)


_NULL = CellValue(CellKind.NULL)
