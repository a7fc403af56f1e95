"""Application export – CsvEncoder."""
from __future__ import annotations

import csv
import io
from typing import Any

from recruit_export.application.export.source import RowSource

__all__ = ["CsvEncoder"]


class CsvEncoder:
    """Streams rows into a CSV document (in-memory, UTF-8).

    Minimal quoting: a field is quoted only when it holds the delimiter, a
    double quote or a line break, and inner quotes are doubled.
    """

    file_extension = "csv"
    mime_type = "text/csv"

    def __init__(
        self,
        delimiter: str = ",",
        *,
        bom: bool = False,
        chunk_size: int = 500,
    ) -> None:
        self._delimiter = delimiter
        self._bom = bom
        self._chunk_size = chunk_size

    def encode(self, source: RowSource[Any]) -> bytes:
        """Return the complete CSV content as bytes (optional BOM)."""
        buf = io.StringIO()
        if self._bom:
            buf.write("\ufeff")  # BOM for Excel compatibility

        writer = csv.writer(
            buf,
            delimiter=self._delimiter,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator="\n",
        )
        writer.writerow(source.headers())

        for chunk in source.chunks(self._chunk_size):
            writer.writerows(
                [cell.as_text() for cell in source.row_values(row)] for row in chunk
            )

        return buf.getvalue().encode("utf-8")
