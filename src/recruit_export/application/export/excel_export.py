"""Application export – ExcelEncoder (openpyxl, write-only mode)."""
from __future__ import annotations

import io
from datetime import datetime
from decimal import Decimal
from typing import Any

from openpyxl import Workbook
from openpyxl.cell import WriteOnlyCell
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from recruit_export.application.export.source import RowSource
from recruit_export.application.export.values import CellKind, CellValue

__all__ = ["ExcelEncoder"]

DATE_FORMAT = "yyyy-mm-dd"
DATETIME_FORMAT = "yyyy-mm-dd hh:mm:ss"


def _clean(text: str) -> str:
    """Drop control characters XML cannot carry (openpyxl rejects them)."""
    return ILLEGAL_CHARACTERS_RE.sub("", text)


class ExcelEncoder:
    """Exports rows to an ``.xlsx`` workbook.

    The workbook is opened in write-only mode, so rows are flushed as they
    are appended and only the current chunk is held in memory.  When a sheet
    reaches ``max_rows_per_sheet`` data rows a new sheet is started, named
    ``<prefix>_<n>``, with its own header row.
    """

    file_extension = "xlsx"
    mime_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def __init__(
        self,
        *,
        max_rows_per_sheet: int = 50_000,
        chunk_size: int = 500,
        sheet_prefix: str = "Data",
    ) -> None:
        if max_rows_per_sheet < 1:
            raise ValueError("max_rows_per_sheet must be >= 1")
        self._max_rows = max_rows_per_sheet
        self._chunk_size = chunk_size
        self._prefix = sheet_prefix

    def encode(self, source: RowSource[Any]) -> bytes:
        wb = Workbook(write_only=True)
        headers = source.headers()
        sheet_index = 1
        ws = self._new_sheet(wb, headers, sheet_index)
        rows_in_sheet = 0

        for chunk in source.chunks(self._chunk_size):
            for row in chunk:
                if rows_in_sheet >= self._max_rows:
                    sheet_index += 1
                    ws = self._new_sheet(wb, headers, sheet_index)
                    rows_in_sheet = 0
                ws.append([self._cell(ws, value) for value in source.row_values(row)])
                rows_in_sheet += 1

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()

    def _new_sheet(self, wb: Workbook, headers: list[str], index: int) -> Any:
        ws = wb.create_sheet(title=f"{self._prefix}_{index}")
        # column widths must be set before the first append in write-only mode
        for col_idx, header in enumerate(headers, start=1):
            ws.column_dimensions[get_column_letter(col_idx)].width = min(max(len(header) + 2, 12), 50)
        bold = Font(bold=True)
        header_cells = []
        for header in headers:
            cell = WriteOnlyCell(ws, value=_clean(header))
            cell.font = bold
            header_cells.append(cell)
        ws.append(header_cells)
        return ws

    @staticmethod
    def _cell(ws: Any, value: CellValue) -> Any:
        match value.kind:
            case CellKind.NULL:
                return None
            case CellKind.BOOL:
                return value.value
            case CellKind.NUMBER:
                number = value.value
                return number if isinstance(number, (int, float, Decimal)) else float(number)
            case CellKind.DATE:
                cell = WriteOnlyCell(ws, value=value.value)
                cell.number_format = DATE_FORMAT
                return cell
            case CellKind.DATETIME:
                moment: datetime = value.value
                # Excel has no timezone support
                cell = WriteOnlyCell(ws, value=moment.replace(tzinfo=None))
                cell.number_format = DATETIME_FORMAT
                return cell
            case _:
                return _clean(value.as_text())
