"""Application export – Encoder protocol and per-format selection."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from recruit_export.application.export.csv_export import CsvEncoder
from recruit_export.application.export.errors import UnsupportedExportFormatError
from recruit_export.application.export.excel_export import ExcelEncoder
from recruit_export.application.export.pdf_export import PdfEncoder
from recruit_export.application.export.request import ExportFormat
from recruit_export.application.export.source import RowSource

__all__ = ["Encoder", "default_encoders", "encoder_for"]


@runtime_checkable
class Encoder(Protocol):
    """Port: turn a row source into one binary format."""

    file_extension: str
    mime_type: str

    def encode(self, source: RowSource[Any]) -> bytes: ...


def default_encoders() -> dict[ExportFormat, Encoder]:
    return {
        ExportFormat.CSV: CsvEncoder(),
        ExportFormat.EXCEL: ExcelEncoder(),
        ExportFormat.PDF: PdfEncoder(),
    }


def encoder_for(export_format: ExportFormat | str) -> Encoder:
    """Return a fresh encoder for *export_format*.

    Raises :class:`UnsupportedExportFormatError` for unknown tags.
    """
    resolved = ExportFormat.parse(export_format)
    try:
        return default_encoders()[resolved]
    except KeyError:
        raise UnsupportedExportFormatError(export_format) from None
