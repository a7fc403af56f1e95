"""Application export – row sources, encoders, result store and orchestration."""
from recruit_export.application.export.artifact import ExportArtifact
from recruit_export.application.export.csv_export import CsvEncoder
from recruit_export.application.export.encoders import Encoder, default_encoders, encoder_for
from recruit_export.application.export.errors import (
    ExportLimitExceededError,
    ExportProcessingError,
    UnsupportedExportFormatError,
)
from recruit_export.application.export.excel_export import ExcelEncoder
from recruit_export.application.export.pdf_export import PdfEncoder
from recruit_export.application.export.request import ColumnDef, ExportFormat, ExportRequest, ExportScope
from recruit_export.application.export.service import ExportHandle, ExportService, ExportStatus
from recruit_export.application.export.source import ListRowSource, PagedRowSource, RowSource
from recruit_export.application.export.store import ExportStore, StoredExport
from recruit_export.application.export.sweeper import ExpirySweeper
from recruit_export.application.export.values import CellKind, CellValue

__all__ = [
    "CellKind",
    "CellValue",
    "ColumnDef",
    "CsvEncoder",
    "Encoder",
    "ExcelEncoder",
    "ExpirySweeper",
    "ExportArtifact",
    "ExportFormat",
    "ExportHandle",
    "ExportLimitExceededError",
    "ExportProcessingError",
    "ExportRequest",
    "ExportScope",
    "ExportService",
    "ExportStatus",
    "ExportStore",
    "ListRowSource",
    "PagedRowSource",
    "PdfEncoder",
    "RowSource",
    "StoredExport",
    "UnsupportedExportFormatError",
    "default_encoders",
    "encoder_for",
]
