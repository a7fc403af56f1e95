"""Application export – export error types."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from recruit_export.kernel.errors import ApplicationError, FieldError, InfrastructureError, ValidationError

if TYPE_CHECKING:
    from recruit_export.application.export.request import ExportFormat

__all__ = [
    "ExportLimitExceededError",
    "ExportProcessingError",
    "UnsupportedExportFormatError",
]


class ExportLimitExceededError(ApplicationError):
    """The relation holds more rows than the format's configured ceiling."""

    default_code = "export_limit_exceeded"

    def __init__(
        self,
        export_format: ExportFormat,
        max_allowed: int,
        requested: int,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Export limit exceeded for {export_format.value}: "
            f"{requested} rows requested, at most {max_allowed} allowed",
            detail={
                "format": export_format.value,
                "max_allowed": max_allowed,
                "requested": requested,
            },
            **kwargs,
        )
        self.format = export_format
        self.max_allowed = max_allowed
        self.requested = requested


class UnsupportedExportFormatError(ValidationError, ValueError):
    """An unknown format tag reached format resolution."""

    default_code = "unsupported_export_format"

    def __init__(self, export_format: object, **kwargs: Any) -> None:
        message = f"Unsupported export format: {export_format!r}"
        kwargs.setdefault("errors", [FieldError("format", message)])
        super().__init__(message, **kwargs)
        self.format = export_format


class ExportProcessingError(InfrastructureError):
    """Encoding the rows into the target format failed."""

    default_code = "export_processing_error"

    def __init__(self, export_format: ExportFormat, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"format": export_format.value})
        super().__init__(message, **kwargs)
        self.format = export_format
