"""Config – ExportSettings: per-format row ceilings and result expiry."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, ClassVar

from recruit_export.config.settings.base import Settings
from recruit_export.config.errors import InvalidSettingValueError

if TYPE_CHECKING:
    from recruit_export.application.export.request import ExportFormat


@dataclasses.dataclass
class ExportSettings(Settings):
    """Export limits, read once at startup.

    Environment variables (prefix ``EXPORT_LIMITS``)::

        EXPORT_LIMITS_PDF=2000
        EXPORT_LIMITS_EXCEL=50000
        EXPORT_LIMITS_CSV=100000
        EXPORT_LIMITS_EXPIRATION_MINUTES=5
    """

    _prefix: ClassVar[str] = "EXPORT_LIMITS"

    pdf: int = 2000
    excel: int = 50000
    csv: int = 100000
    expiration_minutes: int = 5
    max_workers: int = 10
    sweep_interval_seconds: float = 30.0

    def _validate(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidSettingValueError(field.name, value, "must be a number")
            if value <= 0:
                raise InvalidSettingValueError(field.name, value, "must be positive")

    def limit_for(self, export_format: ExportFormat) -> int:
        """Return the maximum number of rows allowed for *export_format*."""
        return getattr(self, export_format.value)


__all__ = ["ExportSettings"]
