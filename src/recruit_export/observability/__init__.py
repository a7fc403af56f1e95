"""Observability – structured logging."""

from recruit_export.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
