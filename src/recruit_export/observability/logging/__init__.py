"""Observability – structured logging helpers."""
from recruit_export.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from recruit_export.observability.logging.factory import JsonLoggerFactory
from recruit_export.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
