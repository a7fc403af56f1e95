"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

import dataclasses
from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "secret", "token", "api_key",
    "email", "phone", "document_number",
})


class SensitiveFieldsFilter:
    """Masks sensitive values anywhere inside a log event.

    Walks dicts, lists, tuples and dataclass instances (a ``CandidateRow``
    logged as a value becomes a dict with its PII masked).  Keys match
    case-insensitively.  Objects already being visited render as
    ``"(circular)"``.
    """

    MASK = "***"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def is_sensitive(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._fields

    def redact(self, event: dict[str, Any]) -> dict[str, Any]:
        return self._mapping(event, set())

    def _mapping(self, data: dict[Any, Any], active: set[int]) -> dict[Any, Any]:
        return {
            k: self.MASK if self.is_sensitive(k) else self._value(v, active)
            for k, v in data.items()
        }

    def _value(self, value: Any, active: set[int]) -> Any:
        if isinstance(value, (str, bytes, int, float, bool)) or value is None:
            return value
        if id(value) in active:
            return "(circular)"
        active.add(id(value))
        try:
            if isinstance(value, dict):
                return self._mapping(value, active)
            if isinstance(value, (list, tuple)):
                return [self._value(item, active) for item in value]
            if dataclasses.is_dataclass(value) and not isinstance(value, type):
                fields = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
                return self._mapping(fields, active)
            return value
        finally:
            active.discard(id(value))

    def __call__(self, logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """structlog processor interface."""
        return self.redact(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
