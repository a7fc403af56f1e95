"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
import typing
from typing import Any


@dataclasses.dataclass
class Settings:
    """Base for settings dataclasses read from the environment.

    Subclasses set ``_prefix``; field ``max_workers`` of a class with prefix
    ``EXPORT_LIMITS`` is read from ``EXPORT_LIMITS_MAX_WORKERS``.  Validation
    runs on every construction, whatever the source of the values.
    """

    _prefix: typing.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook for subclasses; raise ``InvalidSettingValueError`` on bad values."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return "_".join(part for part in (cls._prefix, field_name) if part).upper()

    @classmethod
    def field_types(cls) -> dict[str, Any]:
        """Resolved annotations of the dataclass fields (string hints evaluated)."""
        hints = typing.get_type_hints(cls)
        return {f.name: hints[f.name] for f in dataclasses.fields(cls)}

    @classmethod
    def required_fields(cls) -> list[str]:
        return [
            f.name
            for f in dataclasses.fields(cls)
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        ]


__all__ = ["Settings"]
