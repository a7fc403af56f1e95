"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import os
import typing
from typing import Any, Mapping, TypeVar

from dotenv import dotenv_values

from recruit_export.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from recruit_export.config.settings.base import Settings

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})


class SettingsLoader(abc.ABC):
    """Port: one source of raw setting values."""

    @abc.abstractmethod
    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        """Return the coerced values this source holds, keyed by field name."""

    def load(self, settings_class: type[T]) -> T:
        """Build *settings_class* from this source alone."""
        found = self.values(settings_class)
        for name in settings_class.required_fields():
            if name not in found:
                raise MissingRequiredSettingError(settings_class.env_key(name))
        try:
            return settings_class(**found)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc


def _coerce(raw: str, hint: Any) -> Any:
    if hint is bool:
        return raw.strip().lower() in _TRUE
    if hint is int:
        return int(raw)
    if hint is float:
        return float(raw)
    if typing.get_origin(hint) is list:
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` variables, coercing them to the field type."""

    def _environ(self) -> Mapping[str, str]:
        return os.environ

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        environ = self._environ()
        found: dict[str, Any] = {}
        for name, hint in settings_class.field_types().items():
            key = settings_class.env_key(name)
            raw = environ.get(key)
            if raw is None:
                continue
            try:
                found[name] = _coerce(raw, hint)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc
        return found


class DotenvSettingsLoader(EnvSettingsLoader):
    """Like :class:`EnvSettingsLoader`, with a ``.env`` file layered in.

    The file is read without touching ``os.environ``.  Real environment
    variables win unless *override* is set.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def _environ(self) -> Mapping[str, str]:
        file_values = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            return {**os.environ, **file_values}
        return {**file_values, **os.environ}


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
