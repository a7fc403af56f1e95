"""Config settings – SettingsFactory."""
from __future__ import annotations

from typing import Any, Mapping, Sequence, TypeVar

from recruit_export.config.errors import ConfigError, MissingRequiredSettingError
from recruit_export.config.settings.base import Settings
from recruit_export.config.settings.loaders import SettingsLoader
from recruit_export.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)


class SettingsFactory:
    """Layer several loaders and explicit overrides into one settings object.

    Later loaders win over earlier ones and *overrides* win over every
    loader.  A loader whose values cannot be read (any :class:`ConfigError`)
    contributes nothing; validation of the merged result still raises.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] = (),
        overrides: Mapping[str, Any] | None = None,
    ) -> T:
        merged: dict[str, Any] = {}
        for loader in loaders:
            try:
                merged.update(loader.values(settings_cls))
            except ConfigError as exc:
                logger.warning(
                    "settings.loader_skipped",
                    loader=type(loader).__name__,
                    error=exc.message,
                )
        merged.update(overrides or {})

        for name in settings_cls.required_fields():
            if name not in merged:
                raise MissingRequiredSettingError(settings_cls.env_key(name))

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
