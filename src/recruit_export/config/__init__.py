"""Config – settings loading and export limits."""

from recruit_export.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from recruit_export.config.export import ExportSettings
from recruit_export.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
