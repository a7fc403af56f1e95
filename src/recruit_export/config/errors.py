"""Config – configuration errors."""
from __future__ import annotations

from recruit_export.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or constructed."""

    default_code = "config_error"
    http_status = 500


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Setting {setting_name} is required but not set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value cannot be used."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting {setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
