"""Config errors – raised while loading or validating ``SCALIKE_*`` settings.

Only :func:`scalike.config.get_settings` and explicit loader calls raise
these; collection operations never do.
"""
from __future__ import annotations

from scalike.errors.base import ScalikeError


class ConfigError(ScalikeError):
    """Settings could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError, LookupError):
    """A setting without a default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            operation="load_settings",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError, ValueError):
    """A setting is present but cannot be coerced or fails validation."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            operation="load_settings",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
