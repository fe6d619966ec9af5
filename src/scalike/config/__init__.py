"""Config – 12-factor settings for the library.

The application loads settings from ``SCALIKE_*`` environment variables by
calling :func:`get_settings` (or installs its own with :func:`set_settings`);
the result is cached for the life of the process::

    from scalike.config import ScalikeSettings, set_settings

    set_settings(ScalikeSettings(trace_evaluation=True))

Collection code only ever reads :func:`active_settings`, which never touches
the environment, so a malformed variable surfaces where the application
loads settings and not inside a collection read.
"""

from __future__ import annotations

from scalike.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from scalike.config.loaders import EnvSettingsLoader, SettingsLoader
from scalike.config.settings import ScalikeSettings, Settings

_DEFAULTS = ScalikeSettings()
_current: ScalikeSettings | None = None


def get_settings() -> ScalikeSettings:
    """Return the active settings, loading them from the environment once."""
    global _current
    if _current is None:
        _current = EnvSettingsLoader().load(ScalikeSettings)
    return _current


def active_settings() -> ScalikeSettings:
    """Settings in effect right now; defaults until settings are loaded or set."""
    return _DEFAULTS if _current is None else _current


def set_settings(settings: ScalikeSettings) -> None:
    """Replace the active settings."""
    global _current
    _current = settings


def reset_settings() -> None:
    """Forget the active settings; the next :func:`get_settings` reloads the environment."""
    global _current
    _current = None


__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ScalikeSettings",
    "Settings",
    "SettingsLoader",
    "active_settings",
    "get_settings",
    "reset_settings",
    "set_settings",
]
