"""Config settings – Settings base class and the library's ScalikeSettings."""
from __future__ import annotations

import dataclasses
import logging

from scalike.config.errors import InvalidSettingValueError

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ScalikeSettings(Settings):
    """Library-wide knobs, loaded from ``SCALIKE_*`` environment variables.

    Attributes:
        log_level: Level applied by :func:`configure_logging`.
        log_json: Render log lines as JSON instead of the console renderer.
        trace_evaluation: Emit debug events when lazy sources are exhausted
            or lazy collections are realized.
        json_ensure_ascii: Passed to :func:`json.dumps` by ``to_json``.
        json_indent: Indentation for ``to_json``; ``0`` means compact.
    """

    _prefix: dataclasses.ClassVar[str] = "SCALIKE"

    log_level: str = "WARNING"
    log_json: bool = False
    trace_evaluation: bool = False
    json_ensure_ascii: bool = False
    json_indent: int = 0

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )
        if self.json_indent < 0:
            raise InvalidSettingValueError("json_indent", self.json_indent, "must be >= 0")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["ScalikeSettings", "Settings"]
