"""Config settings – Settings base class and BuilderSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from ease.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class BuilderSettings(Settings):
    """Process-wide defaults for every builder.

    Read from ``EASE_STRICT``, ``EASE_COPY_OVERRIDES`` and ``EASE_LOG_LEVEL``.
    Individual builders may override ``strict`` and ``copy_overrides``.
    ``copy_overrides`` only concerns values produced by nested builders;
    ``log_level`` filters ease log events until structlog is configured.
    """

    _prefix: ClassVar[str] = "EASE"

    strict: bool = False
    copy_overrides: bool = True
    log_level: str = "WARNING"

    def _validate(self) -> None:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        self.log_level = self.log_level.upper()

    @property
    def log_level_no(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["BuilderSettings", "Settings"]
