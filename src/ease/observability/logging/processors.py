"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    While structlog is unconfigured the logger drops events below
    :attr:`~ease.config.BuilderSettings.log_level` (``WARNING`` by default),
    so importing and using the builders stays quiet. Once the application
    configures structlog (for example via :class:`JsonLoggerFactory`) its
    configuration is used unchanged.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    if structlog.is_configured():
        logger = structlog.get_logger(name)
    else:
        from ease.config import get_settings  # noqa: PLC0415

        logger = structlog.wrap_logger(
            None,
            wrapper_class=structlog.make_filtering_bound_logger(get_settings().log_level_no),
            logger_factory_args=(name,) if name else (),
        )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger"]
