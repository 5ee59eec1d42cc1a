"""Logging setup: one stream handler, every line tagged with the request id."""

from __future__ import annotations

import logging
import logging.config
from typing import Any

from .config import Settings
from .context import get_request_id

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(request_id)s | %(message)s"

# Request lines come from CorrelationIdMiddleware, so uvicorn's access log is muted.
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error")


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """Return the ``dictConfig`` mapping for ``settings``."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    def _routed(logger_level: int) -> dict[str, Any]:
        return {"handlers": ["console"], "level": logger_level, "propagate": False}

    loggers: dict[str, Any] = {name: _routed(level) for name in _UVICORN_LOGGERS}
    loggers["uvicorn.access"] = _routed(logging.WARNING)
    loggers["sqlalchemy.engine"] = _routed(logging.INFO if settings.db_echo else logging.WARNING)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "task_tracker": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "filters": {"request_id": {"()": RequestContextFilter}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "task_tracker",
                "filters": ["request_id"],
            }
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": loggers,
    }


def configure_logging(settings: Settings) -> None:
    logging.config.dictConfig(build_logging_config(settings))


__all__ = ["LOG_FORMAT", "RequestContextFilter", "build_logging_config", "configure_logging"]
