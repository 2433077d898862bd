"""Process-wide logging for the templog CLI.

Records go to stderr so they never mix with the banners and summaries the
CLI prints on stdout. Sampler, writer and graph code attach context through
``extra=``; the formatter renders the known keys as ``key=value`` pairs.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Iterable, Sequence

from settings import get_settings

CONTEXT_KEYS = (
    "path",
    "interval_ms",
    "buffer_size",
    "window",
    "reading_count",
    "point_count",
    "byte_count",
    "reason",
)

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-7s [%(threadName)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


class ContextualFormatter(logging.Formatter):
    """Appends the reading context attached to a record after its message."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        context_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._context_keys: Sequence[str] = tuple(context_keys or CONTEXT_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            f"{key}={getattr(record, key)}"
            for key in self._context_keys
            if getattr(record, key, None) is not None
        ]
        if not context:
            return message
        return f"{message} | {' '.join(context)}"


def configure_logging(level: str | int | None = None) -> None:
    """Install the stderr handler once; later calls are no-ops.

    ``level`` overrides ``LOG_LEVEL`` from the settings.
    """
    global _configured
    if _configured:
        return

    log_level = level if level is not None else get_settings().log_level
    if isinstance(log_level, str):
        log_level = log_level.upper()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "templog": {
                    "()": "logging_config.ContextualFormatter",
                    "fmt": LOG_FORMAT,
                    "datefmt": DATE_FORMAT,
                    "context_keys": list(CONTEXT_KEYS),
                }
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "templog",
                }
            },
            "root": {"handlers": ["stderr"], "level": log_level},
            # matplotlib's font manager is chatty at DEBUG.
            "loggers": {"matplotlib": {"level": "WARNING"}},
        }
    )

    _configured = True
