from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_TEMP_FILE_ENV = "TEMPLOG_TEMPFILE"
_LOG_FILE_ENV = "TEMPLOG_LOGFILE"
_GRAPH_FILE_ENV = "TEMPLOG_GRAPH"
_INTERVAL_ENV = "TEMPLOG_INTERVAL_MS"
_BUFFER_ENV = "TEMPLOG_BUFFER"
_AVG_ENV = "TEMPLOG_AVG"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_TEMP_FILE = "/sys/devices/platform/nct6775.2592/hwmon/hwmon3/temp7_input"
DEFAULT_LOG_FILE = "templog.csv"
DEFAULT_GRAPH_FILE = "templog.svg"
DEFAULT_INTERVAL_MS = 500
DEFAULT_BUFFER_SIZE = 4096
DEFAULT_AVG_WINDOW = 1


@dataclass(frozen=True)
class Settings:
    temp_file: str
    log_file: str
    graph_file: str
    interval_ms: int
    buffer_size: int
    avg_window: int
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_int_env(name: str, default: int, minimum: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        temp_file=_read_str_env(_TEMP_FILE_ENV, DEFAULT_TEMP_FILE),
        log_file=_read_str_env(_LOG_FILE_ENV, DEFAULT_LOG_FILE),
        graph_file=_read_str_env(_GRAPH_FILE_ENV, DEFAULT_GRAPH_FILE),
        interval_ms=_read_int_env(_INTERVAL_ENV, DEFAULT_INTERVAL_MS, minimum=0),
        buffer_size=_read_int_env(_BUFFER_ENV, DEFAULT_BUFFER_SIZE, minimum=0),
        avg_window=_read_int_env(_AVG_ENV, DEFAULT_AVG_WINDOW, minimum=1),
        log_level=_read_log_level("INFO"),
    )
