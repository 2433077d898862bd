from __future__ import annotations

import logging

from logging_config import DATE_FORMAT, LOG_FORMAT, ContextualFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("templog", logging.INFO, __file__, 1, "Rendered graph", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_extra_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    message = formatter.format(_record(path="templog.svg", point_count=3, unrelated="x"))

    assert message == "Rendered graph | path=templog.svg point_count=3"


def test_formatter_without_context() -> None:
    formatter = ContextualFormatter(fmt="%(levelname)s %(message)s")

    assert formatter.format(_record()) == "INFO Rendered graph"


def test_formatter_uses_custom_context_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s", context_keys=["window"])

    message = formatter.format(_record(path="templog.svg", window=5))

    assert message == "Rendered graph | window=5"


def test_default_format_names_thread() -> None:
    formatter = ContextualFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    record = _record(byte_count=4096)
    record.threadName = "templog-writer"

    message = formatter.format(record)

    assert "[templog-writer] templog: Rendered graph | byte_count=4096" in message
