"""Parsing of the two-column temperature log."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from errors import ErrorKind, TempLogError
from models.records import Reading

logger = logging.getLogger(__name__)


def _parse_float(field: str) -> float:
    # float() is more lenient than the log format: reject padding, digit
    # separators and non-ASCII digits.
    if not field.isascii() or field != field.strip() or "_" in field:
        raise ValueError(f"invalid float literal {field!r}")
    return float(field)


def parse_lines(text: str, path: Path | str | None = None) -> List[Reading]:
    """Parse log contents into readings, keeping file order.

    Empty lines are skipped. Every other line must hold exactly two
    comma-separated numbers, otherwise the whole log is rejected.
    """
    readings: List[Reading] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line:
            continue
        fields = line.split(",")
        if len(fields) != 2:
            raise TempLogError(
                f"Log file has wrong format on line {line_number}: "
                f"expected 2 fields, found {len(fields)}",
                ErrorKind.format,
                path,
            )
        timestamp_raw, value_raw = fields
        try:
            timestamp = _parse_float(timestamp_raw)
        except ValueError as exc:
            raise TempLogError(
                f"Time on line {line_number} can not be parsed as a float: {timestamp_raw!r}",
                ErrorKind.parse,
                path,
            ) from exc
        try:
            value = _parse_float(value_raw)
        except ValueError as exc:
            raise TempLogError(
                f"Temperature on line {line_number} is not a float: {value_raw!r}",
                ErrorKind.parse,
                path,
            ) from exc
        readings.append(Reading(timestamp=timestamp, value=value))
    return readings


def parse_log(path: Path | str) -> List[Reading]:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise TempLogError(f"Could not read log file '{path}': {exc}", ErrorKind.io, path) from exc

    readings = parse_lines(text, path)
    logger.info("Parsed log file", extra={"path": str(path), "reading_count": len(readings)})
    return readings
