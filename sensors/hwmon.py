"""Reading scalar sensor values from hwmon-style text pseudo-files."""

from __future__ import annotations

import re
from pathlib import Path

from errors import ErrorKind, TempLogError

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_millidegrees(text: str) -> int:
    """Parse the raw pseudo-file content as a signed 32-bit integer.

    A single trailing newline is tolerated; any other surrounding whitespace
    is rejected the same way as any non-numeric content.
    """
    candidate = text[:-1] if text.endswith("\n") else text
    if not _INTEGER_RE.fullmatch(candidate):
        raise ValueError(f"{candidate!r} is not an integer")
    parsed = int(candidate)
    if not _INT32_MIN <= parsed <= _INT32_MAX:
        raise ValueError(f"{parsed} does not fit in 32 bits")
    return parsed


def read_temperature(path: Path | str) -> float:
    """Return the temperature in degrees Celsius stored at ``path``."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            contents = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise TempLogError(
            f"Could not read temperature file '{path}': {exc}", ErrorKind.io, path
        ) from exc

    try:
        millidegrees = parse_millidegrees(contents)
    except ValueError as exc:
        raise TempLogError(
            f"Temperature in '{path}' is not a 32-bit integer: {exc}",
            ErrorKind.parse,
            path,
        ) from exc
    return millidegrees / 1000
