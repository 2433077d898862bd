from __future__ import annotations

from pathlib import Path

import pytest

from errors import ErrorKind, TempLogError
from sensors.hwmon import parse_millidegrees, read_temperature


def _sensor(tmp_path: Path, contents: str) -> Path:
    path = tmp_path / "temp1_input"
    path.write_text(contents, newline="")
    return path


def test_read_temperature_converts_millidegrees(tmp_path: Path) -> None:
    assert read_temperature(_sensor(tmp_path, "23456\n")) == 23.456


@pytest.mark.parametrize("raw", [0, 1, -1, 999, 41000, -40500, 2**31 - 1, -(2**31)])
def test_read_temperature_is_exact_division(tmp_path: Path, raw: int) -> None:
    assert read_temperature(_sensor(tmp_path, f"{raw}\n")) == raw / 1000


def test_read_temperature_without_trailing_newline(tmp_path: Path) -> None:
    assert read_temperature(_sensor(tmp_path, "+42000")) == 42.0


@pytest.mark.parametrize(
    "contents",
    ["", "\n", "abc\n", "23.5\n", "23456\n\n", " 23456\n", "23456\r\n", "2147483648\n", "1_000\n"],
)
def test_read_temperature_rejects_non_int32(tmp_path: Path, contents: str) -> None:
    with pytest.raises(TempLogError) as excinfo:
        read_temperature(_sensor(tmp_path, contents))

    assert excinfo.value.kind is ErrorKind.parse


def test_read_temperature_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    with pytest.raises(TempLogError) as excinfo:
        read_temperature(missing)

    assert excinfo.value.kind is ErrorKind.io
    assert excinfo.value.path == missing
    assert "missing" in str(excinfo.value)


def test_parse_millidegrees_strips_only_one_newline() -> None:
    assert parse_millidegrees("-5\n") == -5
    with pytest.raises(ValueError):
        parse_millidegrees("5\n\n")
