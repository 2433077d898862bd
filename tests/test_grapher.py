from __future__ import annotations

from pathlib import Path

import pytest

from errors import ErrorKind, TempLogError
from services.grapher import build_graph


def test_build_graph_end_to_end(tmp_path: Path) -> None:
    log_path = tmp_path / "templog.csv"
    graph_path = tmp_path / "templog.svg"
    log_path.write_text("3000,24.0\n1000,20.0\n2000,22.0\n4000,30.0\n")

    summary = build_graph(log_path, graph_path, window=3)

    assert summary.reading_count == 4
    assert summary.point_count == 1
    assert summary.graph_path == graph_path
    assert graph_path.exists()


def test_build_graph_empty_log(tmp_path: Path) -> None:
    log_path = tmp_path / "templog.csv"
    log_path.write_text("")

    with pytest.raises(TempLogError) as excinfo:
        build_graph(log_path, tmp_path / "templog.svg")

    assert excinfo.value.kind is ErrorKind.domain
    assert not (tmp_path / "templog.svg").exists()
