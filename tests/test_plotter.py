from __future__ import annotations

from pathlib import Path

import pytest

from errors import ErrorKind, TempLogError
from models.records import AveragedPoint
from services.plotter import X_LABEL, Y_LABEL, build_figure, render_plot

POINTS = [AveragedPoint(0.0, 20.0), AveragedPoint(1000.0, 22.0), AveragedPoint(2000.0, 24.0)]


def test_build_figure_single_styled_series() -> None:
    figure = build_figure(POINTS)
    (axes,) = figure.axes
    (line,) = axes.get_lines()

    assert list(line.get_xdata()) == [0.0, 1000.0, 2000.0]
    assert list(line.get_ydata()) == [20.0, 22.0, 24.0]
    assert line.get_color().lower() == "#dd3355"
    assert line.get_solid_joinstyle() == "round"
    assert axes.get_xlabel() == X_LABEL == "Time [ms]"
    assert axes.get_ylabel() == Y_LABEL == "Temperature [°C]"


def test_render_plot_writes_svg(tmp_path: Path) -> None:
    path = tmp_path / "templog.svg"

    render_plot(POINTS, path)

    contents = path.read_text(encoding="utf-8")
    assert "<svg" in contents
    assert "#dd3355" in contents.lower()


def test_render_plot_unwritable_path(tmp_path: Path) -> None:
    with pytest.raises(TempLogError) as excinfo:
        render_plot(POINTS, tmp_path / "missing-dir" / "templog.svg")

    assert excinfo.value.kind is ErrorKind.io
