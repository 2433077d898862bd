"""SVG line chart rendering for averaged temperature series."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from matplotlib.figure import Figure

from errors import ErrorKind, TempLogError
from models.records import AveragedPoint

LINE_COLOUR = "#DD3355"
X_LABEL = "Time [ms]"
Y_LABEL = "Temperature [°C]"


def build_figure(points: Sequence[AveragedPoint]) -> Figure:
    figure = Figure(figsize=(8, 5))
    axes = figure.add_subplot()
    axes.plot(
        [point.relative_time for point in points],
        [point.value for point in points],
        color=LINE_COLOUR,
        solid_joinstyle="round",
    )
    axes.set_xlabel(X_LABEL)
    axes.set_ylabel(Y_LABEL)
    axes.grid(True)
    return figure


def render_plot(points: Sequence[AveragedPoint], path: Path | str) -> None:
    """Draw ``points`` as a single line series and save it as SVG at ``path``."""
    figure = build_figure(points)
    try:
        figure.savefig(path, format="svg")
    except OSError as exc:
        raise TempLogError(f"Could not write graph '{path}': {exc}", ErrorKind.io, path) from exc
