"""Graph mode: turn a temperature log into a chart."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from services.aggregator import Averager, sort_readings
from services.log_parser import parse_log
from services.plotter import render_plot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphSummary:
    log_path: Path
    graph_path: Path
    window: int
    reading_count: int
    point_count: int


def build_graph(log_path: Path | str, graph_path: Path | str, window: int = 1) -> GraphSummary:
    """Parse, sort, average and plot the log at ``log_path`` once."""
    log_path = Path(log_path)
    graph_path = Path(graph_path)

    readings = sort_readings(parse_log(log_path))
    points = Averager(window).average(readings)
    render_plot(points, graph_path)

    logger.info(
        "Rendered graph",
        extra={"path": str(graph_path), "window": window, "point_count": len(points)},
    )
    return GraphSummary(
        log_path=log_path,
        graph_path=graph_path,
        window=window,
        reading_count=len(readings),
        point_count=len(points),
    )
