from __future__ import annotations

from typing import Any, Iterable

import typer

from services.grapher import GraphSummary


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def echo_error(message: str) -> None:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)


def render_logging_banner(log_file: str, interval_ms: int, temp_file: str, buffer_size: int) -> None:
    typer.echo(
        f"Logging to file '{log_file}' every {interval_ms} ms "
        f"from temperature file '{temp_file}' ..."
    )
    mode = f"buffered ({buffer_size} bytes)" if buffer_size else "direct"
    echo_key_values([("write mode", mode)])


def render_graph_banner(log_file: str, window: int) -> None:
    typer.echo(
        f"Creating graph from log file '{log_file}' averaging every {window} entrie(s) ..."
    )


def render_graph_summary(summary: GraphSummary) -> None:
    typer.secho(f"Created graph '{summary.graph_path}'", fg=typer.colors.GREEN)
    echo_key_values(
        [
            ("readings", summary.reading_count),
            ("points", summary.point_count),
        ]
    )


def render_sampling_summary(sample_count: int) -> None:
    typer.echo()
    echo_heading("Sampling stopped")
    echo_key_values([("readings", sample_count)])
