from __future__ import annotations

import signal
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

import typer
from typer.core import TyperGroup

from cli.render import (
    echo_error,
    render_graph_banner,
    render_graph_summary,
    render_logging_banner,
    render_sampling_summary,
)
from errors import TempLogError
from logging_config import configure_logging
from services.grapher import build_graph
from services.sampler import Sampler
from settings import get_settings
from storage.log_writer import open_log_writer

__version__ = "0.1.0"

GRAPH_OPTION = "--graph"


class TempLogGroup(TyperGroup):
    """Root group that also accepts ``--graph`` without a value.

    A bare ``--graph`` is rewritten to ``--graph=`` so the option parser sees
    an (empty) value, which the callback replaces with the configured graph
    path. Only arguments before the first subcommand name are rewritten.
    """

    def parse_args(self, ctx, args: List[str]) -> List[str]:
        expanded: List[str] = []
        for index, token in enumerate(args):
            if token in self.commands:
                expanded.extend(args[index:])
                break
            following = args[index + 1] if index + 1 < len(args) else None
            if token == GRAPH_OPTION and (
                following is None or following.startswith("-") or following in self.commands
            ):
                expanded.append(f"{GRAPH_OPTION}=")
            else:
                expanded.append(token)
        return super().parse_args(ctx, expanded)


app = typer.Typer(
    cls=TempLogGroup,
    help=(
        "Log a hwmon temperature to CSV and render the log as an SVG chart.\n\n"
        "templog --buffer 4096 --interval 500 --logfile templog.csv --tempfile <path>\n\n"
        "templog --avg 1 --logfile templog.csv --graph templog.svg"
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"templog {__version__}")
        raise typer.Exit()


@contextmanager
def _stop_on_sigterm(stop: threading.Event) -> Iterator[None]:
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(signal.SIGTERM, lambda _signum, _frame: stop.set())
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous)


def run_logging(
    buffer: Optional[int] = None,
    interval: Optional[int] = None,
    logfile: Optional[str] = None,
    tempfile: Optional[str] = None,
) -> None:
    """Sample the temperature file and append readings to the log until stopped."""
    settings = get_settings()
    buffer_size = buffer if buffer is not None else settings.buffer_size
    interval_ms = interval if interval is not None else settings.interval_ms
    log_file = logfile or settings.log_file
    temp_file = tempfile or settings.temp_file

    render_logging_banner(log_file, interval_ms, temp_file, buffer_size)
    stop = threading.Event()
    try:
        writer = open_log_writer(log_file, buffer_size)
        sampler = Sampler(temp_file, writer, interval_ms=interval_ms)
        try:
            with _stop_on_sigterm(stop):
                sampler.run(stop)
        except KeyboardInterrupt:
            stop.set()
        finally:
            writer.close()
    except TempLogError as exc:
        echo_error(str(exc))
        raise typer.Exit(code=1)
    render_sampling_summary(sampler.sample_count)


def run_graph(
    avg: Optional[int] = None,
    logfile: Optional[str] = None,
    graph: Optional[str] = None,
) -> None:
    """Render the log as an SVG line chart."""
    settings = get_settings()
    window = avg if avg is not None else settings.avg_window
    log_file = logfile or settings.log_file
    graph_file = graph or settings.graph_file

    render_graph_banner(log_file, window)
    try:
        summary = build_graph(log_file, graph_file, window)
    except TempLogError as exc:
        echo_error(str(exc))
        raise typer.Exit(code=1)
    render_graph_summary(summary)


@app.callback()
def main(
    ctx: typer.Context,
    buffer: Optional[int] = typer.Option(
        None,
        "--buffer",
        min=0,
        help="Flush threshold in bytes; 0 writes every reading directly (default 4096).",
    ),
    interval: Optional[int] = typer.Option(
        None, "--interval", min=0, help="Milliseconds between samples (default 500)."
    ),
    logfile: Optional[str] = typer.Option(None, "--logfile", help="CSV log file."),
    tempfile: Optional[str] = typer.Option(
        None, "--tempfile", help="Pseudo-file holding the temperature in millidegrees."
    ),
    avg: Optional[int] = typer.Option(
        None, "--avg", min=1, help="Number of entries averaged into one point (default 1)."
    ),
    graph: Optional[str] = typer.Option(
        None,
        GRAPH_OPTION,
        help="Render the log to this SVG file instead of logging (value optional).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL env or INFO).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Log temperatures, or render the log when --graph is given."""
    configure_logging(log_level)
    if ctx.invoked_subcommand is not None:
        return
    if graph is not None:
        run_graph(avg=avg, logfile=logfile, graph=graph)
    else:
        run_logging(buffer=buffer, interval=interval, logfile=logfile, tempfile=tempfile)


@app.command("log")
def log_command(
    buffer: Optional[int] = typer.Option(None, "--buffer", min=0, help="Flush threshold in bytes."),
    interval: Optional[int] = typer.Option(None, "--interval", min=0, help="Milliseconds between samples."),
    logfile: Optional[str] = typer.Option(None, "--logfile", help="CSV log to append to."),
    tempfile: Optional[str] = typer.Option(None, "--tempfile", help="Temperature pseudo-file."),
) -> None:
    """Same as running without --graph."""
    run_logging(buffer=buffer, interval=interval, logfile=logfile, tempfile=tempfile)


@app.command("graph")
def graph_command(
    avg: Optional[int] = typer.Option(None, "--avg", min=1, help="Entries averaged into one point."),
    logfile: Optional[str] = typer.Option(None, "--logfile", help="CSV log to read."),
    graph: Optional[str] = typer.Option(None, GRAPH_OPTION, help="SVG file to write."),
) -> None:
    """Same as running with --graph."""
    run_graph(avg=avg, logfile=logfile, graph=graph)
