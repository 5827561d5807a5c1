"""
Command-line interface for termtop.

Opens the interactive CPU/temperature tables or prints a single frame.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Optional

import typer
from rich.console import Console

from tt_app import sampling
from tt_common.errors import TTError
from tt_common.logging import configure_logging
from tt_ui.tui.screens.table_screen import TableScreen
from tt_ui.tui.system.components.data_table import DataTable
from tt_ui.tui.system.components.table import RichTableSink
from tt_ui.tui.system.config import TableConfig
from tt_ui.tui.system.models import Rect
from tt_ui.tui.widgets.cpu_table import CpuRow, build_rows, create_cpu_table
from tt_ui.tui.widgets.temp_table import SensorReading, create_temp_table

console = Console()

app = typer.Typer(
    help="Live system tables for the terminal (CPU usage, temperatures).",
    no_args_is_help=True,
)


class Widget(str, Enum):
    cpu = "cpu"
    temp = "temp"


@app.callback()
def entry(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (defaults to TT_LOG_LEVEL or WARNING)."
    ),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Write logs to this file instead of stderr."
    ),
    log_json: Optional[bool] = typer.Option(
        None, "--log-json/--no-log-json", help="Render logs as JSON."
    ),
) -> None:
    """Global options shared by every command."""
    configure_logging(
        level=log_level or "WARNING",
        log_file=log_file,
        json=log_json,
        force=True,
        stream=log_file is None,
    )


def _table_config(title: str, sortable: bool) -> TableConfig:
    return TableConfig.from_env(title=title, sortable=sortable)


def _cpu_rows(show_average: bool, interval: float | None = None) -> list[CpuRow]:
    return build_rows(sampling.sample_cpu_usage(interval), show_average=show_average)


def _temp_rows() -> list[SensorReading]:
    return [
        SensorReading(sensor=name, celsius=celsius)
        for name, celsius in sampling.sample_temperatures()
    ]


def _run_interactive(
    table: DataTable[Any], refresh: Callable[[], Iterable[Any]], interval: float
) -> None:
    screen = TableScreen(table, refresh=refresh, interval=interval)
    try:
        screen.run()
    except TTError as exc:
        console.print(f"[red]✖ {exc}[/red]")
        raise typer.Exit(1)


@app.command("cpu")
def cpu(
    interval: float = typer.Option(1.0, "--interval", "-i", min=0.1, help="Seconds between samples."),
    average: bool = typer.Option(True, "--average/--no-average", help="Show the average row."),
    start_on_average: bool = typer.Option(
        False, "--start-on-average", help="Select the average row on start."
    ),
    sortable: bool = typer.Option(True, "--sortable/--no-sortable", help="Sort by clicking headers."),
) -> None:
    """Show per-core CPU usage."""
    try:
        table = create_cpu_table(
            config=_table_config("CPU", sortable),
            start_on_average=start_on_average,
            show_average=average,
        )
    except TTError as exc:
        console.print(f"[red]✖ {exc}[/red]")
        raise typer.Exit(1)
    _run_interactive(table, lambda: _cpu_rows(average), interval)


@app.command("temp")
def temp(
    interval: float = typer.Option(2.0, "--interval", "-i", min=0.1, help="Seconds between samples."),
    sortable: bool = typer.Option(True, "--sortable/--no-sortable", help="Sort by clicking headers."),
) -> None:
    """Show temperature sensors."""
    try:
        table = create_temp_table(_table_config("Temperatures", sortable))
    except TTError as exc:
        console.print(f"[red]✖ {exc}[/red]")
        raise typer.Exit(1)
    _run_interactive(table, _temp_rows, interval)


@app.command("snapshot")
def snapshot(
    widget: Widget = typer.Argument(..., help="Which table to print."),
    width: int = typer.Option(40, "--width", min=0, help="Table width in cells."),
    height: int = typer.Option(20, "--height", min=0, help="Table height in rows."),
) -> None:
    """Sample once and print a single frame of a table."""
    try:
        if widget is Widget.cpu:
            table: DataTable[Any] = create_cpu_table(config=_table_config("CPU", True))
            table.set_data(_cpu_rows(True, interval=0.5))
        else:
            table = create_temp_table(_table_config("Temperatures", True))
            table.set_data(_temp_rows())
    except TTError as exc:
        console.print(f"[red]✖ {exc}[/red]")
        raise typer.Exit(1)
    RichTableSink(console).show(table.draw(Rect(0, 0, width, height)))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
