"""Render evaluated metrics as a rich table."""

from collections.abc import Iterable

from rich import box
from rich.console import Console
from rich.table import Table

from podcheck.domain.limits import Number, format_number
from podcheck.domain.status import EvaluatedMetric, Status

_STATUS_STYLES: dict[Status, str] = {
    Status.OK: "green",
    Status.WARNING: "yellow",
    Status.CRITICAL: "bold red",
    Status.UNKNOWN: "magenta",
}


def _limit_cell(value: Number | None) -> str:
    return "-" if value is None else format_number(value)


def _build_table() -> Table:
    table = Table(
        title="Pod Phase Metrics",
        show_lines=False,
        expand=True,
        box=box.SIMPLE_HEAVY,
    )
    table.add_column("metric", overflow="fold", no_wrap=False, justify="left")
    table.add_column("value", justify="right")
    table.add_column("warning", justify="right")
    table.add_column("critical", justify="right")
    table.add_column("status", justify="left")
    return table


def render_metric_table(metrics: Iterable[EvaluatedMetric], console: Console) -> None:
    """Print one row per metric in the order given."""
    rows = list(metrics)
    if not rows:
        console.print("[dim]No pods were counted.[/dim]")
        return

    table = _build_table()
    for metric in rows:
        style = _STATUS_STYLES.get(metric.status, "")
        table.add_row(
            metric.rendered_name,
            str(metric.value),
            _limit_cell(metric.warn),
            _limit_cell(metric.crit),
            f"[{style}]{metric.status.name}[/{style}]",
        )
    console.print(table)
