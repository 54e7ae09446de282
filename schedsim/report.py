from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import ScheduleResult, TimeSlice

TABLE_HEADERS = ["ID", "Priority", "Burst", "Arrival", "Wait", "Turnaround", "Exit"]

GANTT_CELL_WIDTH = 8


def render_banner(title: str) -> str:
    rule = "-" * (len(title) * 2)
    indent = " " * (len(title) // 2)
    return "\n".join([rule, f"{indent} {title}", rule])


def render_gantt(slices: List[TimeSlice]) -> str:
    """
    Plain-text Gantt strip: process ids centred in fixed-width cells, then
    the start of every slice and the stop of the last one.
    """
    if not slices:
        return "Gantt schedule\n(no execution)"

    cells = "|"
    for sl in slices:
        pid = str(sl.pid)
        padding = " " * ((GANTT_CELL_WIDTH - len(pid)) // 2)
        cells += f"{padding}{pid}{padding}|"

    marks = "\t".join(str(sl.start) for sl in slices)
    marks += f"\t{slices[-1].stop}"

    return "\n".join(["Gantt schedule", cells, marks])


def build_schedule_table(result: ScheduleResult) -> Table:
    agg = result.aggregates
    footers = [
        "",
        "",
        "",
        "",
        f"Average\n{agg.avg_waiting:.2f}",
        f"Average\n{agg.avg_turnaround:.2f}",
        f"Throughput\n{agg.throughput:.2f}/t",
    ]

    table = Table(title="Schedule table", box=box.SIMPLE_HEAVY, show_footer=True)
    for header, footer in zip(TABLE_HEADERS, footers):
        justify = "center" if header in {"ID", "Priority"} else "right"
        table.add_column(header, footer=footer, justify=justify)

    for row in result.rows:
        table.add_row(*row.as_cells())

    return table


def print_report(result: ScheduleResult, console: Optional[Console] = None) -> None:
    console = console or Console()

    console.print(Text(render_banner(result.title), style="bold"))
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    # the markers line up under the id cells only when the strip is not wrapped
    console.print(Text(render_gantt(result.timeline), no_wrap=True), soft_wrap=True)
    console.print(build_schedule_table(result))
    console.print()
