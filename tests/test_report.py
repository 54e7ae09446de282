import io

from rich.console import Console

from schedsim.algorithms import run_algorithm
from schedsim.models import Process, TimeSlice
from schedsim.report import build_schedule_table, print_report, render_banner, render_gantt


def _console():
    return Console(file=io.StringIO(), width=120, record=True, no_color=True)


def test_render_banner():
    assert render_banner("Priority").splitlines() == [
        "-" * 16,
        "     Priority",
        "-" * 16,
    ]


def test_render_gantt():
    text = render_gantt([TimeSlice(1, 0, 5), TimeSlice(12, 5, 8)])
    assert text.splitlines() == [
        "Gantt schedule",
        "|   1   |   12   |",
        "0\t5\t8",
    ]


def test_render_gantt_empty():
    assert "(no execution)" in render_gantt([])


def test_schedule_table_footer():
    res = run_algorithm("sjf", [Process(i, 0, b) for i, b in enumerate([8, 4, 9, 5], start=1)])
    console = _console()
    console.print(build_schedule_table(res))
    out = console.export_text()
    for header in ["ID", "Priority", "Burst", "Arrival", "Wait", "Turnaround", "Exit"]:
        assert header in out
    assert "7.50" in out
    assert "14.00" in out
    assert "0.15/t" in out


def test_print_report_includes_all_parts():
    res = run_algorithm("rr", [Process(1, 0, 10), Process(2, 0, 4)])
    console = _console()
    print_report(res, console)
    out = console.export_text()
    assert "Round-robin" in out
    assert "Quantum: 5" in out
    assert "Gantt schedule" in out
    assert "Schedule table" in out
    assert "Throughput" in out


def test_print_report_keeps_wide_gantt_on_one_line():
    res = run_algorithm("fcfs", [Process(i, 0, 3) for i in range(1, 13)])
    console = Console(file=io.StringIO(), width=80, record=True, no_color=True)
    print_report(res, console)
    lines = console.export_text().splitlines()

    strip = [line for line in lines if "|   1   |" in line]
    assert len(strip) == 1
    assert "|   12   |" in strip[0]
    marks = lines[lines.index(strip[0]) + 1]
    assert marks.split() == [str(s.start) for s in res.timeline] + [str(res.timeline[-1].stop)]
