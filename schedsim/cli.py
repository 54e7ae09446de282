from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .algorithms import Discipline, run_all
from .report import print_report
from .workload_io import WorkloadError, load_workload

logger = logging.getLogger(__name__)

DISCIPLINE_CHOICES = [d.value for d in Discipline]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator (FCFS, SJF, Priority, Round Robin).",
    )
    parser.add_argument(
        "workload",
        help="Path to a CSV workload (id,burst,arrival[,priority] per row) or a JSON list.",
    )
    parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        choices=DISCIPLINE_CHOICES,
        default=DISCIPLINE_CHOICES,
        help="Disciplines to run (default: all). Output order is always fcfs, sjf, priority, rr.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log verbosity (-v for info, -vv for debug). Logs go to stderr.",
    )
    return parser


def configure_logging(verbosity: int, no_color: bool = False) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = RichHandler(
        console=Console(stderr=True, no_color=no_color),
        show_path=False,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose, args.no_color)
    console = Console(no_color=args.no_color, highlight=False)
    err_console = Console(stderr=True, no_color=args.no_color, highlight=False)

    try:
        processes = load_workload(Path(args.workload))
    except (WorkloadError, OSError) as exc:
        logger.debug("failed to load %s", args.workload, exc_info=True)
        err_console.print(f"[red]error:[/red] {escape(str(exc))}", soft_wrap=True)
        return 1

    for result in run_all(processes, args.algorithms):
        print_report(result, console)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
