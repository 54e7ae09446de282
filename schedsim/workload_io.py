from __future__ import annotations

import csv
import json
import logging
import re
from pathlib import Path
from typing import Iterable, List, Sequence

from .models import Process

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"^[+-]?\d+\Z", re.ASCII)


class WorkloadError(ValueError):
    """Raised when a workload file cannot be parsed into processes."""


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload into a list of Process objects.

    ``.json`` files hold a list of objects; anything else is read as
    header-less CSV rows of ``id,burst,arrival[,priority]``.
    """
    path = Path(path)

    if path.suffix.lower() == ".json":
        processes = _load_json(path)
    else:
        processes = _load_csv(path)

    logger.info("Loaded %d processes from %s", len(processes), path)
    return processes


def _load_csv(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8", newline="") as f:
        try:
            return parse_csv_rows(csv.reader(f))
        except csv.Error as exc:
            raise WorkloadError(f"malformed CSV workload: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise WorkloadError(f"{path}: not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc


def parse_csv_rows(rows: Iterable[Sequence[str]]) -> List[Process]:
    processes: List[Process] = []
    for line_no, row in enumerate(rows, start=1):
        if not row or all(not cell.strip() for cell in row):
            continue
        where = f"line {line_no}"
        if len(row) not in (3, 4):
            raise WorkloadError(f"{where}: expected 3 or 4 columns, got {len(row)}")

        pid = _to_int(row[0], where, "process id")
        burst_time = _to_int(row[1], where, "burst duration")
        arrival_time = _to_int(row[2], where, "arrival time")
        priority = _to_int(row[3], where, "priority") if len(row) == 4 else 0

        processes.append(
            Process(
                pid=pid,
                arrival_time=arrival_time,
                burst_time=burst_time,
                priority=priority,
            )
        )
    return processes


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise WorkloadError(f"invalid JSON workload: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise WorkloadError(f"{path}: not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc

    if not isinstance(raw, list):
        raise WorkloadError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry, idx) for idx, entry in enumerate(raw, start=1)]


def _process_from_mapping(mapping, entry_no: int) -> Process:
    try:
        pid = mapping["id"]
        burst = mapping["burst"]
        arrival = mapping["arrival"]
    except (KeyError, TypeError) as exc:
        raise WorkloadError(f"entry {entry_no}: invalid process entry {mapping!r}") from exc

    where = f"entry {entry_no}"
    priority = mapping.get("priority")

    return Process(
        pid=_to_int(pid, where, "process id"),
        arrival_time=_to_int(arrival, where, "arrival time"),
        burst_time=_to_int(burst, where, "burst duration"),
        priority=0 if priority in (None, "") else _to_int(priority, where, "priority"),
    )


def _to_int(value, where: str, field_name: str) -> int:
    # bool is an int subclass; reject it along with floats
    if isinstance(value, bool) or isinstance(value, float):
        raise WorkloadError(f"{where}: {field_name} {value!r} is not an integer")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _INTEGER_RE.match(text):
        raise WorkloadError(f"{where}: {field_name} {value!r} is not an integer")
    return int(text, 10)
