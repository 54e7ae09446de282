from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Union

from .metrics import ScheduleAccumulator, compute_aggregates
from .models import Process, ScheduleResult
from . import ordering

logger = logging.getLogger(__name__)

ROUND_ROBIN_QUANTUM = 5


class Discipline(Enum):
    FCFS = "fcfs"
    SJF = "sjf"
    SJF_PRIORITY = "priority"
    ROUND_ROBIN = "rr"


_ALIASES = {
    "fcfs": Discipline.FCFS,
    "sjf": Discipline.SJF,
    "priority": Discipline.SJF_PRIORITY,
    "sjf-priority": Discipline.SJF_PRIORITY,
    "sjf_priority": Discipline.SJF_PRIORITY,
    "rr": Discipline.ROUND_ROBIN,
    "round-robin": Discipline.ROUND_ROBIN,
    "round_robin": Discipline.ROUND_ROBIN,
}


def dispatch_fcfs(processes: List[Process], acc: ScheduleAccumulator) -> None:
    """
    First-Come First-Serve (non-preemptive), in the order given.

    Waiting time is only recomputed for processes arriving after time 0; a
    process arriving at 0 inherits the waiting time of the one before it.
    """
    service_time = 0
    waiting_time = 0

    for i, p in enumerate(processes):
        if p.arrival_time > 0:
            waiting_time = max(0, service_time - p.arrival_time)

        start = waiting_time + p.arrival_time
        turnaround = p.burst_time + waiting_time
        completion = p.burst_time + p.arrival_time + waiting_time
        service_time += p.burst_time

        acc.charge_wait(i, waiting_time)
        acc.record(p, waiting_time, turnaround, completion, start, start + p.burst_time)
        logger.debug("fcfs: dispatched %s at %d (wait %d)", p.pid, start, waiting_time)


def dispatch_sequential(processes: List[Process], acc: ScheduleAccumulator) -> None:
    """
    Run-to-completion dispatch used by both SJF variants.

    Every process is assumed available at time 0 once sorted: the wait is the
    sum of the bursts dispatched before it, and turnaround equals completion.
    """
    waiting_time = 0

    for i, p in enumerate(processes):
        if i > 0:
            waiting_time += processes[i - 1].burst_time

        completion = p.burst_time + waiting_time

        acc.charge_wait(i, waiting_time)
        acc.record(p, waiting_time, completion, completion, waiting_time, waiting_time + p.burst_time)
        logger.debug("sequential: dispatched %s at %d", p.pid, waiting_time)


def dispatch_round_robin(
    processes: List[Process],
    acc: ScheduleAccumulator,
    quantum: int = ROUND_ROBIN_QUANTUM,
) -> None:
    """
    Round Robin with a fixed quantum, cycling over ``processes`` until every
    burst is used up.

    A single waiting-time accumulator is shared by all processes: every
    dispatch after the first adds its slice to it, and the slice starts at the
    accumulated value. Per-process waits are tracked separately for the
    average. Processes with a non-positive burst count as complete up front
    and are never dispatched.
    """
    time_left = [p.burst_time for p in processes]
    completed = sum(1 for t in time_left if t <= 0)
    waiting_time = 0

    while completed < len(processes):
        for i, p in enumerate(processes):
            if time_left[i] <= 0:
                continue

            run_time = min(quantum, time_left[i])

            if acc.dispatches > 0:
                waiting_time += run_time
                acc.charge_wait(i, run_time)

            start = waiting_time
            completion = run_time + waiting_time
            acc.record(p, waiting_time, completion, completion, start, start + run_time)

            time_left[i] -= run_time
            if time_left[i] <= 0:
                completed += 1
                logger.debug("rr: %s finished after dispatch %d", p.pid, acc.dispatches)


Dispatcher = Callable[[List[Process], ScheduleAccumulator], None]


@dataclass(frozen=True)
class Engine:
    title: str
    order: ordering.OrderingStrategy
    dispatch: Dispatcher
    quantum: Optional[int] = None


ALGORITHMS = {
    Discipline.FCFS: Engine("First-come, first-serve", ordering.in_given_order, dispatch_fcfs),
    Discipline.SJF: Engine("Shortest-job-first", ordering.by_burst_duration, dispatch_sequential),
    Discipline.SJF_PRIORITY: Engine("Priority", ordering.by_priority, dispatch_sequential),
    Discipline.ROUND_ROBIN: Engine(
        "Round-robin",
        ordering.by_arrival_time,
        dispatch_round_robin,
        quantum=ROUND_ROBIN_QUANTUM,
    ),
}


def resolve_discipline(name: Union[str, Discipline]) -> Discipline:
    if isinstance(name, Discipline):
        return name

    key = name.strip().lower()
    if key not in _ALIASES:
        raise ValueError(f"Unknown scheduling discipline '{name}'")
    return _ALIASES[key]


def run_algorithm(name: Union[str, Discipline], processes: Iterable[Process]) -> ScheduleResult:
    """
    Order a private copy of ``processes`` for the requested discipline, run
    its dispatch policy and return rows, Gantt slices and aggregates.
    """
    discipline = resolve_discipline(name)
    engine = ALGORITHMS[discipline]

    ordered = engine.order(processes)
    acc = ScheduleAccumulator(len(ordered))
    engine.dispatch(ordered, acc)

    result = ScheduleResult(
        algorithm=discipline.value,
        title=engine.title,
        quantum=engine.quantum,
        rows=acc.rows,
        timeline=acc.timeline,
        aggregates=compute_aggregates(acc),
    )
    logger.info(
        "%s: %d processes, %d dispatches, last completion %d",
        engine.title,
        len(ordered),
        acc.dispatches,
        acc.last_completion,
    )
    return result


def run_all(
    processes: Sequence[Process],
    disciplines: Optional[Iterable[Union[str, Discipline]]] = None,
) -> List[ScheduleResult]:
    """
    Run the requested disciplines (all four by default) in the fixed order
    FCFS, SJF, SJF-Priority, Round Robin.
    """
    if disciplines is None:
        selected = set(Discipline)
    else:
        selected = {resolve_discipline(d) for d in disciplines}

    return [run_algorithm(d, processes) for d in Discipline if d in selected]
