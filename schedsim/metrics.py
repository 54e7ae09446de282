from __future__ import annotations

from typing import List

from .models import Aggregates, Process, ScheduleRow, TimeSlice


class ScheduleAccumulator:
    """
    Collects rows, Gantt slices and running totals while an engine runs.

    ``waits`` is indexed parallel to the ordered process list the engine is
    working on and holds the per-process waiting total used for the average.
    """

    def __init__(self, process_count: int) -> None:
        self.process_count = process_count
        self.rows: List[ScheduleRow] = []
        self.timeline: List[TimeSlice] = []
        self.waits: List[int] = [0] * process_count
        self.dispatches = 0
        self.total_turnaround = 0
        self.last_completion = 0

    def charge_wait(self, index: int, amount: int) -> None:
        self.waits[index] += amount

    def record(
        self,
        process: Process,
        waiting_time: int,
        turnaround_time: int,
        completion_time: int,
        start: int,
        stop: int,
    ) -> ScheduleRow:
        row = ScheduleRow(
            pid=process.pid,
            priority=process.priority,
            burst_time=process.burst_time,
            arrival_time=process.arrival_time,
            waiting_time=waiting_time,
            turnaround_time=turnaround_time,
            completion_time=completion_time,
        )
        self.rows.append(row)
        self.timeline.append(TimeSlice(pid=process.pid, start=start, stop=stop))

        self.dispatches += 1
        self.total_turnaround += turnaround_time
        self.last_completion = completion_time
        return row


def compute_aggregates(acc: ScheduleAccumulator) -> Aggregates:
    """
    Average wait over processes, average turnaround over dispatch events and
    throughput as dispatches per unit of the last completion time.

    Non-preemptive engines dispatch each process once, so the last two reduce
    to per-process figures there.
    """
    if acc.process_count == 0 or acc.dispatches == 0:
        return Aggregates()

    avg_waiting = sum(acc.waits) / acc.process_count
    avg_turnaround = acc.total_turnaround / acc.dispatches
    throughput = acc.dispatches / acc.last_completion if acc.last_completion > 0 else 0.0

    return Aggregates(
        avg_waiting=avg_waiting,
        avg_turnaround=avg_turnaround,
        throughput=throughput,
    )
