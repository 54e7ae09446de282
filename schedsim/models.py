from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Process:
    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0


@dataclass
class TimeSlice:
    """
    One contiguous interval during which a process holds the CPU.
    """

    pid: int
    start: int
    stop: int

    @property
    def duration(self) -> int:
        return self.stop - self.start


@dataclass
class ScheduleRow:
    """
    One dispatch event as rendered in the schedule table.

    Non-preemptive engines emit one row per process; Round Robin emits one
    per quantum consumed.
    """

    pid: int
    priority: int
    burst_time: int
    arrival_time: int
    waiting_time: int
    turnaround_time: int
    completion_time: int

    def as_cells(self) -> List[str]:
        return [
            str(self.pid),
            str(self.priority),
            str(self.burst_time),
            str(self.arrival_time),
            str(self.waiting_time),
            str(self.turnaround_time),
            str(self.completion_time),
        ]


@dataclass
class Aggregates:
    avg_waiting: float = 0.0
    avg_turnaround: float = 0.0
    throughput: float = 0.0


@dataclass
class ScheduleResult:
    algorithm: str
    title: str
    quantum: Optional[int] = None
    rows: List[ScheduleRow] = field(default_factory=list)
    timeline: List[TimeSlice] = field(default_factory=list)
    aggregates: Aggregates = field(default_factory=Aggregates)
