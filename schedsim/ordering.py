"""
Ordering strategies applied before an engine runs.

Every strategy returns a new list and leaves its argument untouched.
``sorted`` is stable, so ties keep their input order.
"""

from __future__ import annotations

from typing import Callable, Iterable, List

from .models import Process

OrderingStrategy = Callable[[Iterable[Process]], List[Process]]


def in_given_order(processes: Iterable[Process]) -> List[Process]:
    return list(processes)


def by_burst_duration(processes: Iterable[Process]) -> List[Process]:
    return sorted(processes, key=lambda p: p.burst_time)


def by_priority(processes: Iterable[Process]) -> List[Process]:
    return sorted(processes, key=lambda p: p.priority)


def by_arrival_time(processes: Iterable[Process]) -> List[Process]:
    return sorted(processes, key=lambda p: p.arrival_time)
