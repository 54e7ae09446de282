"""
Batch CPU scheduling simulator.

Runs FCFS, SJF, priority SJF and Round Robin over a fixed list of processes
and reports per-dispatch timings, aggregates and a Gantt strip.
"""

__all__ = ["cli", "algorithms", "models"]
