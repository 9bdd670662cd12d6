"""Turnaround and waiting time measures for a schedule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .gantt import GanttChart, ItemType
from .process import Process

_BORDER = "|----------------|---------------------|------------------|"
_TITLE = "|   Algorithm    | Avg Turnaround Time | Avg Waiting Time |"


@dataclass(frozen=True)
class Evaluation:
    avg_turnaround_time: float
    avg_waiting_time: float


def find_completion_time(chart: GanttChart, pid: int) -> int:
    """Return the end of the last CPU slice of ``pid``, or 0 if it never ran."""
    completion = 0
    for item in chart:
        if item.pid == pid and item.item_type == ItemType.CPU:
            completion = item.end_time
    return completion


def calculate_waiting_time(process: Process, chart: GanttChart) -> int:
    completion = find_completion_time(chart, process.pid)
    return completion - process.arrival_time - process.cpu_burst_time


def calculate_turnaround_time(process: Process, chart: GanttChart) -> int:
    completion = find_completion_time(chart, process.pid)
    return completion - process.arrival_time


def calculate_average_times(queue: Iterable[Process], chart: GanttChart) -> Evaluation:
    """Average turnaround and waiting time over the processes of ``queue``."""
    processes = list(queue)
    if not processes:
        raise ValueError("cannot average over an empty set of processes")
    total_turnaround = sum(calculate_turnaround_time(p, chart) for p in processes)
    total_waiting = sum(calculate_waiting_time(p, chart) for p in processes)
    count = len(processes)
    return Evaluation(total_turnaround / count, total_waiting / count)


def format_evaluation_table(
    evaluations: Sequence[Evaluation], algorithm_names: Sequence[str]
) -> str:
    """Render one row per algorithm with its average times."""
    if len(evaluations) != len(algorithm_names):
        raise ValueError("each evaluation needs exactly one algorithm name")
    lines = [_BORDER, _TITLE, _BORDER]
    lines.extend(
        f"| {name:<14} | {ev.avg_turnaround_time:<18.2f}  | {ev.avg_waiting_time:<16.2f} |"
        for ev, name in zip(evaluations, algorithm_names)
    )
    lines.append(_BORDER)
    return "\n".join(lines) + "\n"