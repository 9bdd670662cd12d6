"""Preemptive Shortest Job First scheduling."""

from __future__ import annotations

from typing import Iterable

from ..gantt import GanttChart
from ..process_queue import ProcessQueue
from ..sorting import sort_by_shortest_job_first
from .fcfs import _Policy, _simulate


def psjf_scheduling(queue: ProcessQueue, io_times: Iterable[int]) -> GanttChart:
    """Schedule ``queue`` by shortest remaining burst, preempting on arrivals.

    Idle slices of zero length are left out of the chart.
    """
    return _simulate(queue, io_times, _Policy(order=sort_by_shortest_job_first, preemptive=True))