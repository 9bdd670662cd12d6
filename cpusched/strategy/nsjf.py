"""Non-preemptive Shortest Job First scheduling."""

from __future__ import annotations

from typing import Iterable

from ..gantt import GanttChart
from ..process_queue import ProcessQueue
from ..sorting import sort_by_shortest_job_first
from .fcfs import _Policy, _simulate

_NSJF = _Policy(order=sort_by_shortest_job_first, record_empty_idle=True)


def nsjf_scheduling(queue: ProcessQueue, io_times: Iterable[int]) -> GanttChart:
    """Schedule ``queue`` picking the shortest remaining burst whenever the CPU frees up."""
    return _simulate(queue, io_times, _NSJF)