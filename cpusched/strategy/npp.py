"""Non-preemptive priority scheduling."""

from __future__ import annotations

from typing import Iterable

from ..gantt import GanttChart
from ..process_queue import ProcessQueue
from ..sorting import sort_by_priority
from .fcfs import _Policy, _simulate


def npp_scheduling(queue: ProcessQueue, io_times: Iterable[int]) -> GanttChart:
    """Schedule ``queue`` picking the lowest priority value whenever the CPU frees up.

    Idle slices of zero length are left out of the chart.
    """
    return _simulate(queue, io_times, _Policy(order=sort_by_priority))