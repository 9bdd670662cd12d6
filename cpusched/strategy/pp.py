"""Preemptive scheduling under the P-P name.

Ready processes are ordered by remaining CPU burst; a running process is
preempted when a ready one needs less time than it has left, so the schedule
is the one preemptive shortest job first gives.
"""

from __future__ import annotations

from typing import Iterable

from ..gantt import GanttChart
from ..process_queue import ProcessQueue
from .psjf import psjf_scheduling


def pp_scheduling(queue: ProcessQueue, io_times: Iterable[int]) -> GanttChart:
    """Schedule ``queue`` preemptively by remaining burst."""
    return psjf_scheduling(queue, io_times)