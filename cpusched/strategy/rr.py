"""Round Robin scheduling."""

from __future__ import annotations

from typing import Iterable

from ..gantt import GanttChart
from ..process_queue import ProcessQueue
from .fcfs import _Policy, _simulate


def rr_scheduling(queue: ProcessQueue, io_times: Iterable[int], time_unit: int) -> GanttChart:
    """Schedule ``queue`` in arrival order, giving each process ``time_unit`` ticks at a time.

    A process whose slice runs out goes to the back of the ready queue with
    its remaining burst. Idle slices of zero length are left out of the chart.
    """
    return _simulate(queue, io_times, _Policy(quantum=time_unit))