"""First Come First Serve scheduling, and the simulation loop every strategy runs on."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional

from ..gantt import GanttChart, ItemType
from ..process import Process
from ..process_queue import ProcessQueue
from ..sorting import sort_by_arrival_time

MAX_TIME = 1000


@dataclass(frozen=True)
class _Policy:
    """How a strategy orders, preempts and time-slices the ready queue.

    ``order`` reorders the ready queue after admissions and before a pick;
    without it the ready queue stays in insertion order. ``record_empty_idle``
    keeps zero-length idle slices in the chart. ``preemptive`` lets a ready
    process with a shorter burst take over from the running one. ``quantum``
    limits how many ticks a process runs before going back to the ready queue.
    """

    order: Optional[Callable[[ProcessQueue], None]] = None
    record_empty_idle: bool = False
    preemptive: bool = False
    quantum: Optional[int] = None


def _simulate(queue: ProcessQueue, io_times: Iterable[int], policy: _Policy) -> GanttChart:
    """Run ``queue`` tick by tick under ``policy`` and return the resulting chart.

    At each tick in ``io_times`` the running process stops; it is ready again
    ``io_burst_time`` ticks later with the rest of its burst.
    """
    target = queue.copy()
    ready = ProcessQueue(len(target))
    io_wait = ProcessQueue(len(target))
    sort_by_arrival_time(target)

    io_events = list(io_times)
    io_index = 0
    start = 0

    next_process = target.dequeue()
    current = Process.idle()
    chart = GanttChart()

    def reorder() -> None:
        if policy.order is not None:
            policy.order(ready)

    for now in range(MAX_TIME):
        changed = bool(io_wait) or next_process.arrival_time <= now
        while io_wait and io_wait.peek().arrival_time <= now:
            ready.insert(io_wait.dequeue())
        while next_process.arrival_time <= now and not next_process.is_idle():
            ready.insert(next_process)
            next_process = target.dequeue()
        if changed:
            reorder()

        if policy.preemptive and changed and not current.is_idle() and ready:
            left = current.cpu_burst_time - (now - start)
            if left > ready.peek().cpu_burst_time:
                chart.add(current.pid, start, now, ItemType.CPU)
                ready.insert(replace(current, cpu_burst_time=left))
                start = now
                reorder()
                current = ready.dequeue()

        if current.is_idle():
            if not next_process.is_idle():
                reorder()
                current = ready.dequeue()
                if not current.is_idle():
                    if policy.record_empty_idle or start < now:
                        chart.add(0, start, now, ItemType.IDLE)
                    start = now
            continue

        burst = now - start

        if io_index < len(io_events) and io_events[io_index] == now:
            chart.add(current.pid, start, now, ItemType.CPU)
            io_index += 1
            current = replace(
                current,
                arrival_time=now + current.io_burst_time,
                cpu_burst_time=current.cpu_burst_time - burst,
            )
            if current.cpu_burst_time > 0:
                io_wait.insert(current)
            sort_by_arrival_time(io_wait)
            current = ready.dequeue()
            start = now
            continue

        remaining = current.cpu_burst_time - burst
        if remaining <= 0 or (policy.quantum is not None and burst >= policy.quantum):
            chart.add(current.pid, start, now, ItemType.CPU)
            if target.is_empty() and ready.is_empty() and io_wait.is_empty():
                break
            if remaining > 0:
                ready.insert(replace(current, cpu_burst_time=remaining))
            start = now
            current = ready.dequeue()

    return chart


def fcfs_scheduling(queue: ProcessQueue, io_times: Iterable[int]) -> GanttChart:
    """Schedule ``queue`` in order of arrival; ``io_times`` are the IO event ticks."""
    return _simulate(queue, io_times, _Policy(order=sort_by_arrival_time, record_empty_idle=True))