"""Orderings of a process queue used by the schedulers.

Each ordering breaks ties by pid, lowest first.
"""

from __future__ import annotations

from .process_queue import ProcessQueue


def sort_by_shortest_job_first(queue: ProcessQueue) -> None:
    """Order the queue by remaining CPU burst, shortest first."""
    queue.processes.sort(key=lambda p: (p.cpu_burst_time, p.pid))


def sort_by_arrival_time(queue: ProcessQueue) -> None:
    """Order the queue by arrival time, earliest first."""
    queue.processes.sort(key=lambda p: (p.arrival_time, p.pid))


def sort_by_priority(queue: ProcessQueue) -> None:
    """Order the queue by priority value, lowest first."""
    queue.processes.sort(key=lambda p: (p.priority, p.pid))