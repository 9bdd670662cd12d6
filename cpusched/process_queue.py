"""A bounded FIFO queue of processes."""

from __future__ import annotations

from typing import Iterable, Iterator

from .prepare import format_processes
from .process import Process


class QueueFullError(OverflowError):
    """Raised when a process is inserted into a full queue."""


class ProcessQueue:
    """A FIFO queue of processes holding at most ``capacity`` entries.

    Taking from an empty queue yields the idle process rather than failing.
    """

    def __init__(self, capacity: int | None = None, processes: Iterable[Process] = ()) -> None:
        self.processes: list[Process] = list(processes)
        if capacity is None:
            capacity = len(self.processes)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if len(self.processes) > capacity:
            raise ValueError(
                f"{len(self.processes)} processes do not fit a queue of capacity {capacity}"
            )
        self.capacity = capacity

    def copy(self) -> ProcessQueue:
        """Return a new queue with the same processes, sized to hold exactly them."""
        return ProcessQueue(len(self.processes), self.processes)

    def enqueue(self, process: Process) -> bool:
        """Append a process; a full queue drops it. Return whether it was added."""
        if self.is_full():
            return False
        self.processes.append(process)
        return True

    def dequeue(self) -> Process:
        """Remove and return the first process, or the idle process if empty."""
        if not self.processes:
            return Process.idle()
        return self.processes.pop(0)

    def insert(self, process: Process) -> int:
        """Append a process and return its index; raise QueueFullError if full."""
        if self.is_full():
            raise QueueFullError(f"queue is full (capacity {self.capacity})")
        self.processes.append(process)
        return len(self.processes) - 1

    def peek(self) -> Process:
        """Return the first process without removing it, or the idle process."""
        return self.processes[0] if self.processes else Process.idle()

    def is_empty(self) -> bool:
        return not self.processes

    def is_full(self) -> bool:
        return len(self.processes) == self.capacity

    def format(self) -> str:
        """Render the queue as a process table."""
        if self.is_empty():
            return "Queue is empty\n"
        return format_processes(self.processes)

    def __len__(self) -> int:
        return len(self.processes)

    def __iter__(self) -> Iterator[Process]:
        return iter(self.processes)

    def __repr__(self) -> str:
        return f"ProcessQueue(capacity={self.capacity}, processes={self.processes!r})"