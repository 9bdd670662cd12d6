"""The process record shared by the queues and the schedulers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A process with its arrival time, bursts and priority.

    A pid of 0 marks the idle (empty) process.
    """

    pid: int
    arrival_time: int = 0
    cpu_burst_time: int = 0
    io_burst_time: int = 0
    priority: int = 0

    @classmethod
    def idle(cls) -> Process:
        """Return the empty process that stands for an idle CPU."""
        return cls(pid=0)

    def is_idle(self) -> bool:
        """Return True if this is the idle process."""
        return self.pid == 0