"""Random generation and display of process sets."""

from __future__ import annotations

import random
from typing import Iterable

from .process import Process

_HEADER = "PID\tArrival\tCPU Burst\tIO Burst\tPriority"
_RULE = "-" * 59


def generate_processes(
    n: int,
    max_arrival_time: int,
    max_cpu_burst: int,
    max_io_burst: int,
    max_priority: int,
    rng: random.Random | None = None,
) -> list[Process]:
    """Create ``n`` processes with pids 1..n and random times.

    Arrival is in [0, max_arrival_time); bursts and priority are at least 1
    and at most their maximum. A non-positive maximum raises ValueError.
    """
    rng = rng or random.Random()
    return [
        Process(
            pid=pid,
            arrival_time=rng.randrange(max_arrival_time),
            cpu_burst_time=rng.randrange(max_cpu_burst) + 1,
            io_burst_time=rng.randrange(max_io_burst) + 1,
            priority=rng.randrange(max_priority) + 1,
        )
        for pid in range(1, n + 1)
    ]


def format_processes(processes: Iterable[Process]) -> str:
    """Render processes as a tab-separated table."""
    lines = [_HEADER, _RULE]
    lines.extend(
        f"{p.pid:4d}\t{p.arrival_time:4d}\t{p.cpu_burst_time:4d}\t"
        f"{p.io_burst_time:4d}\t{p.priority:4d}"
        for p in processes
    )
    return "\n".join(lines) + "\n"