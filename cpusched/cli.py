"""Command line entry point: generate a random workload and compare schedulers."""

from __future__ import annotations

import os
import random
import sys
from typing import Sequence

from .evaluation import calculate_average_times, format_evaluation_table
from .prepare import format_processes, generate_processes
from .process_queue import ProcessQueue
from .strategy.fcfs import fcfs_scheduling
from .strategy.npp import npp_scheduling
from .strategy.nsjf import nsjf_scheduling
from .strategy.pp import pp_scheduling
from .strategy.psjf import psjf_scheduling
from .strategy.rr import rr_scheduling

ALGORITHM_NAMES = ("FCFS", "NP-SJF", "P-SJF", "NP-P", "P-P", "RR")
ROUND_ROBIN_TIME_UNIT = 2
_SEPARATOR = "\n\n==============================================\n"


def _parse_int(text: str) -> int:
    """Read a leading decimal integer the lenient way; anything unreadable is 0."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def generate_io_times(rng: random.Random | None = None) -> list[int]:
    """Return 2 to 4 increasing IO event ticks, each 5 to 14 after the previous one."""
    rng = rng or random.Random()
    count = rng.randrange(3) + 2
    times: list[int] = []
    now = 0
    for _ in range(count):
        now += rng.randrange(10) + 5
        times.append(now)
    return times


def main(argv: Sequence[str] | None = None) -> int:
    """Run every scheduler on a random workload and print charts and averages."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "cpusched"
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) != 5:
        print(
            f"Usage: {prog} <number of processes> <max arrival time> <max cpu burst> "
            "<max io burst> <max priority>"
        )
        return 1

    n, max_arrival, max_cpu, max_io, max_priority = (_parse_int(arg) for arg in args)
    if min(n, max_arrival, max_cpu, max_io, max_priority) <= 0:
        print("All parameters must be positive.")
        return 1

    rng = random.Random()
    processes = generate_processes(n, max_arrival, max_cpu, max_io, max_priority, rng)

    print("Processes:")
    print(format_processes(processes), end="")

    queue = ProcessQueue(processes=processes)

    io_times = generate_io_times(rng)
    print("IO times: " + "".join(f"{t} " for t in io_times))

    charts = [
        fcfs_scheduling(queue, io_times),
        nsjf_scheduling(queue, io_times),
        psjf_scheduling(queue, io_times),
        npp_scheduling(queue, io_times),
        pp_scheduling(queue, io_times),
        rr_scheduling(queue, io_times, ROUND_ROBIN_TIME_UNIT),
    ]
    evaluations = [calculate_average_times(queue, chart) for chart in charts]

    for name, chart in zip(ALGORITHM_NAMES, charts):
        print(f"{name}: ")
        print(chart.format(), end="")
        print(_SEPARATOR)

    print(format_evaluation_table(evaluations, ALGORITHM_NAMES), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())