# cpusched

A small simulator for classic CPU scheduling algorithms. It makes a random set of
processes and a random series of I/O interrupt ticks. It then runs every algorithm
over that same workload, prints a Gantt chart for each one, and compares them by
average turnaround time and average waiting time.

Algorithms:

| Name   | Function                                   | Behaviour                                              |
|--------|--------------------------------------------|--------------------------------------------------------|
| FCFS   | `cpusched.strategy.fcfs.fcfs_scheduling`   | First come, first served                               |
| NP-SJF | `cpusched.strategy.nsjf.nsjf_scheduling`   | Non-preemptive shortest job first                      |
| P-SJF  | `cpusched.strategy.psjf.psjf_scheduling`   | Preemptive shortest job first (by remaining burst)     |
| NP-P   | `cpusched.strategy.npp.npp_scheduling`     | Non-preemptive priority (lowest priority value first)  |
| P-P    | `cpusched.strategy.pp.pp_scheduling`       | Preemptive, ordered by remaining burst; gives the same schedule as P-SJF |
| RR     | `cpusched.strategy.rr.rr_scheduling`       | Round robin with a given time unit                     |

At each I/O interrupt tick the running process stops. It becomes ready again
`io_burst_time` ticks later with the rest of its CPU burst. A simulation runs for
at most 1000 ticks.

## Installation

```
pip install .
```

## Command line

```
cpusched <number of processes> <max arrival time> <max cpu burst> <max io burst> <max priority>
```

Example:

```
cpusched 5 10 8 4 5
```

All five values must be positive; otherwise the command prints a message and
exits with status 1. Processes get pids 1..n, an arrival time in
`[0, max arrival time)`, and CPU burst, I/O burst and priority between 1 and their
maximum. Between 2 and 4 I/O interrupt ticks are drawn, each 5 to 14 ticks after
the one before it. Round robin uses a time unit of 2.

The output has these parts, in order:

- the generated process table
- the I/O interrupt ticks
- a Gantt chart for each algorithm, with CPU and IDLE slices
- a summary table of average turnaround and waiting times

## Library use

```python
import random

from cpusched.prepare import generate_processes, format_processes
from cpusched.process_queue import ProcessQueue
from cpusched.strategy.fcfs import fcfs_scheduling
from cpusched.strategy.rr import rr_scheduling
from cpusched.evaluation import calculate_average_times, format_evaluation_table

rng = random.Random(42)
processes = generate_processes(4, 10, 6, 3, 5, rng)
print(format_processes(processes))

queue = ProcessQueue(len(processes), processes)
io_times = [7, 15]

fcfs = fcfs_scheduling(queue, io_times)
rr = rr_scheduling(queue, io_times, 2)
print(fcfs.format())

evaluations = [calculate_average_times(queue, fcfs), calculate_average_times(queue, rr)]
print(format_evaluation_table(evaluations, ["FCFS", "RR"]))
```

Each scheduler copies the queue it is given and leaves the original unchanged.
Each one returns a `GanttChart`, an iterable of `GanttItem` entries holding a pid,
a start time, an end time and an `ItemType` (`CPU`, `IO` or `IDLE`); pid 0 marks
the idle CPU.

`ProcessQueue` is a bounded FIFO: `insert` raises `QueueFullError` when the queue
is full, `enqueue` returns `False` instead, and `dequeue`/`peek` on an empty queue
return the idle process. `cpusched.sorting` orders a queue by CPU burst, arrival
time or priority, breaking ties by pid. `calculate_average_times` raises
`ValueError` for an empty set of processes.

## What it does not do

The command always generates a random workload; there is no way to feed it a
process list or I/O ticks of your own from the command line, and it does not
save results anywhere. Use the library functions above for a fixed workload.

## Tests

```
pip install .[test]
pytest
```