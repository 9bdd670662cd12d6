"""CPU scheduling simulator: FCFS, SJF, priority and round-robin with Gantt charts."""

__version__ = "0.1.0"