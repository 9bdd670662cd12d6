"""Scheduling algorithms that turn a process queue into a Gantt chart."""

__all__ = ["fcfs", "nsjf", "npp", "psjf", "pp", "rr"]