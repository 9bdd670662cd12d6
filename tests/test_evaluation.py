import pytest

from cpusched.evaluation import (
    Evaluation,
    calculate_average_times,
    calculate_turnaround_time,
    calculate_waiting_time,
    find_completion_time,
    format_evaluation_table,
)
from cpusched.gantt import GanttChart, ItemType
from cpusched.process import Process
from cpusched.process_queue import ProcessQueue


@pytest.fixture
def chart():
    chart = GanttChart()
    chart.add(0, 0, 1, ItemType.IDLE)
    chart.add(1, 1, 4, ItemType.CPU)
    chart.add(2, 4, 6, ItemType.CPU)
    chart.add(1, 6, 9, ItemType.CPU)
    chart.add(1, 9, 12, ItemType.IO)
    return chart


def test_completion_is_last_cpu_end(chart):
    assert find_completion_time(chart, 1) == 9
    assert find_completion_time(chart, 2) == 6


def test_completion_of_missing_pid_is_zero(chart):
    assert find_completion_time(chart, 5) == 0


def test_turnaround_and_waiting_relation(chart):
    process = Process(pid=1, arrival_time=1, cpu_burst_time=6)
    turnaround = calculate_turnaround_time(process, chart)
    assert turnaround == find_completion_time(chart, 1) - process.arrival_time
    assert calculate_waiting_time(process, chart) == turnaround - process.cpu_burst_time


def test_averages_match_individual_times(chart):
    processes = [
        Process(pid=1, arrival_time=1, cpu_burst_time=6),
        Process(pid=2, arrival_time=2, cpu_burst_time=2),
    ]
    result = calculate_average_times(ProcessQueue(processes=processes), chart)
    turnarounds = [calculate_turnaround_time(p, chart) for p in processes]
    waits = [calculate_waiting_time(p, chart) for p in processes]
    assert result == Evaluation(sum(turnarounds) / 2, sum(waits) / 2)


def test_average_of_empty_queue_rejected(chart):
    with pytest.raises(ValueError):
        calculate_average_times(ProcessQueue(3), chart)


def test_table_layout():
    text = format_evaluation_table([Evaluation(2.5, 1.0), Evaluation(10.0, 3.25)], ["FCFS", "RR"])
    lines = text.splitlines()
    border = "|----------------|---------------------|------------------|"
    assert lines[0] == border
    assert lines[1] == "|   Algorithm    | Avg Turnaround Time | Avg Waiting Time |"
    assert lines[2] == border
    assert lines[-1] == border
    assert lines[3] == "| FCFS" + " " * 11 + "| 2.50" + " " * 16 + "| 1.00" + " " * 13 + "|"
    assert len(lines) == 6
    assert all(len(line) == len(border) for line in lines)


def test_table_needs_matching_names():
    with pytest.raises(ValueError):
        format_evaluation_table([Evaluation(1.0, 1.0)], ["FCFS", "RR"])