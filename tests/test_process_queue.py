import pytest

from cpusched.process import Process
from cpusched.process_queue import ProcessQueue, QueueFullError

ROWS = [(1, 0, 5, 2, 3), (2, 1, 3, 1, 1), (3, 2, 8, 4, 2)]


@pytest.fixture
def procs():
    return [Process(*row) for row in ROWS]


def test_dequeue_is_fifo(procs):
    queue = ProcessQueue(processes=procs)
    assert [queue.dequeue() for _ in procs] == procs
    assert queue.is_empty()


@pytest.mark.parametrize("take", [ProcessQueue.dequeue, ProcessQueue.peek])
def test_taking_from_empty_queue_gives_idle(take):
    queue = ProcessQueue(4)
    assert take(queue).is_idle()
    assert len(queue) == 0


def test_capacity_defaults_to_process_count(procs):
    queue = ProcessQueue(processes=procs)
    assert queue.capacity == len(ROWS)
    assert queue.is_full()


def test_insert_returns_index(procs):
    queue = ProcessQueue(len(procs))
    assert [queue.insert(p) for p in procs] == [0, 1, 2]
    assert list(queue) == procs


def test_insert_into_full_queue_raises(procs):
    queue = ProcessQueue(processes=procs)
    with pytest.raises(QueueFullError):
        queue.insert(Process(pid=9))
    assert len(queue) == 3


def test_enqueue_drops_when_full(procs):
    queue = ProcessQueue(1)
    assert queue.enqueue(procs[0]) is True
    assert queue.enqueue(procs[1]) is False
    assert list(queue) == procs[:1]


def test_copy_is_independent_and_sized_to_contents(procs):
    queue = ProcessQueue(10, procs)
    clone = queue.copy()
    assert list(clone) == procs
    assert clone.capacity == 3
    clone.dequeue()
    assert (len(queue), len(clone)) == (3, 2)


def test_peek_does_not_remove(procs):
    queue = ProcessQueue(processes=procs)
    assert queue.peek() == procs[0]
    assert len(queue) == 3


def test_format_empty():
    assert ProcessQueue(3).format() == "Queue is empty\n"


def test_format_lists_each_process(procs):
    header, rule, *body = ProcessQueue(processes=procs).format().splitlines()
    assert header == "PID\tArrival\tCPU Burst\tIO Burst\tPriority"
    assert rule == "-" * 59
    assert [int(line.split("\t")[0]) for line in body] == [row[0] for row in ROWS]