import pytest

from dsakit.queues import CircularQueue, QueueEmptyError, QueueFullError


def test_fifo_order():
    q = CircularQueue(4)
    items = [10, 20, 30, 40]
    for x in items:
        q.enqueue(x)
    assert [q.dequeue() for _ in items] == items


def test_overflow():
    q = CircularQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue(3)
    assert list(q) == [1, 2]


def test_underflow():
    q = CircularQueue(3)
    with pytest.raises(QueueEmptyError):
        q.dequeue()


def test_wraparound():
    q = CircularQueue(3)
    for x in (1, 2, 3):
        q.enqueue(x)
    assert q.dequeue() == 1
    assert q.dequeue() == 2
    q.enqueue(4)
    q.enqueue(5)
    assert list(q) == [3, 4, 5]
    assert [q.dequeue() for _ in range(3)] == [3, 4, 5]
    assert q.is_empty()


def test_len_tracks_contents():
    q = CircularQueue(5)
    assert len(q) == 0
    for n, x in enumerate("abcde", start=1):
        q.enqueue(x)
        assert len(q) == n
    q.dequeue()
    assert len(q) == 4


def test_iteration_does_not_consume():
    q = CircularQueue(3)
    q.enqueue("x")
    q.enqueue("y")
    assert list(q) == ["x", "y"]
    assert len(q) == 2


@pytest.mark.parametrize("size", [0, -2])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        CircularQueue(size)


def test_many_cycles_preserve_order():
    q = CircularQueue(3)
    out = []
    for x in range(20):
        if q.is_full():
            out.append(q.dequeue())
        q.enqueue(x)
    out.extend(q.dequeue() for _ in range(len(q)))
    assert out == list(range(20))