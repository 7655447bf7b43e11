"""A fixed-capacity circular queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when enqueuing onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


class CircularQueue:
    """A FIFO queue backed by a ring buffer holding at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"queue size must be at least 1, got {size}")
        self.size = size
        self._buffer: list[Any] = [None] * size
        self._front = 0
        self._count = 0

    def enqueue(self, x: Any) -> None:
        """Add ``x`` at the rear of the queue."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._buffer[(self._front + self._count) % self.size] = x
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        x = self._buffer[self._front]
        self._buffer[self._front] = None
        self._front = (self._front + 1) % self.size
        self._count -= 1
        return x

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.size

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._count):
            yield self._buffer[(self._front + offset) % self.size]