"""Stacks backed by a fixed-size array and by a singly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class ArrayStack:
    """A LIFO stack holding at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"stack size must be at least 1, got {size}")
        self.size = size
        self._items: list[Any] = []

    def push(self, x: Any) -> None:
        """Place ``x`` on top of the stack."""
        if len(self._items) == self.size:
            raise StackOverflowError("stack is full")
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self, position: int = 1) -> Any:
        """Return the item ``position`` places from the top; 1 is the top itself."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"invalid position {position}")
        return self._items[-position]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from the top of the stack down."""
        return reversed(self._items)


@dataclass
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedStack:
    """An unbounded LIFO stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._count = 0

    def push(self, x: Any) -> None:
        """Place ``x`` on top of the stack."""
        self._top = _Node(x, self._top)
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        node = self._top
        self._top = node.next
        self._count -= 1
        return node.data

    def peek(self, position: int = 1) -> Any:
        """Return the item ``position`` places from the top; 1 is the top itself."""
        if not 1 <= position <= self._count:
            raise IndexError(f"invalid position {position}")
        for index, value in enumerate(self, start=1):
            if index == position:
                return value
        raise IndexError(f"invalid position {position}")

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from the top of the stack down."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next