"""Classic recursive functions: factorial, Fibonacci, powers, Hanoi and friends."""

from __future__ import annotations

from collections.abc import Hashable, Iterator


def factorial(n: int) -> int:
    """Return n!."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of ``n`` below 2 are returned as they are."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


def fibonacci_series(n: int) -> list[int]:
    """Return the Fibonacci numbers from F(0) to F(n); always at least ``[0, 1]``."""
    series = [0, 1]
    for _ in range(2, n + 1):
        series.append(series[-2] + series[-1])
    return series


def indirect_recursion(n: int) -> list[int]:
    """Return the values visited by two mutually recursive functions.

    The first records ``n`` and passes ``n - 1`` on; the second records ``n``
    and passes ``n // 2`` back. Both stop once ``n`` is no longer positive.
    """
    visited = []
    halve = False
    while n > 0:
        visited.append(n)
        n = n // 2 if halve else n - 1
        halve = not halve
    return visited


def power(m: int, n: int) -> int:
    """Return m raised to the non-negative integer power n."""
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    result = 1
    for _ in range(n):
        result *= m
    return result


def sum_of_naturals(n: int) -> int:
    """Return 1 + 2 + ... + n for n >= 1."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    return n * (n + 1) // 2


def taylor_e(x: float, n: int) -> float:
    """Approximate e**x with the first n + 1 terms of its Taylor series (Horner's rule)."""
    if n < 0:
        raise ValueError(f"number of terms must be non-negative, got {n}")
    s = 1.0
    for k in range(n, 0, -1):
        s = 1 + x / k * s
    return s


def tower_of_hanoi(
    n: int, source: Hashable, via: Hashable, target: Hashable
) -> list[tuple[Hashable, Hashable]]:
    """Return the moves that carry n discs from ``source`` to ``target``."""
    moves: list[tuple[Hashable, Hashable]] = []

    def solve(count: int, a: Hashable, b: Hashable, c: Hashable) -> None:
        if count > 0:
            solve(count - 1, a, c, b)
            moves.append((a, c))
            solve(count - 1, b, a, c)

    solve(n, source, via, target)
    return moves


def tail_recursion(n: int) -> list[int]:
    """Return the values a tail-recursive countdown visits: n, n-1, ..., 1."""
    return list(range(n, 0, -1))


def head_recursion(n: int) -> list[int]:
    """Return the values a head-recursive countdown visits: 1, 2, ..., n."""
    return list(range(1, n + 1))


def _tree(n: int) -> Iterator[int]:
    if n > 0:
        yield n
        yield from _tree(n - 1)
        yield from _tree(n - 1)


def tree_recursion(n: int) -> list[int]:
    """Return the values visited by a function that records n and calls itself twice on n - 1."""
    return list(_tree(n))


def nested_recursion(n: int) -> int:
    """Evaluate f(n) = n - 10 if n > 100 else f(f(n + 11))."""
    pending = 1
    while pending:
        if n > 100:
            n -= 10
            pending -= 1
        else:
            n += 11
            pending += 1
    return n