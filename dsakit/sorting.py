"""Counting sort, radix sort and quicksort for lists of integers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate
from typing import Callable


def _stable_count_sort(values: list[int], key: Callable[[int], int], buckets: int) -> list[int]:
    counts = [0] * buckets
    for v in values:
        counts[key(v)] += 1
    positions = list(accumulate(counts))
    result = [0] * len(values)
    for v in reversed(values):
        k = key(v)
        positions[k] -= 1
        result[positions[k]] = v
    return result


def _require_non_negative(values: list[int]) -> None:
    if any(v < 0 for v in values):
        raise ValueError("only non-negative integers can be sorted this way")


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ``values`` sorted, using a counting sort."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items)
    return _stable_count_sort(items, lambda v: v, max(items) + 1)


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ``values`` sorted, least significant digit first."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items)
    largest = max(items)
    pos = 1
    while largest // pos > 0:
        items = _stable_count_sort(items, lambda v, p=pos: (v // p) % 10, 10)
        pos *= 10
    return items


def _partition(a: list, low: int, high: int) -> int:
    pivot = a[low]
    i, j = low, high
    while i < j:
        i += 1
        while i < high and a[i] <= pivot:
            i += 1
        j -= 1
        while a[j] > pivot:
            j -= 1
        if i < j:
            a[i], a[j] = a[j], a[i]
    a[low], a[j] = a[j], a[low]
    return j


def quick_sort(values: Iterable) -> list:
    """Return ``values`` sorted, using quicksort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items))]
    while pending:
        low, high = pending.pop()
        if high - low > 1:
            j = _partition(items, low, high)
            pending.append((low, j))
            pending.append((j + 1, high))
    return items