"""Diagonal and sparse matrices, diagonal sums and spiral traversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


class DiagonalMatrix:
    """An n x n matrix that stores only its main diagonal.

    Indices are 1-based. Assigning to an off-diagonal cell has no effect,
    since such cells are always zero.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"matrix order must be non-negative, got {n}")
        self.n = n
        self._diagonal = [0] * n

    def _check(self, i: int, j: int) -> None:
        if not (1 <= i <= self.n and 1 <= j <= self.n):
            raise IndexError(f"position ({i}, {j}) is outside a {self.n}x{self.n} matrix")

    def set(self, i: int, j: int, x: int) -> None:
        """Store ``x`` at row ``i``, column ``j`` if that cell is on the diagonal."""
        self._check(i, j)
        if i == j:
            self._diagonal[i - 1] = x

    def get(self, i: int, j: int) -> int:
        """Return the value at row ``i``, column ``j``."""
        self._check(i, j)
        return self._diagonal[i - 1] if i == j else 0

    def rows(self) -> Iterator[list[int]]:
        """Yield the full matrix row by row."""
        for i, value in enumerate(self._diagonal):
            row = [0] * self.n
            row[i] = value
            yield row


def diagonal_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the sum of the main-diagonal elements of a (possibly non-square) matrix."""
    return sum(row[i] for i, row in enumerate(matrix) if i < len(row))


class SparseMatrix:
    """An m x n matrix given by its non-zero ``(row, column, value)`` triples.

    Indices are 0-based.
    """

    def __init__(self, m: int, n: int, elements: Iterable[tuple[int, int, int]]) -> None:
        if m < 0 or n < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {m}x{n}")
        self.m = m
        self.n = n
        self._values: dict[tuple[int, int], int] = {}
        for i, j, x in elements:
            if not (0 <= i < m and 0 <= j < n):
                raise ValueError(f"position ({i}, {j}) is outside a {m}x{n} matrix")
            if (i, j) in self._values:
                raise ValueError(f"position ({i}, {j}) given more than once")
            self._values[(i, j)] = x

    def rows(self) -> Iterator[list[int]]:
        """Yield the full matrix row by row, with zeros filled in."""
        for i in range(self.m):
            yield [self._values.get((i, j), 0) for j in range(self.n)]

    def __str__(self) -> str:
        return "\n".join(" ".join(str(value) for value in row) for row in self.rows())


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")

    result: list[int] = []
    top, bottom, left, right = 0, len(matrix), 0, width
    while top < bottom and left < right:
        result.extend(matrix[top][left:right])
        top += 1
        result.extend(matrix[r][right - 1] for r in range(top, bottom))
        right -= 1
        if top < bottom:
            result.extend(reversed(matrix[bottom - 1][left:right]))
            bottom -= 1
        if left < right:
            result.extend(matrix[r][left] for r in range(bottom - 1, top - 1, -1))
            left += 1
    return result