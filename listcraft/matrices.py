"""Spiral-ordered matrices."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count

from listcraft.nodes import ListNode


def _spiral_cells(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for c in range(left, right + 1):
            yield top, c
        for r in range(top + 1, bottom + 1):
            yield r, right
        if top < bottom:
            for c in range(right - 1, left - 1, -1):
                yield bottom, c
        if left < right:
            for r in range(bottom - 1, top, -1):
                yield r, left
        top += 1
        bottom -= 1
        left += 1
        right -= 1


def generate_matrix(n: int) -> list[list[int]]:
    """Return an n x n matrix filled with 1..n*n in clockwise spiral order."""
    if n < 0:
        raise ValueError("n must not be negative")
    matrix = [[0] * n for _ in range(n)]
    for (r, c), value in zip(_spiral_cells(n, n), count(1)):
        matrix[r][c] = value
    return matrix


def spiral_matrix(m: int, n: int, head: ListNode | None) -> list[list[int]]:
    """Lay the list's values into an m x n matrix in spiral order, -1 elsewhere."""
    if m < 0 or n < 0:
        raise ValueError("dimensions must not be negative")
    matrix = [[-1] * n for _ in range(m)]
    values = iter(head) if head is not None else iter(())
    for (r, c), value in zip(_spiral_cells(m, n), values):
        matrix[r][c] = value
    return matrix