"""Filling a matrix in row-major order and reading it back as a clockwise spiral."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def generate_matrix(rows: int, cols: int) -> list[list[int]]:
    """A rows x cols matrix holding 1, 2, 3, ... in row-major order."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    return [[r * cols + c + 1 for c in range(cols)] for r in range(rows)]


def spiral_order(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Elements of a rectangular matrix read clockwise from the top-left corner inwards."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix must be rectangular")

    total = rows * cols
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    order: list[T] = []
    while top <= bottom and left <= right:
        order.extend(matrix[top][left : right + 1])
        top += 1
        order.extend(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        if len(order) == total:
            break
        order.extend(matrix[bottom][c] for c in range(right, left - 1, -1))
        bottom -= 1
        if len(order) == total:
            break
        order.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
        left += 1
    return order