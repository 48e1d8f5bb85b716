"""Searching text for a word and sorted sequences by ternary search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

# Below this span the remaining range is scanned linearly.
_LINEAR_SPAN = 10


def find_substring(paragraph: str, word: str) -> int | None:
    """Position of the first occurrence of word in paragraph, or None if absent.

    An empty paragraph cannot be searched and raises ValueError.
    """
    if not paragraph:
        raise ValueError("the paragraph is empty")
    position = paragraph.find(word)
    return None if position < 0 else position


def _scan(values: Sequence[Any], left: int, right: int, target: Any) -> int | None:
    return next(
        (i for i in range(left, right + 1) if values[i] == target),
        None,
    )


def _thirds(left: int, right: int) -> tuple[int, int]:
    step = (right - left) // 3
    return left + step, right - step


def ternary_search_iterative(values: Sequence[Any], target: Any) -> int | None:
    """Index of target in ascending values, found by a loop, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        if right - left < _LINEAR_SPAN:
            return _scan(values, left, right, target)
        one_third, two_third = _thirds(left, right)
        if values[one_third] == target:
            return one_third
        if values[two_third] == target:
            return two_third
        if target > values[two_third]:
            left = two_third + 1
        elif target < values[one_third]:
            right = one_third - 1
        else:
            left, right = one_third + 1, two_third - 1
    return None


def ternary_search_recursive(values: Sequence[Any], target: Any) -> int | None:
    """Index of target in ascending values, found by recursion, or None."""

    def search(left: int, right: int) -> int | None:
        if left > right:
            return None
        if right - left < _LINEAR_SPAN:
            return _scan(values, left, right, target)
        one_third, two_third = _thirds(left, right)
        if values[one_third] == target:
            return one_third
        if values[two_third] == target:
            return two_third
        if target < values[one_third]:
            return search(left, one_third - 1)
        if target > values[two_third]:
            return search(two_third + 1, right)
        return search(one_third + 1, two_third - 1)

    return search(0, len(values) - 1)