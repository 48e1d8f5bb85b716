"""Sorting algorithms: bitonic, cocktail selection, counting, numeric-string, bucket and comb."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any


def bitonic_sort(values: Iterable[Any], ascending: bool = True) -> list[Any]:
    """Sort by bitonic merging; the number of values must be a power of two."""
    items = list(values)
    count = len(items)
    if count & (count - 1):
        raise ValueError("bitonic sort needs a power-of-two number of values")

    def compare_and_swap(i: int, j: int, up: bool) -> None:
        if up == (items[i] > items[j]):
            items[i], items[j] = items[j], items[i]

    def merge(low: int, size: int, up: bool) -> None:
        if size > 1:
            half = size // 2
            for i in range(low, low + half):
                compare_and_swap(i, i + half, up)
            merge(low, half, up)
            merge(low + half, half, up)

    def sort(low: int, size: int, up: bool) -> None:
        if size > 1:
            half = size // 2
            sort(low, half, True)
            sort(low + half, half, False)
            merge(low, size, up)

    sort(0, count, ascending)
    return items


def _place_extremes(items: list[Any], low: int, high: int) -> None:
    """Move the minimum of items[low..high] to low and the maximum to high."""
    min_index, max_index = low, high
    for i in range(low, high + 1):
        if items[i] >= items[max_index]:
            max_index = i
        if items[i] <= items[min_index]:
            min_index = i
    items[low], items[min_index] = items[min_index], items[low]
    if max_index == low:
        max_index = min_index
    items[high], items[max_index] = items[max_index], items[high]


def cocktail_selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by selecting the minimum and maximum together on each pass."""
    items = list(values)
    low, high = 0, len(items) - 1
    while low < high:
        _place_extremes(items, low, high)
        low += 1
        high -= 1
    return items


def cocktail_selection_sort_recursive(values: Iterable[Any]) -> list[Any]:
    """Cocktail selection sort with each pass narrowing the range by recursion."""
    items = list(values)

    def sort(low: int, high: int) -> None:
        if low >= high:
            return
        _place_extremes(items, low, high)
        sort(low + 1, high - 1)

    sort(0, len(items) - 1)
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort of integers over the range between their minimum and maximum."""
    items = list(values)
    if not items:
        return []
    smallest = min(items)
    counts = [0] * (max(items) - smallest + 1)
    for value in items:
        counts[value - smallest] += 1
    for i in range(1, len(counts)):
        counts[i] += counts[i - 1]
    result = [0] * len(items)
    for value in reversed(items):
        counts[value - smallest] -= 1
        result[counts[value - smallest]] = value
    return result


def counting_sort_string(text: str) -> str:
    """The characters of text in ascending code-point order."""
    counts = Counter(text)
    return "".join(char * counts[char] for char in sorted(counts))


def numeric_string_key(text: str) -> tuple[int, str]:
    """Sort key that orders digit strings by numeric value, ignoring leading zeros."""
    digits = text.lstrip("0")
    return len(digits), digits


def numeric_sort(strings: Iterable[str]) -> list[str]:
    """Digit strings in numeric rather than alphabetical order."""
    return sorted(strings, key=numeric_string_key)


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in [0, 1) by spreading them over one bucket per value."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def next_gap(gap: int) -> int:
    """Shrink a comb-sort gap by the factor 1.3, never below 1."""
    return max(1, gap * 10 // 13)


def comb_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort generalised to shrinking gaps."""
    items = list(values)
    gap = len(items)
    swapped = True
    while gap != 1 or swapped:
        gap = next_gap(gap)
        swapped = False
        for i in range(len(items) - gap):
            if items[i] > items[i + gap]:
                items[i], items[i + gap] = items[i + gap], items[i]
                swapped = True
    return items