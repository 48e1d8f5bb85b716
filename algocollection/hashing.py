"""Hash table with separate chaining over integer values."""

from __future__ import annotations


class ChainedHashTable:
    """Fixed number of buckets, each holding values in insertion order."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("hash table size must be positive")
        self.size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def hash_of(self, value: int) -> int:
        """Remainder of value by the table size, carrying the sign of value."""
        remainder = abs(value) % self.size
        return -remainder if value < 0 else remainder

    def _bucket(self, value: int) -> list[int]:
        return self._buckets[abs(self.hash_of(value))]

    def add(self, value: int) -> None:
        """Append value to the end of its bucket's chain."""
        self._bucket(value).append(value)

    def contains(self, value: int) -> bool:
        return value in self._bucket(value)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def buckets(self) -> list[list[int]]:
        """Copies of every bucket's chain, in bucket order."""
        return [list(chain) for chain in self._buckets]

    def describe(self) -> str:
        """One line per bucket: either empty or the values it holds."""
        lines = []
        for key, chain in enumerate(self._buckets):
            if chain:
                values = " ".join(str(v) for v in chain)
                lines.append(f"Key {key} has values = {values}\n")
            else:
                lines.append(f"Key {key} is empty\n")
        return "".join(lines)