"""Range addition with range minimum queries."""

from __future__ import annotations


class RangeAddMinTree:
    """Array of zeros supporting range additions and range minima.

    Ranges are half-open: [left, right).
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._n = size
        cells = 4 * max(size, 1)
        self._min = [0] * cells
        self._lazy = [0] * cells

    def __len__(self) -> int:
        return self._n

    def _push(self, node: int) -> None:
        v = self._lazy[node]
        if v:
            for child in (2 * node, 2 * node + 1):
                self._min[child] += v
                self._lazy[child] += v
            self._lazy[node] = 0

    def _update(self, node: int, lo: int, hi: int, left: int, right: int, value: int) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._min[node] += value
            self._lazy[node] += value
            return
        self._push(node)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, value)
        self._update(2 * node + 1, mid + 1, hi, left, right, value)
        self._min[node] = min(self._min[2 * node], self._min[2 * node + 1])

    def _query(self, node: int, lo: int, hi: int, left: int, right: int):
        if right < lo or hi < left:
            return None
        if left <= lo and hi <= right:
            return self._min[node]
        self._push(node)
        mid = (lo + hi) // 2
        found = [
            m
            for m in (
                self._query(2 * node, lo, mid, left, right),
                self._query(2 * node + 1, mid + 1, hi, left, right),
            )
            if m is not None
        ]
        return min(found) if found else None

    def add(self, left: int, right: int, value: int) -> None:
        """Add value to every element in [left, right)."""
        if self._n and left < right:
            self._update(1, 0, self._n - 1, left, right - 1, value)

    def range_min(self, left: int, right: int) -> int:
        """Minimum over [left, right); raises ValueError when the range is empty."""
        lo, hi = max(left, 0), min(right, self._n)
        if lo >= hi:
            raise ValueError("range_min of an empty range")
        return self._query(1, 0, self._n - 1, lo, hi - 1)