"""Sum of XORs of all subarrays of a range, with point assignments, modulo 4001."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from itertools import accumulate

MOD = 4001
BITS = 11


def _check_value(value: int) -> int:
    if not 0 <= value < 1 << BITS:
        raise ValueError(f"value {value} outside 0..{(1 << BITS) - 1}")
    return value


class SubarrayXorSum:
    """Sequence a[1..n] answering the sum of XORs over every subarray of a range.

    The prefix XORs X[0..n] are kept in a tree that counts, per bit, how many of
    them have that bit set; assigning a[p] flips bits in X[p..n].
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = [_check_value(v) for v in values]
        self._values = [0, *items]
        self._n = len(items)
        prefix = list(accumulate(items, operator.xor, initial=0))
        cells = 4 * (self._n + 1)
        self._count = [[0] * BITS for _ in range(cells)]
        self._lazy = [0] * cells
        self._build(1, 0, self._n, prefix)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, lo: int, hi: int, prefix: list[int]) -> None:
        if lo == hi:
            self._count[node] = [(prefix[lo] >> k) & 1 for k in range(BITS)]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, prefix)
        self._build(2 * node + 1, mid + 1, hi, prefix)
        self._pull(node)

    def _pull(self, node: int) -> None:
        self._count[node] = [
            a + b for a, b in zip(self._count[2 * node], self._count[2 * node + 1])
        ]

    def _apply(self, node: int, length: int, mask: int) -> None:
        counts = self._count[node]
        for k in range(BITS):
            if (mask >> k) & 1:
                counts[k] = length - counts[k]
        self._lazy[node] ^= mask

    def _push(self, node: int, lo: int, hi: int) -> None:
        mask = self._lazy[node]
        if mask:
            mid = (lo + hi) // 2
            self._apply(2 * node, mid - lo + 1, mask)
            self._apply(2 * node + 1, hi - mid, mask)
            self._lazy[node] = 0

    def _update(self, node: int, lo: int, hi: int, left: int, right: int, mask: int) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._apply(node, hi - lo + 1, mask)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, mask)
        self._update(2 * node + 1, mid + 1, hi, left, right, mask)
        self._pull(node)

    def _covering(self, node: int, lo: int, hi: int, left: int, right: int) -> Iterator[list[int]]:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            yield self._count[node]
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        yield from self._covering(2 * node, lo, mid, left, right)
        yield from self._covering(2 * node + 1, mid + 1, hi, left, right)

    def _check_position(self, position: int) -> None:
        if not 1 <= position <= self._n:
            raise IndexError(f"position {position} outside 1..{self._n}")

    def assign(self, position: int, value: int) -> None:
        """Set a[position] = value (positions start at 1)."""
        self._check_position(position)
        _check_value(value)
        delta = self._values[position] ^ value
        self._values[position] = value
        if delta:
            self._update(1, 0, self._n, position, self._n, delta)

    def query(self, left: int, right: int) -> int:
        """Sum of XORs of all subarrays within a[left..right], modulo 4001."""
        self._check_position(left)
        self._check_position(right)
        if left > right:
            raise IndexError(f"empty range {left}..{right}")
        ones = [0] * BITS
        for counts in self._covering(1, 0, self._n, left - 1, right):
            ones = [a + b for a, b in zip(ones, counts)]
        size = right - left + 2
        return sum(pow(2, k, MOD) * c1 * (size - c1) for k, c1 in enumerate(ones)) % MOD