"""Range affine update and range sum queries modulo 998244353."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 998244353


class AffineSumTree:
    """Sequence supporting a[i] = b*a[i] + c on a range and range sums, modulo MOD.

    Ranges are half-open: [left, right).
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = [v % MOD for v in values]
        self._n = len(items)
        size = 4 * max(self._n, 1)
        self._sum = [0] * size
        self._mul = [1] * size
        self._add = [0] * size
        if self._n:
            self._build(1, 0, self._n, items)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, lo: int, hi: int, items: list[int]) -> None:
        if hi - lo == 1:
            self._sum[node] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, items)
        self._build(2 * node + 1, mid, hi, items)
        self._pull(node)

    def _pull(self, node: int) -> None:
        self._sum[node] = (self._sum[2 * node] + self._sum[2 * node + 1]) % MOD

    def _apply_node(self, node: int, length: int, b: int, c: int) -> None:
        self._sum[node] = (self._sum[node] * b + c * length) % MOD
        self._mul[node] = self._mul[node] * b % MOD
        self._add[node] = (self._add[node] * b + c) % MOD

    def _push(self, node: int, lo: int, hi: int) -> None:
        b, c = self._mul[node], self._add[node]
        if b != 1 or c != 0:
            mid = (lo + hi) // 2
            self._apply_node(2 * node, mid - lo, b, c)
            self._apply_node(2 * node + 1, hi - mid, b, c)
            self._mul[node], self._add[node] = 1, 0

    def _update(self, node: int, lo: int, hi: int, left: int, right: int, b: int, c: int) -> None:
        if right <= lo or hi <= left:
            return
        if left <= lo and hi <= right:
            self._apply_node(node, hi - lo, b, c)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, b, c)
        self._update(2 * node + 1, mid, hi, left, right, b, c)
        self._pull(node)

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if right <= lo or hi <= left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return (
            self._query(2 * node, lo, mid, left, right)
            + self._query(2 * node + 1, mid, hi, left, right)
        ) % MOD

    def apply(self, left: int, right: int, b: int, c: int) -> None:
        """Set a[i] = b*a[i] + c for every i in [left, right)."""
        if self._n:
            self._update(1, 0, self._n, left, right, b % MOD, c % MOD)

    def sum(self, left: int, right: int) -> int:
        """Sum of a[i] for i in [left, right), modulo MOD."""
        if not self._n:
            return 0
        return self._query(1, 0, self._n, left, right)