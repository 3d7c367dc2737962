"""Adding Fibonacci numbers to ranges with range sums, modulo 1e9+9."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate

MOD = 1_000_000_009


class FibonacciRangeAdder:
    """Sequence a[1..n] supporting a[i] += F(i - l + 1) on [l, r] and range sums.

    F(1) = F(2) = 1. Ranges are inclusive and positions start at 1.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = [v % MOD for v in values]
        self._n = len(items)
        self._prefix = list(accumulate(items, lambda a, b: (a + b) % MOD, initial=0))
        fib = [0, 1]
        while len(fib) < self._n + 4:
            fib.append((fib[-1] + fib[-2]) % MOD)
        self._fib = fib
        self._tree = [[0, 0, 0] for _ in range(self._n + 1)]

    def __len__(self) -> int:
        return self._n

    def _f(self, k: int) -> int:
        """Fibonacci number of any integer index, negative ones included."""
        if k >= 0:
            return self._fib[k]
        return self._fib[-k] if k & 1 else (MOD - self._fib[-k]) % MOD

    def _add(self, p: int, deltas: tuple[int, int, int]) -> None:
        while p <= self._n:
            cell = self._tree[p]
            for i, d in enumerate(deltas):
                cell[i] = (cell[i] + d) % MOD
            p += p & -p

    def _fib_prefix(self, p: int) -> int:
        sums = [0, 0, 0]
        k = p
        while p > 0:
            sums = [(s + c) % MOD for s, c in zip(sums, self._tree[p])]
            p -= p & -p
        return (sums[0] * self._f(k) + sums[1] * self._f(k + 1) + sums[2]) % MOD

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self._n:
            raise IndexError(f"range {left}..{right} outside 1..{self._n}")

    def add_fibonacci(self, left: int, right: int) -> None:
        """Add F(1), F(2), ... to a[left], a[left + 1], ..., a[right]."""
        self._check(left, right)
        a, b = self._f(2 - left), self._f(3 - left)
        self._add(left, (a, b, MOD - 1))
        self._add(right + 1, ((MOD - a) % MOD, (MOD - b) % MOD, self._f(right - left + 3)))

    def sum(self, left: int, right: int) -> int:
        """Sum of a[left..right], modulo MOD."""
        self._check(left, right)
        base = self._prefix[right] - self._prefix[left - 1]
        added = self._fib_prefix(right) - self._fib_prefix(left - 1)
        return (base + added) % MOD