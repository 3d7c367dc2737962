"""Range multiplication with Euler's totient of range products, modulo 1e9+7."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007
LIMIT = 300


def _primes(limit: int) -> list[int]:
    sieve = [True] * (limit + 1)
    found = []
    for i in range(2, limit + 1):
        if sieve[i]:
            found.append(i)
            for j in range(i * i, limit + 1, i):
                sieve[j] = False
    return found


PRIMES = _primes(LIMIT)
_MASKS = [0] + [
    sum(1 << i for i, p in enumerate(PRIMES) if x % p == 0) for x in range(1, LIMIT + 1)
]
_FACTORS = [(p - 1) * pow(p, MOD - 2, MOD) % MOD for p in PRIMES]


def _check_value(x: int) -> int:
    if not 1 <= x <= LIMIT:
        raise ValueError(f"value {x} outside 1..{LIMIT}")
    return x


class TotientRangeProduct:
    """Sequence a[1..n] of values in 1..300 with range multiplication and
    the totient of a range product.

    Ranges are inclusive and positions start at 1.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = [_check_value(v) for v in values]
        self._n = len(items)
        cells = 4 * max(self._n, 1)
        self._prod = [1] * cells
        self._mask = [0] * cells
        self._lazy_mul = [1] * cells
        self._lazy_mask = [0] * cells
        if self._n:
            self._build(1, 0, self._n - 1, items)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._prod[node] = items[lo]
            self._mask[node] = _MASKS[items[lo]]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, items)
        self._build(2 * node + 1, mid + 1, hi, items)
        self._pull(node)

    def _pull(self, node: int) -> None:
        self._prod[node] = self._prod[2 * node] * self._prod[2 * node + 1] % MOD
        self._mask[node] = self._mask[2 * node] | self._mask[2 * node + 1]

    def _apply(self, node: int, length: int, x: int, mask: int) -> None:
        self._prod[node] = self._prod[node] * pow(x, length, MOD) % MOD
        self._mask[node] |= mask
        self._lazy_mul[node] = self._lazy_mul[node] * x % MOD
        self._lazy_mask[node] |= mask

    def _push(self, node: int, lo: int, hi: int) -> None:
        x, mask = self._lazy_mul[node], self._lazy_mask[node]
        if x != 1 or mask:
            mid = (lo + hi) // 2
            self._apply(2 * node, mid - lo + 1, x, mask)
            self._apply(2 * node + 1, hi - mid, x, mask)
            self._lazy_mul[node], self._lazy_mask[node] = 1, 0

    def _update(self, node: int, lo: int, hi: int, left: int, right: int, x: int, mask: int) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._apply(node, hi - lo + 1, x, mask)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, x, mask)
        self._update(2 * node + 1, mid + 1, hi, left, right, x, mask)
        self._pull(node)

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> tuple[int, int]:
        if right < lo or hi < left:
            return 1, 0
        if left <= lo and hi <= right:
            return self._prod[node], self._mask[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        p1, m1 = self._query(2 * node, lo, mid, left, right)
        p2, m2 = self._query(2 * node + 1, mid + 1, hi, left, right)
        return p1 * p2 % MOD, m1 | m2

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self._n:
            raise IndexError(f"range {left}..{right} outside 1..{self._n}")

    def multiply(self, left: int, right: int, x: int) -> None:
        """Multiply every a[i] in [left, right] by x (1..300)."""
        self._check(left, right)
        _check_value(x)
        self._update(1, 0, self._n - 1, left - 1, right - 1, x, _MASKS[x])

    def totient(self, left: int, right: int) -> int:
        """Euler's totient of a[left] * ... * a[right], modulo MOD."""
        self._check(left, right)
        product, mask = self._query(1, 0, self._n - 1, left - 1, right - 1)
        for i, factor in enumerate(_FACTORS):
            if (mask >> i) & 1:
                product = product * factor % MOD
        return product