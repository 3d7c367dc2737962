"""Counting subsequences whose least common multiple equals a given number."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

MOD = 998244353


def prime_power_factors(n: int) -> list[int]:
    """The maximal prime powers dividing n, in increasing order of prime."""
    factors = []
    i = 2
    while i * i <= n:
        value = 1
        while n % i == 0:
            n //= i
            value *= i
        if value > 1:
            factors.append(value)
        i += 1
    if n > 1:
        factors.append(n)
    return factors


def count_subsequences_with_lcm(values: Iterable[int], m: int) -> int:
    """Number of non-empty subsequences whose LCM is m, modulo 998244353."""
    parts = prime_power_factors(m)
    groups: Counter[int] = Counter()
    for x in values:
        if m % x:
            continue
        groups[sum(1 << j for j, part in enumerate(parts) if x % part == 0)] += 1

    if m == 1:
        return (pow(2, groups[0], MOD) - 1) % MOD

    full = (1 << len(parts)) - 1
    ways = {0: 1}
    for mask, count in groups.items():
        choices = (pow(2, count, MOD) - 1) % MOD
        updated = dict(ways)
        for covered, w in ways.items():
            key = covered | mask
            updated[key] = (updated.get(key, 0) + w * choices) % MOD
        ways = updated
    return ways.get(full, 0)