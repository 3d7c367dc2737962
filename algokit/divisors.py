"""Divisor enumeration with a smallest-prime-factor sieve."""

from __future__ import annotations


def build_spf(max_n: int) -> list[int]:
    """Smallest prime factor of every integer in 0..max_n (0 and 1 map to themselves)."""
    spf = list(range(max_n + 1))
    i = 2
    while i * i <= max_n:
        if spf[i] == i:
            for j in range(i * i, max_n + 1, i):
                if spf[j] == j:
                    spf[j] = i
        i += 1
    return spf


def divisors(x: int, spf: list[int]) -> list[int]:
    """All divisors of x other than 1, using a sieve that covers x."""
    factors: list[tuple[int, int]] = []
    while x > 1:
        p = spf[x]
        count = 0
        while x % p == 0:
            x //= p
            count += 1
        factors.append((p, count))

    result = [1]
    for p, count in factors:
        base = list(result)
        power = 1
        for _ in range(count):
            power *= p
            result.extend(d * power for d in base)
    return [d for d in result if d != 1]