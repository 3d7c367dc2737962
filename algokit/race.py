"""Choosing roads to repair so that the races they allow pay the most."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from algokit.range_min import RangeAddMinTree


def max_race_profit(costs: Sequence[int], races: Iterable[tuple[int, int, int]]) -> int:
    """Maximum profit from repairing roads and holding races.

    Roads are numbered from 1; each race (lb, ub, p) uses roads lb..ub and pays p
    when all of them are repaired. Repairing nothing gives a profit of zero.
    """
    costs = list(costs)
    n = len(costs)
    ending: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for lb, ub, p in races:
        if not 1 <= lb <= ub <= n:
            raise ValueError(f"race roads {lb}..{ub} outside 1..{n}")
        ending[ub - 1].append((lb, p))

    # Profits are stored negated so that the minimum tree yields the maximum.
    tree = RangeAddMinTree(n)
    best = 0
    for i, cost in enumerate(costs):
        tree.add(i, i + 1, -best)
        tree.add(0, i + 1, cost)
        for lb, p in ending[i]:
            tree.add(0, lb, -p)
        best = max(best, -tree.range_min(0, i + 1))
    return best