"""Longest greedy subsequence of every window of a sequence."""

from __future__ import annotations

from collections.abc import Sequence

from algokit.range_min import RangeAddMinTree


def longest_greedy_subsequences(values: Sequence[int], k: int) -> list[int]:
    """For every window of length k, the length of its longest greedy subsequence.

    A greedy subsequence starts anywhere and repeatedly jumps to the nearest
    later element that is strictly greater.
    """
    values = list(values)
    n = len(values)
    if not 1 <= k <= n:
        raise ValueError("window length must be between 1 and the sequence length")

    root = n
    parent = [root] * (n + 1)
    children: list[list[int]] = [[] for _ in range(n + 1)]
    stack = [root]
    for i in reversed(range(n)):
        while stack[-1] != root and values[stack[-1]] <= values[i]:
            stack.pop()
        parent[i] = stack[-1]
        children[stack[-1]].append(i)
        stack.append(i)

    order: list[int] = []
    pending = [root]
    while pending:
        node = pending.pop()
        order.append(node)
        pending.extend(reversed(children[node]))
    tin = [0] * (n + 1)
    for position, node in enumerate(order):
        tin[node] = position
    size = [1] * (n + 1)
    for node in reversed(order):
        if node != root:
            size[parent[node]] += size[node]

    # Depths are stored negated so that the minimum tree yields the maximum.
    tree = RangeAddMinTree(n + 1)

    def shift(i: int, delta: int) -> None:
        tree.add(tin[i], tin[i] + size[i], -delta)

    for i in range(k):
        shift(i, 1)
    result = [-tree.range_min(0, n + 1)]
    for i in range(k, n):
        shift(i - k, -1)
        shift(i, 1)
        result.append(-tree.range_min(0, n + 1))
    return result