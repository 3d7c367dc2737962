"""Smallest missing positive integer of a set under interval queries."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class Op(IntEnum):
    ADD = 1
    REMOVE = 2
    INVERT = 3


_AFTER_INVERT = {None: Op.INVERT, Op.ADD: Op.REMOVE, Op.REMOVE: Op.ADD, Op.INVERT: None}


class _IntervalSet:
    """Presence bits over compressed positions with assign, clear and flip."""

    def __init__(self, size: int) -> None:
        self._n = size
        self._count = [0] * (4 * size)
        self._lazy: list[Op | None] = [None] * (4 * size)

    def _apply(self, node: int, length: int, op: Op) -> None:
        if op is Op.ADD:
            self._count[node] = length
            self._lazy[node] = op
        elif op is Op.REMOVE:
            self._count[node] = 0
            self._lazy[node] = op
        else:
            self._count[node] = length - self._count[node]
            self._lazy[node] = _AFTER_INVERT[self._lazy[node]]

    def _push(self, node: int, lo: int, hi: int) -> None:
        op = self._lazy[node]
        if op is not None:
            mid = (lo + hi) // 2
            self._apply(2 * node, mid - lo + 1, op)
            self._apply(2 * node + 1, hi - mid, op)
            self._lazy[node] = None

    def update(self, left: int, right: int, op: Op) -> None:
        self._update(1, 0, self._n - 1, left, right, op)

    def _update(self, node: int, lo: int, hi: int, left: int, right: int, op: Op) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._apply(node, hi - lo + 1, op)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, op)
        self._update(2 * node + 1, mid + 1, hi, left, right, op)
        self._count[node] = self._count[2 * node] + self._count[2 * node + 1]

    def first_absent(self) -> int:
        node, lo, hi = 1, 0, self._n - 1
        while lo < hi:
            self._push(node, lo, hi)
            mid = (lo + hi) // 2
            if self._count[2 * node] < mid - lo + 1:
                node, hi = 2 * node, mid
            else:
                node, lo = 2 * node + 1, mid + 1
        return lo


def mex_after_queries(queries: Iterable[tuple[int, int, int]]) -> list[int]:
    """MEX (smallest positive missing integer) of the set after each query.

    Query (1, l, r) adds [l, r], (2, l, r) removes it and (3, l, r) inverts it.
    """
    parsed = []
    for kind, left, right in queries:
        if not 1 <= left <= right:
            raise ValueError(f"invalid interval [{left}, {right}]")
        parsed.append((Op(kind), left, right))
    if not parsed:
        return []

    keys = {1}
    for _, left, right in parsed:
        keys.update((left, right, right + 1))
        if left != 1:
            keys.add(left - 1)
    ordered = sorted(keys)
    position = {key: i for i, key in enumerate(ordered)}

    present = _IntervalSet(len(ordered))
    answers = []
    for op, left, right in parsed:
        present.update(position[left], position[right], op)
        answers.append(ordered[present.first_absent()])
    return answers