"""Length of the longest common subsequence via next-occurrence jumps."""

from __future__ import annotations


def longest_common_subsequence(s: str, t: str) -> int:
    """Length of the longest common subsequence of s and t."""
    n = len(s)
    following: dict[str, int] = {}
    rows = [following]
    for ch in reversed(s):
        following = {**following, ch: n - len(rows)}
        rows.append(following)
    rows.reverse()

    # ends[size]: smallest index in s ending a common subsequence of that size,
    # n when none exists; size 0 ends before s starts.
    ends = [-1] + [n] * len(t)
    for ch in t:
        row = list(ends)
        for size in range(1, len(ends)):
            prev = ends[size - 1]
            if prev < n:
                row[size] = min(row[size], rows[prev + 1].get(ch, n))
        ends = row
    return max(size for size, end in enumerate(ends) if end < n)