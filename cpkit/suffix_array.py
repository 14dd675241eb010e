"""Suffix array by prefix doubling."""

from __future__ import annotations

from itertools import pairwise
from typing import Any, Sequence


def suffix_array(s: Sequence[Any], n: int | None = None) -> list[int]:
    """Start positions of the suffixes of ``s[:n]`` in increasing order."""
    if n is None:
        n = len(s)
    if n <= 0:
        raise ValueError("length must be positive")
    order = sorted(range(n), key=lambda i: s[i])
    rank = [0] * n
    for prev, cur in pairwise(order):
        rank[cur] = rank[prev] + (s[prev] != s[cur])
    length = 1
    while rank[order[-1]] + 1 < n:
        keys = [(rank[i], rank[i + length] if i + length < n else -1) for i in range(n)]
        order.sort(key=keys.__getitem__)
        new_rank = [0] * n
        for prev, cur in pairwise(order):
            new_rank[cur] = new_rank[prev] + (keys[prev] != keys[cur])
        rank = new_rank
        length *= 2
    return order