"""Binary-lifting ancestor table for a rooted forest."""

from __future__ import annotations

from typing import Callable, Sequence


class RootedForest:
    """Answers k-th ancestor and highest-ancestor-with-property queries.

    ``parent[v]`` is the parent of ``v``, or -1 for a root.
    """

    def __init__(self, parent: Sequence[int]) -> None:
        n = len(parent)
        self._n = n
        log = 0
        t = 1
        while t * 2 < n:
            t *= 2
            log += 1
        self._log = log
        anc = [list(parent)]
        for _ in range(log):
            prev = anc[-1]
            anc.append([-1 if p == -1 else prev[p] for p in prev])
        self._anc = anc

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def top_ancestor(self, v: int, predicate: Callable[[int], bool]) -> int:
        """Highest ancestor of ``v`` such that ``predicate`` holds on the path."""
        self._check(v)
        if not predicate(v):
            raise ValueError("predicate must hold at the starting vertex")
        for level in reversed(self._anc):
            a = level[v]
            if a != -1 and predicate(a):
                v = a
        return v

    def ancestor(self, u: int, d: int) -> int:
        """The ``d``-th ancestor of ``u``, or -1 if there is none."""
        self._check(u)
        if d < 0:
            raise ValueError("depth must be non-negative")
        if d >= self._n:
            return -1
        for i, level in enumerate(self._anc):
            if (d >> i) & 1:
                u = level[u]
                if u == -1:
                    break
        return u