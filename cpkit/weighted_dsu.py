"""Union by size without path compression, with weighted tree edges."""

from __future__ import annotations

from typing import Any


class WeightedDSU:
    """Each merge links two roots with an edge of the given weight."""

    def __init__(self, n: int) -> None:
        self._ps = [-1] * n  # parent, or -(size) at a root
        self._weight: list[Any] = [0] * n

    def weight(self, u: int) -> Any:
        """Weight of the edge from ``u`` to its parent."""
        return self._weight[u]

    def root(self, u: int) -> int:
        while self._ps[u] >= 0:
            u = self._ps[u]
        return u

    def same(self, u: int, v: int) -> bool:
        return self.root(u) == self.root(v)

    def merge(self, u: int, v: int, w: Any) -> bool:
        u, v = self.root(u), self.root(v)
        if u == v:
            return False
        if self._ps[u] > self._ps[v]:
            u, v = v, u
        self._ps[u] += self._ps[v]
        self._ps[v] = u
        self._weight[v] = w
        return True

    def _path(self, u: int) -> list[int]:
        path = []
        while u >= 0:
            path.append(u)
            u = self._ps[u]
        return path

    def _split(self, u: int, v: int) -> tuple[list[int], list[int]] | None:
        pu, pv = self._path(u), self._path(v)
        if pu[-1] != pv[-1]:
            return None
        common = 0
        while common < min(len(pu), len(pv)) and pu[-1 - common] == pv[-1 - common]:
            common += 1
        return pu, pv, common

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``, or -1 if unconnected."""
        if u == v:
            return u
        split = self._split(u, v)
        if split is None:
            return -1
        pu, _, common = split
        return pu[len(pu) - common]

    def path_to_lca(self, u: int, v: int) -> tuple[list[int], list[int]]:
        """Vertices from ``u`` and from ``v`` up to, not including, the LCA."""
        split = self._split(u, v)
        if split is None:
            return [], []
        pu, pv, common = split
        return pu[:len(pu) - common], pv[:len(pv) - common]