"""Offline 2D range sums over weighted points."""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate
from typing import Any


class Static2DRangeSum:
    """Add weighted points, ``build`` once, then query rectangle sums.

    Coordinates are integers; rectangles are inclusive on both axes.
    """

    def __init__(self) -> None:
        self._points: list[tuple[int, int, Any]] = []
        self._ready = False
        self._xs: list[int] = []
        self._buckets: list[tuple[list[int], list[Any]]] = []

    def add(self, x: int, y: int, value: Any) -> None:
        if self._ready:
            raise RuntimeError("cannot add points after build")
        self._points.append((x, y, value))

    def build(self) -> None:
        if self._ready:
            raise RuntimeError("already built")
        pts = sorted(self._points, key=lambda p: p[0])
        n = len(pts)
        self._xs = [p[0] for p in pts]
        raw: list[list[tuple[int, Any]]] = [[] for _ in range(n)]
        for i, (_, y, v) in enumerate(pts):
            j = i
            while j < n:
                raw[j].append((y, v))
                j |= j + 1
        self._buckets = []
        for entries in raw:
            entries.sort(key=lambda e: e[0])
            ys = [y for y, _ in entries]
            sums = list(accumulate(v for _, v in entries))
            self._buckets.append((ys, sums))
        self._ready = True

    def _require_ready(self) -> None:
        if not self._ready:
            raise RuntimeError("build must be called before querying")

    def prefix_sum(self, x: int, y: int) -> Any:
        """Sum of values of points with coordinates ``<= x`` and ``<= y``."""
        self._require_ready()
        i = bisect_right(self._xs, x) - 1
        res = 0
        while i >= 0:
            ys, sums = self._buckets[i]
            k = bisect_right(ys, y)
            if k:
                res += sums[k - 1]
            i = (i & (i + 1)) - 1
        return res

    def sum(self, x1: int, x2: int, y1: int, y2: int) -> Any:
        """Sum over points with ``x1 <= x <= x2`` and ``y1 <= y <= y2``."""
        self._require_ready()
        if x1 > x2 or y1 > y2:
            raise ValueError("empty rectangle bounds")
        return (
            self.prefix_sum(x2, y2)
            - self.prefix_sum(x2, y1 - 1)
            - self.prefix_sum(x1 - 1, y2)
            + self.prefix_sum(x1 - 1, y1 - 1)
        )