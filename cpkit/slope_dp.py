"""Convex hull trick for 1D/1D minimisation DP."""

from __future__ import annotations

from typing import Any, Callable

from cpkit.rational import Rational


class SlopeDPMin:
    """Solves ``f(x) = min_{y < x} f(y) + cost(y, x)``.

    ``cost(y, x) = a(x) + b(y) - c(x) * d(y)`` with ``d`` strictly
    increasing, and states added in increasing order of ``d``.
    """

    def __init__(
        self,
        a: Callable[[Any], int],
        b: Callable[[Any], int],
        c: Callable[[Any], int],
        d: Callable[[Any], int],
    ) -> None:
        self._a, self._b, self._c, self._d = a, b, c, d
        self._q: list[tuple[int, int]] = []

    def _value(self, i: int, x: Any) -> int:
        y, k = self._q[i]
        return self._a(x) + y - k * self._c(x)

    @staticmethod
    def _slope(p1: tuple[int, int], p2: tuple[int, int]) -> Rational:
        return Rational(p2[0] - p1[0], p2[1] - p1[1])

    def init(self, x: Any, value: int) -> None:
        """Add a starting state ``f(x) = value``."""
        self._q.append((value + self._b(x), self._d(x)))

    def get(self, x: Any) -> int:
        """Compute ``f(x)`` and record it as a state for later queries."""
        q = self._q
        if not q:
            raise IndexError("no initial state")
        cx = self._c(x)
        lo, hi = 0, len(q) - 2
        while lo <= hi:
            mid = (lo + hi) // 2
            if self._slope(q[mid], q[mid + 1]) > cx:
                hi = mid - 1
            else:
                lo = mid + 1
        v = self._value(lo, x)
        cur = (v + self._b(x), self._d(x))
        while len(q) >= 2:
            p1, p2 = q[-1], q[-2]
            if self._slope(cur, p1) > self._slope(p1, p2):
                break
            q.pop()
        q.append(cur)
        return v