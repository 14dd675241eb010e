"""Segment tree with range application and point queries."""

from __future__ import annotations

from typing import Any, Callable, Sequence


class PointSegTree:
    """Supports point get/set and applying ``s`` to points or ranges.

    Applying ``s`` to an element ``d`` replaces it with ``op(s, d)``;
    ``op`` must be associative. No identity element is needed.
    """

    def __init__(self, values: Sequence[Any], op: Callable[[Any, Any], Any]) -> None:
        self._d = list(values)
        n = len(self._d)
        if n == 0:
            raise ValueError("at least one value is required")
        self._n = n
        self._op = op
        self._log = (n - 1).bit_length()
        self._size = 1 << self._log
        self._lazy: list[Any] = [None] * self._size
        self._pending = [False] * self._size

    def __len__(self) -> int:
        return self._n

    def _check(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")

    def _all_apply(self, k: int, s: Any) -> None:
        if k < self._size:
            if self._pending[k]:
                self._lazy[k] = self._op(s, self._lazy[k])
            else:
                self._lazy[k] = s
                self._pending[k] = True
        elif k - self._size < self._n:
            self._d[k - self._size] = self._op(s, self._d[k - self._size])

    def _push(self, k: int) -> None:
        if self._pending[k]:
            self._all_apply(2 * k, self._lazy[k])
            self._all_apply(2 * k + 1, self._lazy[k])
            self._pending[k] = False
            self._lazy[k] = None

    def _settle(self, p: int) -> None:
        leaf = p + self._size
        for i in range(self._log, 0, -1):
            self._push(leaf >> i)

    def set(self, p: int, x: Any) -> None:
        self._check(p)
        self._settle(p)
        self._d[p] = x

    def get(self, p: int) -> Any:
        self._check(p)
        self._settle(p)
        return self._d[p]

    def apply(self, p: int, s: Any) -> None:
        """Apply ``s`` to element ``p``."""
        self._check(p)
        self._settle(p)
        self._d[p] = self._op(s, self._d[p])

    def apply_range(self, l: int, r: int, s: Any) -> None:
        """Apply ``s`` to every element in the half-open range ``[l, r)``."""
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds")
        if l == r:
            return
        l += self._size
        r += self._size
        for i in range(self._log, 0, -1):
            if (l >> i) << i != l:
                self._push(l >> i)
            if (r >> i) << i != r:
                self._push((r - 1) >> i)
        while l < r:
            if l & 1:
                self._all_apply(l, s)
                l += 1
            if r & 1:
                r -= 1
                self._all_apply(r, s)
            l >>= 1
            r >>= 1