"""Monoid segment tree with range reset, and static range min/max."""

from __future__ import annotations

import math
from typing import Any, Callable, Sequence


class SegTree:
    """Segment tree over a monoid ``(op, identity)``.

    ``op`` need not be commutative. Besides point updates and range
    products it can reset a range to the identity lazily.
    """

    def __init__(
        self,
        n_or_values: int | Sequence[Any],
        identity: Any,
        op: Callable[[Any, Any], Any],
    ) -> None:
        if isinstance(n_or_values, int):
            n = n_or_values
            values = None
        else:
            values = list(n_or_values)
            n = len(values)
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._identity = identity
        self._op = op
        self._log = max(n - 1, 0).bit_length()
        self._size = 1 << self._log
        self._data = [identity] * (2 * self._size)
        self._reset = [False] * self._size
        if values is not None:
            self._data[self._size:self._size + n] = values
            for i in range(self._size - 1, 0, -1):
                self._update(i)

    def __len__(self) -> int:
        return self._n

    def _check(self, position: int) -> None:
        if not 0 <= position < self._n:
            raise IndexError(f"position {position} out of range")

    def _update(self, k: int) -> None:
        self._data[k] = self._op(self._data[2 * k], self._data[2 * k + 1])

    def _all_apply(self, k: int) -> None:
        self._data[k] = self._identity
        if k < self._size:
            self._reset[k] = True

    def _push(self, k: int) -> None:
        if self._reset[k]:
            self._all_apply(2 * k)
            self._all_apply(2 * k + 1)
            self._reset[k] = False

    def _push_path(self, leaf: int) -> None:
        for i in range(self._log, 0, -1):
            self._push(leaf >> i)

    def _push_bounds(self, l: int, r: int) -> None:
        for i in range(self._log, 0, -1):
            if (l >> i) << i != l:
                self._push(l >> i)
            if (r >> i) << i != r:
                self._push((r - 1) >> i)

    def get(self, position: int) -> Any:
        self._check(position)
        position += self._size
        self._push_path(position)
        return self._data[position]

    def set(self, position: int, value: Any) -> None:
        self._check(position)
        position += self._size
        self._push_path(position)
        self._data[position] = value
        for i in range(1, self._log + 1):
            self._update(position >> i)

    def product(self, l: int, r: int) -> Any:
        """Product of elements ``l..r`` inclusive; identity if ``l > r``."""
        if l > r:
            return self._identity
        if l < 0 or r >= self._n:
            raise IndexError(f"range [{l}, {r}] out of bounds")
        l += self._size
        r += self._size + 1
        self._push_bounds(l, r)
        left = right = self._identity
        op, data = self._op, self._data
        while l < r:
            if l & 1:
                left = op(left, data[l])
                l += 1
            if r & 1:
                r -= 1
                right = op(data[r], right)
            l >>= 1
            r >>= 1
        return op(left, right)

    def all_product(self) -> Any:
        return self._data[1]

    def reset(self, l: int, r: int) -> None:
        """Set elements ``l..r`` inclusive to the identity."""
        if l > r:
            return
        if l < 0 or r >= self._n:
            raise IndexError(f"range [{l}, {r}] out of bounds")
        l += self._size
        r += self._size + 1
        self._push_bounds(l, r)
        lo, hi = l, r
        while lo < hi:
            if lo & 1:
                self._all_apply(lo)
                lo += 1
            if hi & 1:
                hi -= 1
                self._all_apply(hi)
            lo >>= 1
            hi >>= 1
        for i in range(1, self._log + 1):
            if (l >> i) << i != l:
                self._update(l >> i)
            if (r >> i) << i != r:
                self._update((r - 1) >> i)


class StaticRangeMin:
    """Range minimum queries; an empty range yields ``math.inf``."""

    def __init__(self, array: Sequence[Any]) -> None:
        self._n = len(array)
        self._tree = SegTree(array, math.inf, min)

    def get(self, l: int, r: int) -> Any:
        if l > r:
            return math.inf
        if l < 0 or r >= self._n:
            raise IndexError(f"range [{l}, {r}] out of bounds")
        return self._tree.product(l, r)

    def all(self) -> Any:
        return self._tree.all_product()


class StaticRangeMax:
    """Range maximum queries; an empty range yields ``-math.inf``."""

    def __init__(self, array: Sequence[Any]) -> None:
        self._n = len(array)
        self._tree = SegTree(array, -math.inf, max)

    def get(self, l: int, r: int) -> Any:
        if l > r:
            return -math.inf
        if l < 0 or r >= self._n:
            raise IndexError(f"range [{l}, {r}] out of bounds")
        return self._tree.product(l, r)

    def all(self) -> Any:
        return self._tree.all_product()