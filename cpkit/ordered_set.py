"""Order-statistics multiset."""

from __future__ import annotations

from typing import Any

from sortedcontainers import SortedList


class OrderedMultiset:
    """Multiset supporting k-th element and rank queries in log time."""

    def __init__(self) -> None:
        self._data = SortedList()

    def insert(self, x: Any) -> None:
        self._data.add(x)

    def erase(self, x: Any) -> None:
        """Erase one occurrence of ``x`` if there is any."""
        self._data.discard(x)

    def find_by_order(self, order: int) -> Any:
        """Return the element with ``order`` smaller elements before it."""
        if not 0 <= order < len(self._data):
            raise IndexError(f"order {order} out of range")
        return self._data[order]

    def order_of_key(self, key: Any) -> int:
        """Return the number of elements strictly less than ``key``."""
        return self._data.bisect_left(key)

    def __len__(self) -> int:
        return len(self._data)