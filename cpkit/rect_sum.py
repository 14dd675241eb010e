"""Incrementally built 2D prefix sums (1-indexed)."""

from __future__ import annotations

from typing import Any


class RectSum:
    """2D prefix sums; cells must be ``set`` in row-major order."""

    def __init__(self, h: int, w: int) -> None:
        if h < 0 or w < 0:
            raise ValueError("dimensions must be non-negative")
        self._h = h
        self._w = w
        self._s: list[list[Any]] = [[0] * (w + 1) for _ in range(h + 1)]

    def prefix(self, x: int, y: int) -> Any:
        """Sum of cells ``[1..x] x [1..y]``."""
        if x > self._h or y > self._w:
            raise IndexError(f"({x}, {y}) outside {self._h}x{self._w}")
        if x <= 0 or y <= 0:
            return 0
        return self._s[x][y]

    def sum(self, x1: int, x2: int, y1: int, y2: int) -> Any:
        """Sum of cells ``[x1..x2] x [y1..y2]``."""
        x1 = max(x1, 1)
        y1 = max(y1, 1)
        if x1 > x2 or y1 > y2:
            return 0
        if x2 > self._h or y2 > self._w:
            raise IndexError(f"({x2}, {y2}) outside {self._h}x{self._w}")
        s = self._s
        return s[x2][y2] - s[x1 - 1][y2] - s[x2][y1 - 1] + s[x1 - 1][y1 - 1]

    def set(self, x: int, y: int, val: Any) -> None:
        """Set cell ``(x, y)``; cells outside the grid are ignored."""
        if not (1 <= x <= self._h and 1 <= y <= self._w):
            return
        s = self._s
        s[x][y] = s[x - 1][y] + s[x][y - 1] - s[x - 1][y - 1] + val