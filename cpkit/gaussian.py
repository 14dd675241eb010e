"""Gaussian elimination to a row form with one pivot per row."""

from __future__ import annotations

import enum
from typing import Any, Sequence

EPS = 1e-9


class GaussMode(enum.Enum):
    """How the pivot row is chosen."""

    DEGREE = "degree"  # fewest non-zero entries, for exact fields
    ABS = "abs"  # largest absolute value, for real numbers


def is_zero(v: Any) -> bool:
    return abs(v) < EPS


def gaussian_elimination(
    a: list[list[Any]], limit: int, mode: GaussMode = GaussMode.DEGREE
) -> None:
    """Reduce the augmented matrix ``a`` in place.

    Afterwards each row has at most one non-zero entry among its first
    ``limit`` columns. For a square coefficient matrix the determinant is
    preserved.
    """
    if not a or not a[0]:
        return
    h, w = len(a), len(a[0])
    if any(len(row) != w for row in a):
        raise ValueError("rows must all have the same length")
    if limit > w:
        raise ValueError("limit exceeds the number of columns")
    deg = [sum(not is_zero(v) for v in row) for row in a]
    r = 0
    for c in range(limit):
        pivot = None
        for i in range(r, h):
            if is_zero(a[i][c]):
                continue
            if (
                pivot is None
                or (mode is GaussMode.DEGREE and deg[i] < deg[pivot])
                or (mode is GaussMode.ABS and abs(a[pivot][c]) < abs(a[i][c]))
            ):
                pivot = i
        if pivot is None:
            continue
        if pivot > r:
            a[r], a[pivot] = a[pivot], a[r]
            deg[r], deg[pivot] = deg[pivot], deg[r]
            row = a[pivot]
            row[c:] = [-v for v in row[c:]]
        nonzero = [j for j in range(c, w) if not is_zero(a[r][j])]
        inv = 1 / a[r][c]
        for i in range(r + 1, h):
            if is_zero(a[i][c]):
                continue
            coeff = -a[i][c] * inv
            for j in nonzero:
                if not is_zero(a[i][j]):
                    deg[i] -= 1
                a[i][j] += coeff * a[r][j]
                if not is_zero(a[i][j]):
                    deg[i] += 1
        r += 1
    for r in range(h - 1, -1, -1):
        c = next((c for c in range(limit) if not is_zero(a[r][c])), None)
        if c is None:
            continue
        inv = 1 / a[r][c]
        for i in range(r - 1, -1, -1):
            if is_zero(a[i][c]):
                continue
            coeff = -a[i][c] * inv
            for j in range(c, w):
                a[i][j] += coeff * a[r][j]


def solve_linear_system(
    a: Sequence[Sequence[Any]], b: Sequence[Any], w: int
) -> list[Any]:
    """Return one solution ``x`` of ``a @ x == b`` with ``w`` unknowns.

    Free unknowns are set to 0; inconsistency is not detected.
    """
    h = len(a)
    if len(b) != h:
        raise ValueError("right-hand side length differs from row count")
    if h > 0 and len(a[0]) != w:
        raise ValueError("row length differs from the number of unknowns")
    rows = [list(row) + [bi] for row, bi in zip(a, b)]
    gaussian_elimination(rows, w)
    x: list[Any] = [0] * w
    for row in rows:
        for j in range(w):
            if not is_zero(row[j]):
                x[j] = row[w] / row[j]
                break
    return x