"""Dense polynomial multiplication and Lagrange interpolation."""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Callable, MutableSequence, Sequence


def poly_mul(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Product of two coefficient lists (lowest degree first)."""
    if not a or not b:
        raise ValueError("polynomials must be non-empty")
    c: list[Any] = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            c[i + j] += x * y
    return c


def poly_imul(a: MutableSequence[Any], b: Sequence[Any]) -> MutableSequence[Any]:
    """Multiply ``a`` by ``b`` in place and return ``a``."""
    if not a or not b:
        raise ValueError("polynomials must be non-empty")
    n, m = len(a), len(b)
    a.extend([0] * (m - 1))
    for i in range(n - 1, -1, -1):
        for j in range(1, m):
            a[i + j] += a[i] * b[j]
        a[i] *= b[0]
    return a


def lagrange_interpolation(
    values: Sequence[Any], x: int, field: Callable[[Any], Any] = Fraction
) -> Any:
    """Evaluate at ``x`` the polynomial of degree ``len(values) - 1`` with
    ``f(i) == values[i]`` for ``i = 0..d``, in O(d) field operations."""
    n = len(values)
    if n == 0:
        raise ValueError("at least one value is required")
    factorial = field(1)
    for i in range(2, n):
        factorial *= i
    inv_factorial = [field(0)] * n
    inv_factorial[n - 1] = field(1) / factorial
    for i in range(n - 2, -1, -1):
        inv_factorial[i] = inv_factorial[i + 1] * (i + 1)

    r_prod = [field(0)] * n
    t = field(1)
    for i in range(n - 1, -1, -1):
        r_prod[i] = t
        t *= field(x - i)

    l_prod = field(1)
    ans = field(0)
    for i, v in enumerate(values):
        term = v * l_prod * r_prod[i] * inv_factorial[i] * inv_factorial[n - 1 - i]
        if (n - 1 - i) & 1:
            ans -= term
        else:
            ans += term
        l_prod *= field(x - i)
    return ans