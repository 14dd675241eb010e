"""XOR convolution via the Walsh-Hadamard transform."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence


def _check_power_of_two(n: int) -> None:
    if n <= 0 or n & (n - 1):
        raise ValueError("length must be a power of 2")


def _half(v: Any) -> Any:
    return v // 2 if isinstance(v, int) else v / 2


def transform(a: MutableSequence[Any]) -> None:
    """Walsh-Hadamard transform of ``a`` in place."""
    n = len(a)
    _check_power_of_two(n)
    length = 1
    while length < n:
        for i in range(0, n, 2 * length):
            for j in range(i, i + length):
                x, y = a[j], a[j + length]
                a[j] = x + y
                a[j + length] = x - y
        length *= 2


def inv_transform(a: MutableSequence[Any]) -> None:
    """Inverse Walsh-Hadamard transform of ``a`` in place."""
    n = len(a)
    _check_power_of_two(n)
    length = 1
    while length < n:
        for i in range(0, n, 2 * length):
            for j in range(i, i + length):
                x, y = a[j], a[j + length]
                a[j] = _half(x + y)
                a[j + length] = _half(x - y)
        length *= 2


def xor_convolution(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """``c[k] = sum(a[i] * b[j] for i ^ j == k)``, padded to a power of 2."""
    if not a or not b:
        raise ValueError("sequences must be non-empty")
    z = 1
    while z < max(len(a), len(b)):
        z *= 2
    fa = list(a) + [0] * (z - len(a))
    fb = list(b) + [0] * (z - len(b))
    transform(fa)
    transform(fb)
    prod = [x * y for x, y in zip(fa, fb)]
    inv_transform(prod)
    return prod