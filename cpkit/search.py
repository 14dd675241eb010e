"""Integer ternary and binary searches."""

from __future__ import annotations

from typing import Callable


def _midpoint(lo: int, hi: int) -> int:
    return lo + (hi - lo) // 2


def ternary_search(lo: int, hi: int, compare: Callable[[int, int], bool]) -> int:
    """Search ``[lo, hi]``; ``compare(m1, m2)`` true means the answer is below ``m2``."""
    if lo > hi:
        raise ValueError("empty search range")
    while lo < hi:
        mid = lo + (hi - lo) // 2
        mm = mid + 1 + (hi - mid - 1) // 2
        if compare(mid, mm):
            hi = mm - 1
        else:
            lo = mid + 1
    return lo


def bin_search(
    lo: int,
    hi: int,
    check: Callable[[int], int],
    kind: int = 0,
    knowingly: bool = False,
) -> int | None:
    """Search ``[lo, hi]`` with ``check`` returning -1 (too small),
    1 (too large) or 0 (acceptable).

    ``kind`` is -1 for the first acceptable value, 1 for the last, 0 for any.
    With ``knowingly`` the range is known to hold an acceptable value.
    """
    l, r = lo, hi
    ans = None
    while l <= r:
        if l == r and knowingly:
            ans = l
            break
        m = _midpoint(l, r)
        res = check(m)
        if res == -1:
            if m == hi:
                break
            l = m + 1
        elif res == 1:
            if m == lo:
                break
            r = m - 1
        else:
            ans = m
            if kind == 0:
                break
            knowingly = False
            if kind == -1:
                if m == lo:
                    break
                r = m - 1
            else:
                if m == hi:
                    break
                l = m + 1
    return ans


def find_first(lo: int, hi: int, check: Callable[[int], bool]) -> int | None:
    """Smallest ``x`` in ``[lo, hi]`` with ``check(x)``, for monotone ``check``."""
    ans = None
    l, r = lo, hi
    while l <= r:
        m = _midpoint(l, r)
        if check(m):
            ans = m
            if m == lo:
                break
            r = m - 1
        else:
            if m == hi:
                break
            l = m + 1
    return ans


def find_last(lo: int, hi: int, check: Callable[[int], bool]) -> int | None:
    """Largest ``x`` in ``[lo, hi]`` with ``check(x)``, for monotone ``check``."""
    ans = None
    l, r = lo, hi
    while l <= r:
        m = _midpoint(l, r)
        if check(m):
            ans = m
            if m == hi:
                break
            l = m + 1
        else:
            if m == lo:
                break
            r = m - 1
    return ans