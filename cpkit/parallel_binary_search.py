"""Parallel (whole) binary search for offline queries without updates."""

from __future__ import annotations

from typing import Callable


def parallel_binary_search(
    q: int,
    ok: int,
    ng: int,
    init: Callable[[], None],
    update: Callable[[int], None],
    check: Callable[[int], bool],
) -> list[int]:
    """Binary-search every query at once over a time line of updates.

    Each round calls ``init()``, then applies ``update(0), update(1), ...``
    in order and calls ``check(i)`` for query ``i`` once exactly ``t``
    updates have been applied, ``t`` being the midpoint of its current
    range. A query whose check holds moves its ``ok`` bound to ``t``,
    otherwise its ``ng`` bound. The result holds the final ``ok`` bounds.
    ``ok`` and ``ng`` must not be below -1.
    """
    good = [ok] * q
    bad = [ng] * q
    while True:
        pending = sorted(
            ((good[i] + bad[i]) // 2, i) for i in range(q) if abs(good[i] - bad[i]) > 1
        )
        if not pending:
            break
        init()
        t = 0
        for mid, i in pending:
            while t < mid:
                update(t)
                t += 1
            if check(i):
                good[i] = t
            else:
                bad[i] = t
    return good