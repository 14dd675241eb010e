"""Token-wise comparison of real numbers with a tolerance."""

from __future__ import annotations

import math
import re
from typing import Iterator

EPS = 1e-6

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _numbers(text: str) -> Iterator[float]:
    """Numbers read one after another until one cannot be read."""
    pos = 0
    while True:
        m = _NUMBER.match(text, pos)
        if m is None:
            return
        value = float(m.group(1))
        if math.isinf(value):
            return
        yield value
        pos = m.end()


def compare_floats(output: str, answer: str) -> bool:
    """True if every number of ``answer`` is matched by ``output``.

    Each pair must agree within an absolute or relative error of ``EPS``;
    extra numbers in ``output`` are ignored.
    """
    produced = _numbers(output)
    for x in _numbers(answer):
        y = next(produced, None)
        if y is None or math.isnan(y):
            return False
        diff = abs(x - y)
        if diff < EPS or diff < abs(x) * EPS:
            continue
        return False
    return True