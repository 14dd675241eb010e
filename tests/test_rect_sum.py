import random

import pytest

from cpkit.rect_sum import RectSum


def _build(h, w, seed):
    rng = random.Random(seed)
    grid = [[rng.randint(-9, 9) for _ in range(w)] for _ in range(h)]
    rs = RectSum(h, w)
    for x in range(1, h + 1):
        for y in range(1, w + 1):
            rs.set(x, y, grid[x - 1][y - 1])
    return grid, rs


def test_rectangle_sums_match_grid():
    h, w = 5, 4
    grid, rs = _build(h, w, 13)
    for x1 in range(1, h + 1):
        for x2 in range(x1, h + 1):
            for y1 in range(1, w + 1):
                for y2 in range(y1, w + 1):
                    expected = sum(sum(row[y1 - 1:y2]) for row in grid[x1 - 1:x2])
                    assert rs.sum(x1, x2, y1, y2) == expected


def test_prefix_matches_sum_from_origin():
    h, w = 4, 4
    _, rs = _build(h, w, 14)
    for x in range(0, h + 1):
        for y in range(0, w + 1):
            assert rs.prefix(x, y) == rs.sum(1, x, 1, y)


def test_empty_and_clamped_ranges():
    grid, rs = _build(3, 3, 15)
    assert rs.sum(2, 1, 1, 3) == 0
    assert rs.sum(-5, 3, 0, 3) == rs.prefix(3, 3)


def test_out_of_range_raises_and_set_ignored():
    _, rs = _build(2, 2, 16)
    total = rs.prefix(2, 2)
    rs.set(3, 1, 100)
    assert rs.prefix(2, 2) == total
    with pytest.raises(IndexError):
        rs.prefix(3, 1)
    with pytest.raises(ValueError):
        RectSum(-1, 2)