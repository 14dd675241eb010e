import pytest

from cpkit.search import bin_search, find_first, find_last, ternary_search


def _window_check(low, high):
    def check(m):
        if m < low:
            return -1
        if m > high:
            return 1
        return 0

    return check


@pytest.mark.parametrize("peak", [0, 1, 7, 19, 20])
def test_ternary_search_finds_peak(peak):
    def f(x):
        return -(x - peak) ** 2

    assert ternary_search(0, 20, lambda a, b: f(a) >= f(b)) == peak


def test_ternary_search_empty_range():
    with pytest.raises(ValueError):
        ternary_search(3, 2, lambda a, b: True)


@pytest.mark.parametrize("low,high", [(30, 40), (0, 0), (100, 100), (55, 55)])
def test_bin_search_kinds(low, high):
    check = _window_check(low, high)
    assert bin_search(0, 100, check, -1) == low
    assert bin_search(0, 100, check, 1) == high
    found = bin_search(0, 100, check)
    assert low <= found <= high


def test_bin_search_not_found():
    assert bin_search(0, 100, lambda m: -1) is None
    assert bin_search(0, 100, lambda m: 1) is None
    assert bin_search(10, 20, _window_check(50, 60), -1) is None


def test_bin_search_knowingly_skips_check():
    calls = []

    def check(m):
        calls.append(m)
        return 0

    assert bin_search(5, 5, check, knowingly=True) == 5
    assert calls == []


@pytest.mark.parametrize("target", [0, 1, 37, 50, 2500])
def test_find_first_square(target):
    x = find_first(0, 100, lambda m: m * m >= target)
    assert x * x >= target
    assert x == 0 or (x - 1) ** 2 < target


@pytest.mark.parametrize("target", [0, 1, 37, 50, 2500])
def test_find_last_square(target):
    x = find_last(0, 100, lambda m: m * m <= target)
    assert x * x <= target
    assert x == 100 or (x + 1) ** 2 > target


def test_find_first_and_last_none():
    assert find_first(0, 10, lambda m: False) is None
    assert find_last(0, 10, lambda m: False) is None
    assert find_first(-5, -10, lambda m: True) is None