from fractions import Fraction

import pytest

from cpkit.poly import lagrange_interpolation, poly_imul, poly_mul


def _evaluate(coeffs, x):
    acc = 0
    for c in reversed(coeffs):
        acc = acc * x + c
    return acc


def test_poly_mul_evaluates_as_product():
    a, b = [1, 2, 3], [4, -1]
    c = poly_mul(a, b)
    assert len(c) == 4
    for x in range(-3, 4):
        assert _evaluate(c, x) == _evaluate(a, x) * _evaluate(b, x)


def test_poly_imul_matches_poly_mul():
    a, b = [5, 0, -2, 7], [3, 1, 1]
    expected = poly_mul(a, b)
    target = list(a)
    result = poly_imul(target, b)
    assert result is target
    assert target == expected


def test_empty_polynomials_rejected():
    with pytest.raises(ValueError):
        poly_mul([], [1])
    with pytest.raises(ValueError):
        poly_imul([1], [])


def test_lagrange_reproduces_samples_and_extrapolates():
    coeffs = [2, -3, 0, 1]
    values = [Fraction(_evaluate(coeffs, i)) for i in range(4)]
    for i in range(4):
        assert lagrange_interpolation(values, i) == values[i]
    for x in (-5, 10, 37):
        assert lagrange_interpolation(values, x) == _evaluate(coeffs, x)


def test_lagrange_single_value_is_constant():
    assert lagrange_interpolation([Fraction(9)], 1000) == 9


def test_lagrange_float_field():
    coeffs = [1, 1, 1]
    values = [float(_evaluate(coeffs, i)) for i in range(3)]
    assert lagrange_interpolation(values, 6, float) == pytest.approx(_evaluate(coeffs, 6))


def test_lagrange_rejects_empty():
    with pytest.raises(ValueError):
        lagrange_interpolation([], 3)