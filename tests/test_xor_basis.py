from functools import reduce
from operator import xor

import pytest

from cpkit.xor_basis import XorBasis


def _built(vectors, dimension=8):
    b = XorBasis(dimension)
    for v in vectors:
        b.add(v)
    return b


def _span(vectors):
    span = {0}
    for v in vectors:
        span |= {s ^ v for s in span}
    return span


def test_dependent_vectors_not_added():
    b = _built([5, 3, 6, 0, 5])
    assert len(b) == 2
    assert b.basis() == [5, 3]


def test_contains_matches_span():
    vectors = [12, 10, 6, 129]
    b = _built(vectors)
    span = _span(vectors)
    for x in range(256):
        assert (x in b) == (x in span)
    assert 256 not in b


def test_components_xor_to_vector():
    vectors = [200, 77, 13, 77 ^ 13, 3]
    b = _built(vectors)
    span = _span(vectors)
    for x in range(1, 256):
        parts = b.components(x)
        if x in span:
            assert reduce(xor, parts, 0) == x
            assert set(parts) <= set(b.basis())
        else:
            assert parts == []


def test_components_after_normalization():
    b = _built([7, 3, 1, 64])
    b.normalize_std_basis()
    for x in range(1, 128):
        parts = b.components(x)
        if x in b:
            assert reduce(xor, parts, 0) == x


def test_normalized_std_basis_is_reduced():
    b = _built([255, 15, 3, 129])
    b.normalize_std_basis()
    std = b.std_basis()
    assert len(std) == len(b)
    leads = [v.bit_length() - 1 for v in std]
    assert leads == sorted(leads)
    for v in std:
        for lead in leads:
            if lead != v.bit_length() - 1:
                assert not v >> lead & 1
    assert _span(std) == _span(b.basis())


def test_invalid_input():
    b = XorBasis(4)
    with pytest.raises(ValueError):
        b.add(16)
    with pytest.raises(ValueError):
        b.components(0)
    with pytest.raises(ValueError):
        XorBasis(0)