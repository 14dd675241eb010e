import math

import pytest

from cpkit.nt import (
    MpfInfo,
    discrete_log,
    discrete_log_mod_p,
    divisors,
    ext_gcd,
    factorize,
    factorize_p,
    get_mpf,
    get_mpf_info,
    get_mu,
    get_primes,
    mod_pow,
    phi,
    prime_divisors,
)


def _is_prime(p):
    return p >= 2 and all(p % d for d in range(2, math.isqrt(p) + 1))


def test_divisors_example():
    assert divisors(12) == [1, 2, 3, 4, 6, 12]


@pytest.mark.parametrize("n", range(1, 150))
def test_divisors_invariants(n):
    ds = divisors(n)
    assert ds == sorted(set(ds))
    assert all(n % d == 0 for d in ds)
    assert len(ds) == sum(1 for d in range(1, n + 1) if n % d == 0)


def test_divisors_rejects_nonpositive():
    with pytest.raises(ValueError):
        divisors(0)


@pytest.mark.parametrize("n", range(1, 300))
def test_factorizations_consistent(n):
    fp = factorize_p(n)
    assert math.prod(p ** e for p, e in fp) == n
    assert all(_is_prime(p) for p, _ in fp)
    assert [p for p, _ in fp] == prime_divisors(n)
    assert factorize(n) == [p ** e for p, e in fp]


def test_factorize_p_rejects_zero():
    with pytest.raises(ValueError):
        factorize_p(0)


def test_get_primes_matches_trial_division():
    assert get_primes(200) == [p for p in range(201) if _is_prime(p)]


def test_get_mpf():
    n = 300
    mpf = get_mpf(n)
    assert len(mpf) == n + 1
    assert mpf[0] == 0 and mpf[1] == 0
    for i in range(2, n + 1):
        p = mpf[i]
        assert i % p == 0 and _is_prime(p)
        assert all(i % q for q in range(2, p))


@pytest.mark.parametrize("a,b", [(240, 46), (-7, 3), (17, 0), (0, 5), (99, -12)])
def test_ext_gcd(a, b):
    g, x, y = ext_gcd(a, b)
    assert a * x + b * y == g
    assert abs(g) == math.gcd(a, b)


def test_phi_counts_coprimes():
    for n in range(1, 120):
        assert phi(n) == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def test_phi_rejects_zero():
    with pytest.raises(ValueError):
        phi(0)


def test_mu_divisor_sum():
    n = 200
    mu = get_mu(n)
    assert mu[0] == 0
    for k in range(1, n + 1):
        total = sum(mu[d] for d in divisors(k))
        assert total == (1 if k == 1 else 0)


def test_mpf_info():
    n = 200
    info = get_mpf_info(n)
    assert info[0] == MpfInfo()
    for i in range(2, n + 1):
        e = info[i]
        assert e.mpf ** e.mpf_cnt * e.next == i
        assert e.next % e.mpf != 0
        assert e.mpf == get_mpf(n)[i]


def test_mod_pow():
    for a in range(-5, 6):
        for n in range(6):
            assert mod_pow(a, n, 13) == pow(a, n, 13) or n == 0
    assert mod_pow(5, 0, 1) == 1
    with pytest.raises(ValueError):
        mod_pow(2, -1, 5)


@pytest.mark.parametrize("mod", [7, 9, 10, 13, 25])
def test_discrete_log_minimal(mod):
    for a in range(1, mod):
        if math.gcd(a, mod) != 1:
            continue
        for b in range(mod):
            x = discrete_log(a, b, mod)
            if x == -1:
                assert all(pow(a, k, mod) != b % mod for k in range(2 * mod))
            else:
                assert pow(a, x, mod) == b % mod
                assert all(pow(a, k, mod) != b % mod for k in range(x))


def test_discrete_log_unreachable():
    assert discrete_log(2, 3, 7) == -1
    assert discrete_log_mod_p(2, 0, 7) == -1


def test_discrete_log_mod_p():
    p = 101
    for b in range(1, p):
        x = discrete_log_mod_p(3, b, p)
        assert x != -1 and pow(3, x, p) == b


def test_discrete_log_requires_coprime_base():
    with pytest.raises(ValueError):
        discrete_log(2, 1, 4)
    with pytest.raises(ValueError):
        discrete_log_mod_p(3, 1, 1)