"""Elementary number theory: factorization, sieves, totients, discrete logs."""

from __future__ import annotations

import math
from dataclasses import dataclass


def prime_divisors(n: int) -> list[int]:
    """Distinct prime divisors of ``n`` in increasing order."""
    res: list[int] = []
    i = 2
    while i * i <= n:
        if n % i == 0:
            res.append(i)
            while n % i == 0:
                n //= i
        i += 1
    if n > 1:
        res.append(n)
    return res


def divisors(n: int) -> list[int]:
    """All positive divisors of ``n`` in increasing order."""
    if n <= 0:
        raise ValueError("n must be positive")
    small: list[int] = []
    i = 1
    while i * i < n:
        if n % i == 0:
            small.append(i)
        i += 1
    res = list(small)
    if i * i == n:
        res.append(i)
    res.extend(n // d for d in reversed(small))
    return res


def factorize_p(n: int) -> list[tuple[int, int]]:
    """Prime factorization of ``n`` as ``(prime, exponent)`` pairs."""
    if n <= 0:
        raise ValueError("n must be positive")
    res: list[tuple[int, int]] = []
    i = 2
    while i * i <= n:
        cnt = 0
        while n % i == 0:
            n //= i
            cnt += 1
        if cnt:
            res.append((i, cnt))
        i += 1
    if n > 1:
        res.append((n, 1))
    return res


def factorize(n: int) -> list[int]:
    """Prime-power factors of ``n`` (e.g. 12 -> [4, 3])."""
    res: list[int] = []
    i = 2
    while i * i <= n:
        t = 1
        while n % i == 0:
            t *= i
            n //= i
        if t > 1:
            res.append(t)
        i += 1
    if n > 1:
        res.append(n)
    return res


def _linear_sieve(n: int) -> tuple[list[int], list[int]]:
    mpf = [0] * (n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if mpf[i] == 0:
            mpf[i] = i
            primes.append(i)
        max_p = min(mpf[i], n // i)
        for p in primes:
            if p > max_p:
                break
            mpf[p * i] = p
    return primes, mpf


def get_primes(n: int) -> list[int]:
    """Primes not greater than ``n``."""
    return _linear_sieve(n)[0]


def get_mpf(n: int) -> list[int]:
    """Minimum prime factor of every integer in ``0..n`` (0 for 0 and 1)."""
    return _linear_sieve(n)[1]


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    if b == 0:
        return a, 1, 0
    q = _tdiv(a, b)
    g, x1, y1 = ext_gcd(b, a - q * b)
    return g, y1, x1 - y1 * q


def phi(n: int) -> int:
    """Euler's totient of ``n``."""
    if n <= 0:
        raise ValueError("n must be positive")
    result = 1
    i = 2
    while i * i <= n:
        if n % i == 0:
            n //= i
            t = 1
            while n % i == 0:
                n //= i
                t *= i
            result *= t * (i - 1)
        i += 1
    if n > 1:
        result *= n - 1
    return result


def get_mu(n: int) -> list[int]:
    """Moebius function on ``0..n``; ``mu[0]`` is 0."""
    if n <= 0:
        raise ValueError("n must be positive")
    mu = [1] * (n + 1)
    mu[0] = 0
    i = 2
    while i * i <= n:
        if mu[i] == 1:  # i is prime
            for j in range(i, n + 1, i):
                mu[j] *= -i
            for j in range(i * i, n + 1, i * i):
                mu[j] = 0
        i += 1
    for i in range(2, n + 1):
        v = mu[i]
        if v == i:
            mu[i] = 1
        elif v == -i:
            mu[i] = -1
        elif v > 0:
            mu[i] = -1
        elif v < 0:
            mu[i] = 1
    return mu


@dataclass
class MpfInfo:
    """``i == mpf ** mpf_cnt * next`` with ``mpf`` not dividing ``next``."""

    mpf: int = 0
    mpf_cnt: int = 0
    next: int = 0


def get_mpf_info(n: int) -> list[MpfInfo]:
    """Minimum prime factor, its multiplicity and cofactor for ``0..n``."""
    if n <= 0:
        raise ValueError("n must be positive")
    primes: list[int] = []
    res = [MpfInfo() for _ in range(n + 1)]
    for i in range(2, n + 1):
        if res[i].mpf == 0:
            res[i] = MpfInfo(i, 1, 1)
            primes.append(i)
        lim = n // i
        max_prime = min(lim, res[i].mpf - 1)
        for p in primes:
            if p > max_prime:
                break
            res[p * i] = MpfInfo(p, 1, i)
        cur = res[i]
        if cur.mpf <= lim:
            res[cur.mpf * i] = MpfInfo(cur.mpf, cur.mpf_cnt + 1, cur.next)
    return res


def mod_pow(a: int, n: int, mod: int) -> int:
    """``a ** n`` modulo ``mod``; ``n == 0`` always yields 1."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if mod <= 0:
        raise ValueError("modulus must be positive")
    if n == 0:
        return 1
    return pow(a % mod, n, mod)


def _bsgs(a: int, b: int, mod: int, order: int) -> int:
    if math.gcd(b, mod) != 1:
        return -1
    a %= mod
    b %= mod
    m = math.isqrt(order)
    if m * m < order:
        m += 1
    table: dict[int, int] = {}
    t = 1
    for j in range(m):
        table.setdefault(t, j)
        t = t * a % mod
    k = mod_pow(pow(a, -1, mod), m, mod)
    t = b
    for i in range(m):
        j = table.get(t)
        if j is not None:
            return i * m + j
        t = t * k % mod
    return -1


def discrete_log(a: int, b: int, mod: int) -> int:
    """Smallest ``x >= 0`` with ``a**x == b (mod mod)``, or -1."""
    if mod <= 1:
        raise ValueError("modulus must exceed 1")
    if math.gcd(a, mod) != 1:
        raise ValueError("base must be coprime to the modulus")
    return _bsgs(a, b, mod, phi(mod))


def discrete_log_mod_p(a: int, b: int, p: int) -> int:
    """Discrete log modulo a prime ``p``, or -1 if there is none."""
    if p <= 1:
        raise ValueError("modulus must exceed 1")
    if math.gcd(a, p) != 1:
        raise ValueError("base must be coprime to the modulus")
    return _bsgs(a, b, p, p - 1)