"""Exact rational numbers kept in lowest terms with a positive denominator."""

from __future__ import annotations

from math import gcd
from typing import Any, Callable


class BadRational(ValueError):
    """Raised for a zero denominator or a division by zero."""

    def __init__(self, message: str = "bad rational: zero denominator") -> None:
        super().__init__(message)


def _as_pair(value: Any) -> tuple[int, int] | None:
    if isinstance(value, Rational):
        return value._num, value._den
    if isinstance(value, int):
        return value, 1
    return None


class Rational:
    """A fraction ``num/den`` with ``gcd(num, den) == 1`` and ``den >= 0``.

    A zero denominator with a non-zero numerator stands for positive or
    negative infinity (``1/0`` or ``-1/0``) and orders accordingly.
    """

    __slots__ = ("_num", "_den")

    def __init__(self, num: int | Rational = 0, den: int | None = None) -> None:
        if isinstance(num, Rational):
            if den is not None:
                raise TypeError("a rational copy takes no denominator")
            self._num, self._den = num._num, num._den
            return
        if den is None:
            self._num, self._den = int(num), 1
            return
        self._num, self._den = int(num), int(den)
        self._normalize()

    def _normalize(self) -> None:
        if self._num == 0 and self._den == 0:
            raise BadRational("bad rational: 0/0")
        g = gcd(self._num, self._den)
        self._num //= g
        self._den //= g
        if self._den < 0:
            self._num = -self._num
            self._den = -self._den

    @classmethod
    def _raw(cls, num: int, den: int) -> Rational:
        r = cls.__new__(cls)
        r._num, r._den = num, den
        return r

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    # Arithmetic

    def __add__(self, other: Any) -> Rational:
        if isinstance(other, Rational):
            r_num, r_den = other._num, other._den
            g = gcd(self._den, r_den)
            den = self._den // g
            num = self._num * (r_den // g) + r_num * den
            g = gcd(num, g)
            return Rational._raw(num // g, den * (r_den // g))
        if isinstance(other, int):
            return Rational._raw(self._num + other * self._den, self._den)
        return NotImplemented

    def __radd__(self, other: Any) -> Rational:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Rational:
        if isinstance(other, Rational):
            r_num, r_den = other._num, other._den
            g = gcd(self._den, r_den)
            den = self._den // g
            num = self._num * (r_den // g) - r_num * den
            g = gcd(num, g)
            return Rational._raw(num // g, den * (r_den // g))
        if isinstance(other, int):
            return Rational._raw(self._num - other * self._den, self._den)
        return NotImplemented

    def __rsub__(self, other: Any) -> Rational:
        if not isinstance(other, int):
            return NotImplemented
        return -(self - other)

    def __mul__(self, other: Any) -> Rational:
        if isinstance(other, Rational):
            gcd1 = gcd(self._num, other._den)
            gcd2 = gcd(other._num, self._den)
            return Rational._raw(
                (self._num // gcd1) * (other._num // gcd2),
                (self._den // gcd2) * (other._den // gcd1),
            )
        if isinstance(other, int):
            g = gcd(other, self._den)
            return Rational._raw(self._num * (other // g), self._den // g)
        return NotImplemented

    def __rmul__(self, other: Any) -> Rational:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Rational:
        pair = _as_pair(other)
        if pair is None:
            return NotImplemented
        r_num, r_den = pair
        if r_num == 0:
            raise BadRational()
        if self._num == 0:
            return self
        gcd1 = gcd(self._num, r_num)
        gcd2 = gcd(r_den, self._den)
        num = (self._num // gcd1) * (r_den // gcd2)
        den = (self._den // gcd2) * (r_num // gcd1)
        if den < 0:
            num, den = -num, -den
        return Rational._raw(num, den)

    def __rtruediv__(self, other: Any) -> Rational:
        if not isinstance(other, int):
            return NotImplemented
        return Rational(other) / self

    def __neg__(self) -> Rational:
        return Rational(-self._num, self._den)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return self if self._num >= 0 else -self

    def __bool__(self) -> bool:
        return self._num != 0

    # Comparison

    def __eq__(self, other: Any) -> bool:
        pair = _as_pair(other)
        if pair is None:
            return NotImplemented
        return self._num == pair[0] and self._den == pair[1]

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Rational):
            if self._den == 0:
                if other._den == 0:
                    return self._num < other._num
                return self._num < 0
            if other._den == 0:
                return other._num > 0
            return self._num * other._den < other._num * self._den
        if isinstance(other, int):
            if self._den == 0:
                return self._num < 0
            return self._num < other * self._den
        return NotImplemented

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, Rational):
            return other < self
        if isinstance(other, int):
            return not (self == other) and not (self < other)
        return NotImplemented

    def __le__(self, other: Any) -> bool:
        result = self.__gt__(other)
        return result if result is NotImplemented else not result

    def __ge__(self, other: Any) -> bool:
        result = self.__lt__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    # Conversion

    def __str__(self) -> str:
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"

    def __float__(self) -> float:
        return rational_cast(self, float)


def rational_cast(r: Rational, kind: Callable[[int], Any] = float) -> Any:
    """Convert ``r`` to another numeric type as ``kind(num) / kind(den)``."""
    return kind(r.numerator) / kind(r.denominator)