"""Linear basis of bit vectors over GF(2)."""

from __future__ import annotations


class XorBasis:
    """A linearly independent list of vectors in GF(2)^dimension.

    Vectors are non-negative integers below ``2 ** dimension``.
    """

    def __init__(self, dimension: int) -> None:
        if dimension <= 0:
            raise ValueError("dimension must be positive")
        self._dimension = dimension
        # Echelon basis indexed by leading bit, and its expression
        # as a bit mask over the vectors actually added.
        self._std = [0] * dimension
        self._std_in_real = [0] * dimension
        self._real: list[int] = []
        self._normalized = False

    def _fits(self, x: int) -> bool:
        return 0 <= x and x >> self._dimension == 0

    def add(self, x: int) -> None:
        """Add ``x`` to the basis unless it is already in the span."""
        if not self._fits(x):
            raise ValueError(f"{x} is not a {self._dimension}-bit vector")
        if x == 0:
            return
        y, vec = x, 0
        for i in reversed(range(self._dimension)):
            if y >> i & 1:
                if self._std[i] == 0:
                    self._std[i] = y
                    self._std_in_real[i] = vec ^ (1 << len(self._real))
                    self._real.append(x)
                    return
                y ^= self._std[i]
                vec ^= self._std_in_real[i]

    def normalize_std_basis(self) -> None:
        """Reduce the echelon basis so no leading bit appears elsewhere."""
        if self._normalized:
            return
        self._normalized = True
        std, mix = self._std, self._std_in_real
        for i in range(self._dimension):
            if std[i]:
                for j in range(i + 1, self._dimension):
                    if std[j] >> i & 1:
                        std[j] ^= std[i]
                        mix[j] ^= mix[i]

    def components(self, x: int) -> list[int]:
        """Added vectors whose XOR is ``x``, or ``[]`` if ``x`` is not spanned."""
        if x <= 0:
            raise ValueError("vector must be positive")
        if not self._fits(x):
            return []
        mask = 0
        for i in reversed(range(self._dimension)):
            if x >> i & 1:
                if self._std[i] == 0:
                    return []
                x ^= self._std[i]
                mask ^= self._std_in_real[i]
        return [v for k, v in enumerate(self._real) if mask >> k & 1]

    def __contains__(self, x: int) -> bool:
        if not self._fits(x):
            return False
        for i in reversed(range(self._dimension)):
            if x >> i & 1:
                if self._std[i] == 0:
                    return False
                x ^= self._std[i]
        return True

    def basis(self) -> list[int]:
        """The added vectors that form the basis, in insertion order."""
        return list(self._real)

    def std_basis(self) -> list[int]:
        """Echelon basis vectors in increasing order of leading bit."""
        return [v for v in self._std if v]

    def __len__(self) -> int:
        return len(self._real)