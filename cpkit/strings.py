"""Aho-Corasick automaton, Knuth-Morris-Pratt search and prefix function."""

from __future__ import annotations

from collections import deque
from typing import Any, Sequence


class AhoCorasick:
    """Trie of weighted patterns that becomes a matching automaton.

    Characters are mapped to ``ord(ch) - ord(alpha)`` and must fall in
    ``0..alphabet_size - 1``. ``weight[p]`` first counts (with weights) the
    inserted strings having node ``p`` as a prefix; after ``initialize`` it
    also includes the weights along the failure chain. ``go`` and ``fail``
    are exposed for walking the automaton.
    """

    def __init__(self, alphabet_size: int = 26, alpha: str = "a") -> None:
        if alphabet_size <= 0:
            raise ValueError("alphabet size must be positive")
        self.alphabet_size = alphabet_size
        self._base = ord(alpha)
        self.go: list[list[int]] = [[-1] * alphabet_size]
        self.weight: list[Any] = [0]
        self.fail: list[int] = []

    def _code(self, ch: str) -> int:
        c = ord(ch) - self._base
        if not 0 <= c < self.alphabet_size:
            raise ValueError(f"character {ch!r} outside the alphabet")
        return c

    def insert(self, s: str, w: Any = 1) -> int:
        """Insert ``s`` with weight ``w``; return the node it ends at."""
        p = 0
        for ch in s:
            c = self._code(ch)
            if self.go[p][c] == -1:
                self.go[p][c] = len(self.go)
                self.go.append([-1] * self.alphabet_size)
                self.weight.append(0)
            p = self.go[p][c]
            self.weight[p] += w
        return p

    def get(self, s: str) -> int | None:
        """Node reached by following ``s`` in the trie, or ``None``."""
        p = 0
        for ch in s:
            p = self.go[p][self._code(ch)]
            if p == -1:
                return None
        return p

    def initialize(self) -> None:
        """Compute failure links and complete the transition table."""
        go, weight = self.go, self.weight
        fail = [0] * len(go)
        queue: deque[int] = deque()
        for c in range(self.alphabet_size):
            v = go[0][c]
            if v != -1:
                queue.append(v)
                fail[v] = 0
            else:
                go[0][c] = 0
        while queue:
            u = queue.popleft()
            weight[u] += weight[fail[u]]
            for c in range(self.alphabet_size):
                v = go[u][c]
                if v != -1:
                    queue.append(v)
                    fail[v] = go[fail[u]][c]
                else:
                    go[u][c] = go[fail[u]][c]
        self.fail = fail


class KMPSearcher:
    """Finds the first occurrence of a fixed non-empty pattern."""

    def __init__(self, pattern: Sequence[Any]) -> None:
        if len(pattern) == 0:
            raise ValueError("pattern must be non-empty")
        self._pattern = pattern
        self._fail = [-1] * (len(pattern) + 1)
        for k in range(1, len(pattern) + 1):
            self._fail[k] = self._next(pattern[k - 1], self._fail[k - 1])

    def _next(self, item: Any, i: int) -> int:
        while i != -1 and self._pattern[i] != item:
            i = self._fail[i]
        return i + 1

    def search(self, text: Sequence[Any]) -> tuple[int, int] | None:
        """Return ``(start, end)`` of the first match in ``text``, or ``None``."""
        length = len(self._pattern)
        j = 0
        for pos, item in enumerate(text):
            j = self._next(item, j)
            if j == length:
                return pos + 1 - length, pos + 1
        return None


def get_pi(s: Sequence[Any]) -> list[int]:
    """``pi[i]`` is the length of the longest proper border of ``s[:i+1]``."""
    if len(s) == 0:
        raise ValueError("sequence must be non-empty")
    pi = [0] * len(s)
    j = 0
    for i in range(1, len(s)):
        while s[i] != s[j]:
            if j == 0:
                j = -1
                break
            j = pi[j - 1]
        j += 1
        pi[i] = j
    return pi