"""Trie mapping each inserted string's prefixes to the inserted values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class _Node:
    parent: int
    children: list[int]
    key_count: int = 0
    values: list[Any] = field(default_factory=list)


class TrieMultimap:
    """Each node records every value whose key passes through it."""

    def __init__(self, sigma_size: int) -> None:
        if sigma_size <= 0:
            raise ValueError("alphabet size must be positive")
        self._sigma = sigma_size
        self._tree = [_Node(-1, [-1] * sigma_size)]

    def insert(self, key: str, val: Any, offset: str | int = "a") -> int:
        """Insert ``key`` with ``val``; return the node of the whole key."""
        base = ord(offset) if isinstance(offset, str) else offset
        tree = self._tree
        i = 0
        tree[i].values.append(val)
        for ch in key:
            c = ord(ch) - base
            if not 0 <= c < self._sigma:
                raise ValueError(f"character {ch!r} outside the alphabet")
            if tree[i].children[c] == -1:
                tree[i].children[c] = len(tree)
                tree.append(_Node(i, [-1] * self._sigma))
            i = tree[i].children[c]
            tree[i].values.append(val)
        tree[i].key_count += 1
        return i

    def _node(self, i: int) -> _Node:
        if not 0 <= i < len(self._tree):
            raise IndexError(f"node {i} out of range")
        return self._tree[i]

    def prefix_count(self, i: int) -> int:
        """Number of inserted keys having node ``i`` as a prefix."""
        return len(self._node(i).values)

    def values(self, i: int) -> list[Any]:
        return list(self._node(i).values)

    def parent(self, i: int) -> int:
        return self._node(i).parent

    def __len__(self) -> int:
        return len(self._tree)

    def count(self, i: int) -> int:
        """Number of inserted keys equal to the string of node ``i``."""
        return self._node(i).key_count