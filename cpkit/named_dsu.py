"""Disjoint-set unions whose sets carry names."""

from __future__ import annotations

from dataclasses import dataclass


class NamedDSU:
    """Sets ``1..n_sets`` and elements numbered from 1 in insertion order.

    ``merge(x, y)`` moves every element of set ``y`` into set ``x``.
    """

    def __init__(self, n_sets: int) -> None:
        self._n_sets = n_sets
        self._size = 0
        # Element slots: a non-negative parent index, or -(set id) at a root.
        self._parent_or_name = [0]
        self._leader = [0] * (n_sets + 1)

    def _check_set(self, s: int) -> None:
        if not 1 <= s <= self._n_sets:
            raise IndexError(f"set {s} out of range 1..{self._n_sets}")

    def _root(self, x: int) -> int:
        p = self._parent_or_name
        r = x
        while p[r] >= 0:
            r = p[r]
        while p[x] >= 0:
            p[x], x = r, p[x]
        return r

    def merge(self, x: int, y: int) -> None:
        """Put all contents of set ``y`` into set ``x``."""
        self._check_set(x)
        self._check_set(y)
        if y == x or self._leader[y] == 0:
            return
        if self._leader[x] == 0:
            self._leader[x] = self._leader[y]
            self._parent_or_name[self._leader[x]] = -x
        else:
            self._parent_or_name[self._leader[y]] = self._leader[x]
        self._leader[y] = 0

    def set_id(self, x: int) -> int:
        """Return the set that contains element ``x``."""
        if not 1 <= x <= self._size:
            raise IndexError(f"element {x} out of range 1..{self._size}")
        return -self._parent_or_name[self._root(x)]

    def add_to_set(self, i: int) -> None:
        """Add the next element to set ``i``."""
        self._check_set(i)
        self._size += 1
        if self._leader[i] == 0:
            self._leader[i] = self._size
            self._parent_or_name.append(-i)
        else:
            self._parent_or_name.append(self._leader[i])


@dataclass(frozen=True)
class _Record:
    a: int
    root_a: int
    size_a: int
    b: int
    root_b: int
    size_b: int


class NamedDSUUndo:
    """Named disjoint sets over ``n`` elements and ``m`` names, with undo.

    Elements and names are numbered from 0.
    """

    def __init__(self, n: int, m: int) -> None:
        # None marks an element that belongs to no named set.
        self._parent_or_name: list[int | None] = [None] * n
        self._root = [-1] * m
        self._size = [0] * m
        self._history: list[_Record] = []

    def name(self, x: int) -> int:
        """Return the name of the set containing ``x``, or -1 if none."""
        p = self._parent_or_name
        while p[x] is not None and p[x] >= 0:
            x = p[x]
        if p[x] is None:
            return -1
        return -(p[x] + 1)

    def merge(self, a: int, b: int) -> None:
        """Combine the sets named ``a`` and ``b`` into one named ``a``."""
        root, size = self._root, self._size
        self._history.append(_Record(a, root[a], size[a], b, root[b], size[b]))
        if a == b or root[b] == -1:
            return
        x, y = root[a], root[b]
        if size[a] < size[b]:
            x, y = y, x
        if y != -1:
            self._parent_or_name[y] = x
        self._parent_or_name[x] = -(a + 1)
        root[a] = x
        root[b] = -1
        size[a] += size[b]
        size[b] = 0

    def undo(self) -> None:
        """Undo the last merge."""
        if not self._history:
            raise IndexError("no merge to undo")
        t = self._history.pop()
        if t.a == t.b or t.root_b == -1:
            return
        self._root[t.a] = t.root_a
        self._root[t.b] = t.root_b
        self._size[t.a] = t.size_a
        self._size[t.b] = t.size_b
        if t.root_a != -1:
            self._parent_or_name[t.root_a] = -(t.a + 1)
        self._parent_or_name[t.root_b] = -(t.b + 1)

    def add_to_set(self, x: int, name: int) -> None:
        """Add element ``x`` to the set named ``name``."""
        if self._root[name] == -1:
            self._root[name] = x
            self._parent_or_name[x] = -(name + 1)
        else:
            self._parent_or_name[x] = self._root[name]
        self._size[name] += 1