"""Strongly connected components (Tarjan) and condensation."""

from __future__ import annotations

from typing import Any, Callable, Sequence


def _identity(arc: Any) -> int:
    return arc


def _replace(_arc: Any, target: int) -> Any:
    return target


class SCC:
    """Tarjan's algorithm over a graph given as adjacency lists of arcs.

    ``head(arc)`` gives the arc's target vertex; ``retarget(arc, c)``
    builds a copy of the arc pointing to component ``c``. Components are
    numbered from 0; a larger id comes earlier in topological order.
    """

    def __init__(
        self,
        graph: Sequence[Sequence[Any]],
        head: Callable[[Any], int] = _identity,
        retarget: Callable[[Any, int], Any] = _replace,
    ) -> None:
        self._g = graph
        self._n = len(graph)
        self._head = head
        self._retarget = retarget
        self._scc_id = [-1] * self._n
        self._low = [0] * self._n
        self._order = [0] * self._n
        self._stack: list[int] = []
        self._in_stack = [False] * self._n
        self._time = 0
        self._inter: list[list[Any]] = [[] for _ in range(self._n)]
        self._condensed: list[list[Any]] = []

    def _enter(self, u: int) -> None:
        self._time += 1
        self._order[u] = self._low[u] = self._time
        self._stack.append(u)
        self._in_stack[u] = True

    def _after_arc(self, u: int, arc: Any, v: int) -> None:
        if not self._in_stack[v]:
            self._inter[u].append(self._retarget(arc, self._scc_id[v]))

    def _close(self, u: int) -> None:
        component: list[Any] = []
        cid = len(self._condensed)
        while True:
            v = self._stack.pop()
            self._in_stack[v] = False
            self._scc_id[v] = cid
            component.extend(self._inter[v])
            if v == u:
                break
        self._condensed.append(component)

    def _dfs(self, start: int) -> None:
        low, order, head = self._low, self._order, self._head
        self._enter(start)
        frames: list[list[Any]] = [[start, iter(self._g[start]), None]]
        while frames:
            frame = frames[-1]
            u = frame[0]
            if frame[2] is not None:
                arc = frame[2]
                frame[2] = None
                v = head(arc)
                low[u] = min(low[u], low[v])
                self._after_arc(u, arc, v)
            descended = False
            for arc in frame[1]:
                v = head(arc)
                if order[v] == 0:
                    frame[2] = arc
                    self._enter(v)
                    frames.append([v, iter(self._g[v]), None])
                    descended = True
                    break
                if self._in_stack[v]:
                    low[u] = min(low[u], order[v])
                self._after_arc(u, arc, v)
            if descended:
                continue
            frames.pop()
            if order[u] == low[u]:
                self._close(u)

    def _snapshot(self) -> list[list[Any]]:
        return [list(arcs) for arcs in self._condensed]

    def find_scc(self, ignore: Callable[[int], bool] | None = None) -> list[list[Any]]:
        """Visit every vertex not ignored; return the condensed graph."""
        for i in range(self._n):
            if (ignore is None or not ignore(i)) and self._scc_id[i] == -1:
                self._dfs(i)
        return self._snapshot()

    def find_scc_from(self, start: int) -> list[list[Any]]:
        """Visit what is reachable from ``start``; return the condensed graph."""
        if not 0 <= start < self._n:
            raise IndexError(f"vertex {start} out of range")
        if self._scc_id[start] != -1:
            raise ValueError(f"vertex {start} already visited")
        self._dfs(start)
        return self._snapshot()

    def scc_id(self, u: int) -> int:
        """Component of ``u``, or -1 if it has not been visited."""
        if not 0 <= u < self._n:
            raise IndexError(f"vertex {u} out of range")
        return self._scc_id[u]


class SimpleSCC:
    """Strongly connected components of a graph of plain vertex lists."""

    def __init__(self, graph: Sequence[Sequence[int]]) -> None:
        self._scc = SCC(graph)

    def find_scc(self) -> None:
        self._scc.find_scc()

    def find_scc_from(self, start: int) -> None:
        self._scc.find_scc_from(start)

    def scc_id(self, u: int) -> int:
        return self._scc.scc_id(u)