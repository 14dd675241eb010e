import pytest

from cpkit.scc import SCC, SimpleSCC

GRAPH = [[1], [2], [0, 3], []]


def test_simple_scc_components():
    scc = SimpleSCC(GRAPH)
    scc.find_scc()
    assert scc.scc_id(0) == scc.scc_id(1) == scc.scc_id(2)
    assert scc.scc_id(3) != scc.scc_id(0)


def test_topological_order_by_id():
    scc = SimpleSCC(GRAPH)
    scc.find_scc()
    # A larger id comes earlier in topological order.
    assert scc.scc_id(0) > scc.scc_id(3)


def test_condensed_graph():
    scc = SCC(GRAPH)
    condensed = scc.find_scc()
    assert len(condensed) == 2
    assert condensed[scc.scc_id(0)] == [scc.scc_id(3)]
    assert condensed[scc.scc_id(3)] == []


def test_weighted_arcs_are_retargeted():
    graph = [[(1, "a")], [(0, "b"), (2, "c")], []]
    scc = SCC(graph, head=lambda e: e[0], retarget=lambda e, t: (t, e[1]))
    condensed = scc.find_scc()
    assert condensed[scc.scc_id(0)] == [(scc.scc_id(2), "c")]


def test_ignore_leaves_vertex_unvisited():
    scc = SCC([[], [0], []])
    scc.find_scc(ignore=lambda v: v == 2)
    assert scc.scc_id(2) == -1
    assert scc.scc_id(1) != -1


def test_find_scc_from_and_revisit():
    scc = SimpleSCC(GRAPH)
    scc.find_scc_from(2)
    assert scc.scc_id(3) != -1
    with pytest.raises(ValueError):
        scc.find_scc_from(0)


def test_out_of_range_vertex():
    scc = SimpleSCC(GRAPH)
    with pytest.raises(IndexError):
        scc.scc_id(len(GRAPH))


def test_long_chain_does_not_recurse():
    n = 5000
    graph = [[i + 1] for i in range(n - 1)] + [[]]
    scc = SCC(graph)
    condensed = scc.find_scc()
    assert len(condensed) == n
    assert len({scc.scc_id(i) for i in range(n)}) == n


def test_long_cycle_is_one_component():
    n = 3000
    graph = [[(i + 1) % n] for i in range(n)]
    scc = SCC(graph)
    assert len(scc.find_scc()) == 1