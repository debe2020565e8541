from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from graphpart.flow_graph import FlowGraph
from graphpart.push_relabel import PushRelabel

CLRS_EDGES = [
    (0, 1, 16),
    (0, 2, 13),
    (1, 3, 12),
    (2, 1, 4),
    (2, 4, 14),
    (3, 2, 9),
    (3, 5, 20),
    (4, 3, 7),
    (4, 5, 4),
]


def build(n, edges):
    graph = FlowGraph()
    graph.start_construction(n)
    for u, v, cap in edges:
        graph.new_edge(u, v, cap)
    graph.finish_construction()
    return graph


def brute_force_min_cut(n, edges, source, sink):
    others = [v for v in range(n) if v not in (source, sink)]
    best = None
    for size in range(len(others) + 1):
        for subset in combinations(others, size):
            side = set(subset) | {source}
            value = sum(cap for u, v, cap in edges if u in side and v not in side)
            best = value if best is None else min(best, value)
    return best


def net_outflow(graph, node):
    return sum(graph.edge_flow(node, e) for e in graph.out_edges(node))


def cut_capacity(edges, side):
    return sum(cap for u, v, cap in edges if u in side and v not in side)


def test_clrs_example_flow_value():
    graph = build(6, CLRS_EDGES)
    flow, _ = PushRelabel().solve_max_flow_min_cut(graph, 0, 5, False)
    assert flow == 23


def test_clrs_example_source_set_is_min_cut():
    graph = build(6, CLRS_EDGES)
    flow, source_set = PushRelabel().solve_max_flow_min_cut(graph, 0, 5, True)
    side = set(source_set)
    assert source_set[0] == 0
    assert 5 not in side
    assert cut_capacity(CLRS_EDGES, side) == flow
    assert flow == brute_force_min_cut(6, CLRS_EDGES, 0, 5)


def test_single_edge_is_saturated():
    graph = build(2, [(0, 1, 5)])
    flow, source_set = PushRelabel().solve_max_flow_min_cut(graph, 0, 1, True)
    assert flow == 5
    assert graph.edge_flow(0, 0) == 5
    assert source_set == [0]


def test_series_edges_limited_by_bottleneck():
    edges = [(0, 1, 7), (1, 2, 3), (2, 3, 9)]
    graph = build(4, edges)
    flow, source_set = PushRelabel().solve_max_flow_min_cut(graph, 0, 3, True)
    assert flow == 3
    assert sorted(source_set) == [0, 1]


def test_disconnected_sink_has_no_flow():
    edges = [(0, 1, 4), (2, 3, 4)]
    graph = build(4, edges)
    flow, source_set = PushRelabel().solve_max_flow_min_cut(graph, 0, 3, True)
    assert flow == 0
    assert sorted(source_set) == [0, 1]


def test_source_set_not_computed_is_empty():
    graph = build(6, CLRS_EDGES)
    flow, source_set = PushRelabel().solve_max_flow_min_cut(graph, 0, 5, False)
    assert source_set == []
    assert flow == brute_force_min_cut(6, CLRS_EDGES, 0, 5)


def test_solver_can_be_reused():
    solver = PushRelabel()
    first, _ = solver.solve_max_flow_min_cut(build(6, CLRS_EDGES), 0, 5, False)
    second, _ = solver.solve_max_flow_min_cut(build(6, CLRS_EDGES), 0, 5, False)
    assert first == second
    assert solver.global_updates >= 1


def test_flow_conservation_on_clrs():
    graph = build(6, CLRS_EDGES)
    flow, _ = PushRelabel().solve_max_flow_min_cut(graph, 0, 5, False)
    assert net_outflow(graph, 0) == flow
    assert net_outflow(graph, 5) == -flow
    for node in range(1, 5):
        assert net_outflow(graph, node) == 0


def test_out_of_range_source_raises():
    graph = build(2, [(0, 1, 1)])
    with pytest.raises(ValueError):
        PushRelabel().solve_max_flow_min_cut(graph, 5, 1, False)


def test_out_of_range_sink_raises():
    graph = build(2, [(0, 1, 1)])
    with pytest.raises(ValueError):
        PushRelabel().solve_max_flow_min_cut(graph, 0, -1, False)


def test_equal_source_and_sink_raises():
    graph = build(2, [(0, 1, 1)])
    with pytest.raises(ValueError):
        PushRelabel().solve_max_flow_min_cut(graph, 1, 1, False)


@st.composite
def flow_networks(draw):
    n = draw(st.integers(min_value=2, max_value=6))
    edge = st.tuples(
        st.integers(min_value=0, max_value=n - 1),
        st.integers(min_value=0, max_value=n - 1),
        st.integers(min_value=0, max_value=10),
    ).filter(lambda t: t[0] != t[1])
    edges = draw(st.lists(edge, max_size=15))
    return n, edges


@settings(max_examples=150, deadline=None)
@given(flow_networks())
def test_max_flow_equals_min_cut(network):
    n, edges = network
    source, sink = 0, n - 1
    graph = build(n, edges)
    flow, source_set = PushRelabel().solve_max_flow_min_cut(graph, source, sink, True)

    assert flow == brute_force_min_cut(n, edges, source, sink)
    side = set(source_set)
    assert source in side
    assert sink not in side
    assert len(side) == len(source_set)
    assert cut_capacity(edges, side) == flow


@settings(max_examples=150, deadline=None)
@given(flow_networks())
def test_flow_is_feasible(network):
    n, edges = network
    source, sink = 0, n - 1
    graph = build(n, edges)
    flow, _ = PushRelabel().solve_max_flow_min_cut(graph, source, sink, False)

    for node in range(n):
        for e in graph.out_edges(node):
            assert graph.edge_flow(node, e) <= graph.edge_capacity(node, e)
            target = graph.edge_target(node, e)
            rev = graph.reverse_edge(node, e)
            assert graph.edge_flow(target, rev) == -graph.edge_flow(node, e)
    assert net_outflow(graph, source) == flow
    assert net_outflow(graph, sink) == -flow
    for node in range(1, n - 1):
        assert net_outflow(graph, node) == 0