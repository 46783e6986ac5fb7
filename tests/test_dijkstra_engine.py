"""
Unit tests for SimpleDijkstraEngine using AdjacencyListGraph.
"""

from dataclasses import dataclass
import random

import pytest

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import SimpleDijkstraEngine
from frontier import HeapFrontier, ScanFrontier
from graph import Graph


@dataclass(frozen=True)
class DummyNode:
    """
    Minimal hashable vertex for Dijkstra tests.
    """
    id: str


class ShuffledGraph(Graph):
    """Wraps a graph and returns each neighbour list in a seeded random order."""

    def __init__(self, inner: Graph, seed: int) -> None:
        self._inner = inner
        self._rng = random.Random(seed)

    def outgoing(self, vertex):
        edges = list(self._inner.outgoing(vertex))
        self._rng.shuffle(edges)
        return edges


def _random_graph(seed: int, n: int = 30, edges: int = 90) -> AdjacencyListGraph:
    rng = random.Random(seed)
    g = AdjacencyListGraph()
    for i in range(n):
        g.add_node(i)
    for _ in range(edges):
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v:
            g.add_edge(u, v, float(rng.randint(0, 9)))
    return g


def test_dijkstra_basic_paths():
    g = AdjacencyListGraph()
    a = DummyNode("A")
    b = DummyNode("B")
    c = DummyNode("C")

    # A -> B (1), A -> C (4), B -> C (2)
    g.add_edge(a, b, 1.0)
    g.add_edge(a, c, 4.0)
    g.add_edge(b, c, 2.0)

    engine = SimpleDijkstraEngine()
    dist, prev = engine.shortest_paths(g, a)

    assert dist[a] == 0.0
    assert dist[b] == 1.0
    # Shortest A->C is A->B->C with cost 3.0
    assert dist[c] == 3.0
    assert prev[c] == b
    assert a not in prev


def test_dijkstra_unreachable_node_absent():
    g = AdjacencyListGraph()
    a = DummyNode("A")
    b = DummyNode("B")
    c = DummyNode("C")  # unreachable from A

    g.add_edge(a, b, 2.0)
    g.add_node(c)

    engine = SimpleDijkstraEngine()
    dist = engine.shortest_path_costs(g, a)

    assert dist[a] == 0.0
    assert dist[b] == 2.0
    # Unreachable node should not appear in the distance map
    assert c not in dist


def test_solve_stops_at_first_target():
    """A -> B -> C -> D chain: reaching B must not settle anything further."""
    g = AdjacencyListGraph()
    a, b, c, d = (DummyNode(x) for x in "ABCD")
    g.add_edge(a, b, 1)
    g.add_edge(b, c, 1)
    g.add_edge(c, d, 1)

    result = SimpleDijkstraEngine().solve(g, {a}, {b, d})

    assert result.reached_target == b
    assert result.distances == {a: 0, b: 1}
    assert c not in result.distances


def test_solve_unreachable_target_returns_component():
    g = AdjacencyListGraph()
    a, b, c, d = (DummyNode(x) for x in "ABCD")
    g.add_edge(a, b, 1)
    g.add_edge(b, a, 1)
    g.add_edge(c, d, 1)

    distances, predecessors, reached = SimpleDijkstraEngine().solve(g, {a}, {d})

    assert reached is None
    assert set(distances) == {a, b}
    assert predecessors == {b: a}


def test_solve_empty_sources_is_empty_result():
    g = AdjacencyListGraph()
    g.add_edge("x", "y", 1)

    result = SimpleDijkstraEngine().solve(g, set(), {"y"})

    assert result.distances == {}
    assert result.predecessors == {}
    assert result.reached_target is None


def test_source_that_is_also_target_has_distance_zero():
    g = AdjacencyListGraph()
    g.add_edge("s", "t", 1)

    result = SimpleDijkstraEngine().solve(g, ["s"], ["s", "t"])

    assert result.reached_target == "s"
    assert result.distances == {"s": 0}


def test_multi_source_picks_nearest_source():
    """Two sources at different distances from the target; the closer one wins."""
    g = AdjacencyListGraph()
    g.add_edge("far", "m1", 1)
    g.add_edge("m1", "m2", 1)
    g.add_edge("m2", "t", 1)
    g.add_edge("near", "t", 2)

    engine = SimpleDijkstraEngine()
    result = engine.solve(g, ["far", "near"], ["t"])

    assert result.reached_target == "t"
    assert result.distances["t"] == 2
    assert result.predecessors["t"] == "near"


def test_duplicate_sources_are_seeded_once():
    g = AdjacencyListGraph()
    g.add_edge("s", "t", 1)

    engine = SimpleDijkstraEngine()
    engine.solve(g, ["s", "s", "s"], ["t"])

    assert engine.last_frontier_pops == 2


def test_predecessor_only_updated_on_strict_improvement():
    """Equal-cost alternative must not overwrite the first recorded parent."""
    g = AdjacencyListGraph()
    g.add_edge("s", "a", 1)
    g.add_edge("s", "b", 1)
    g.add_edge("a", "t", 1)
    g.add_edge("b", "t", 1)

    result = SimpleDijkstraEngine().solve(g, ["s"], ["t"])

    assert result.distances["t"] == 2
    # a is pushed first, so it settles first and is first to reach t.
    assert result.predecessors["t"] == "a"


def test_float_weights_with_float_zero():
    g = AdjacencyListGraph()
    g.add_edge("a", "b", 0.5)
    g.add_edge("b", "c", 0.25)

    result = SimpleDijkstraEngine(zero=0.0).solve(g, ["a"], ["c"])

    assert result.distances["c"] == pytest.approx(0.75)


def test_check_weights_rejects_negative_edges():
    g = AdjacencyListGraph()
    g.add_edge("a", "b", -1)

    with pytest.raises(ValueError):
        SimpleDijkstraEngine(check_weights=True).solve(g, ["a"], ["b"])

    # Unchecked by default.
    result = SimpleDijkstraEngine().solve(g, ["a"], ["b"])
    assert result.reached_target == "b"


def test_instrumentation_counters_reset_per_call():
    g = AdjacencyListGraph()
    g.add_edge("a", "b", 1)
    g.add_edge("a", "c", 5)
    g.add_edge("b", "c", 1)

    engine = SimpleDijkstraEngine()
    engine.solve(g, ["a"], [])
    first = (engine.last_edges_examined, engine.last_relaxed, engine.last_frontier_pops)

    engine.solve(g, ["a"], [])
    second = (engine.last_edges_examined, engine.last_relaxed, engine.last_frontier_pops)

    assert first == second
    # a->b, a->c, then b->c improves c from 5 to 2
    assert engine.last_relaxed == 3
    assert engine.last_frontier_pops == 3
    assert engine.last_edges_examined == 3


@pytest.mark.parametrize("seed", range(5))
def test_heap_and_scan_frontiers_agree(seed):
    g = _random_graph(seed)
    heap = SimpleDijkstraEngine(frontier_factory=HeapFrontier).solve(g, [0], [])
    scan = SimpleDijkstraEngine(frontier_factory=ScanFrontier).solve(g, [0], [])

    assert heap.distances == scan.distances


@pytest.mark.parametrize("seed", range(5))
def test_neighbour_order_does_not_change_distances(seed):
    g = _random_graph(seed)
    baseline = SimpleDijkstraEngine().solve(g, [0, 1], [])
    shuffled = SimpleDijkstraEngine().solve(ShuffledGraph(g, seed), [0, 1], [])

    assert shuffled.distances == baseline.distances


@pytest.mark.parametrize("seed", range(5))
def test_settled_distances_satisfy_edge_inequality(seed):
    g = _random_graph(seed)
    dist, _ = SimpleDijkstraEngine().shortest_paths(g, 0)

    for u in dist:
        assert dist[u] >= 0
        for v, w in g.outgoing(u):
            assert v in dist
            assert dist[v] <= dist[u] + w


def test_repeated_solve_is_idempotent():
    g = _random_graph(7)
    engine = SimpleDijkstraEngine()

    first = engine.solve(g, [0], [29])
    second = engine.solve(g, [0], [29])

    assert first.distances == second.distances
    assert first.reached_target == second.reached_target


def test_solve_does_not_mutate_graph():
    g = _random_graph(3)
    before = {u: sorted(g.outgoing(u)) for u in g.nodes()}

    SimpleDijkstraEngine().solve(g, [0], [5])

    assert {u: sorted(g.outgoing(u)) for u in g.nodes()} == before


def test_check_weights_covers_edges_into_settled_vertices():
    """a -> s is negative and points back at the already-settled source."""
    g = AdjacencyListGraph.from_edges([("s", "a", 1), ("a", "s", -5), ("a", "t", 1)])

    with pytest.raises(ValueError):
        SimpleDijkstraEngine(check_weights=True).solve(g, ["s"], ["t"])
