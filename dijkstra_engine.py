"""
Frontier-based DijkstraEngine implementation.

Computes multi-source shortest paths over any Graph implementation, stopping
as soon as one of the targets is settled.
"""

from typing import Any, Callable, Dict, Iterable, Optional

from algorithms import Frontier, ShortestPathEngine, SolveResult
from frontier import HeapFrontier
from graph import Graph


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Multi-source Dijkstra with multi-target early exit.

    Complexity:
        O((V + E) log V) with HeapFrontier, O(V^2) with ScanFrontier, over the
        vertices reachable from the sources.
    """

    def __init__(
        self,
        frontier_factory: Callable[[], Frontier] = HeapFrontier,
        zero: Any = 0,
        check_weights: bool = False,
    ) -> None:
        self._frontier_factory = frontier_factory
        self._zero = zero
        self._check_weights = check_weights
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_frontier_pops = 0
        self.last_frontier_pushes = 0

    def solve(self, graph: Graph, sources: Iterable, targets: Iterable) -> SolveResult:
        """
        Grow shortest-path distances from every source simultaneously.

        Each source starts at the engine's zero. The loop settles the closest
        frontier vertex, stops right there if it is a target, and otherwise
        relaxes its outgoing edges. Only settled vertices appear in the
        returned distance map; the predecessor map may also hold entries for
        vertices that were discovered but never settled.
        """
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_frontier_pops = 0
        self.last_frontier_pushes = 0

        settled: Dict[Any, Any] = {}
        prev: Dict[Any, Any] = {}
        frontier = self._frontier_factory()
        target_set = set(targets)

        for source in sources:
            if source not in frontier:
                frontier.push(source, self._zero)
                self.last_frontier_pushes += 1

        reached: Optional[Any] = None
        while frontier:
            u, d_u = frontier.pop_min()
            self.last_frontier_pops += 1
            settled[u] = d_u

            if u in target_set:
                reached = u
                break

            for v, w in graph.outgoing(u):
                self.last_edges_examined += 1
                if self._check_weights and w < self._zero:
                    raise ValueError(f"Negative edge weight {w!r} on {u!r} -> {v!r}")
                if v in settled:
                    continue

                alt = d_u + w
                current = frontier.get(v)
                if current is None or alt < current:
                    frontier.push(v, alt)
                    prev[v] = u
                    self.last_frontier_pushes += 1
                    self.last_relaxed += 1

        return SolveResult(settled, prev, reached)

    def shortest_path_costs(self, graph: Graph, source: Any) -> Dict[Any, Any]:
        """
        Compute only the cost map for all reachable vertices from source.
        """
        return self.solve(graph, [source], ()).distances

    def shortest_paths(
        self, graph: Graph, source: Any
    ) -> tuple[Dict[Any, Any], Dict[Any, Any]]:
        """
        Single-source variant that also returns predecessors.

        With no targets the search never exits early, so the distance map
        covers everything reachable from source. The predecessor map omits
        the source itself because it has no parent.
        """
        dist, prev, _ = self.solve(graph, [source], ())
        return dist, prev
