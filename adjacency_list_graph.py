"""
Graph with edges stored up front, for inputs that are not grids.

The maze derives its neighbours from the layout on every call; here the
edges are recorded explicitly, which makes small hand-built or random graphs
easy to feed to the engine.
"""

from typing import Dict, Iterable, List, Tuple

from graph import Graph, V, W


class AdjacencyListGraph(Graph[V, W]):
    """
    Edge store keyed by tail vertex: tail -> {head: weight}.
    """

    def __init__(self) -> None:
        self._adj: Dict[V, Dict[V, W]] = {}

    @classmethod
    def from_edges(
        cls, edges: Iterable[Tuple[V, V, W]], undirected: bool = False
    ) -> "AdjacencyListGraph[V, W]":
        """Build a graph from (tail, head, weight) triples."""
        g: AdjacencyListGraph[V, W] = cls()
        for tail, head, weight in edges:
            g.add_edge(tail, head, weight, undirected=undirected)
        return g

    def add_node(self, vertex: V) -> None:
        self._adj.setdefault(vertex, {})

    def add_edge(self, tail: V, head: V, weight: W, undirected: bool = False) -> None:
        """
        Record tail -> head at weight, replacing any earlier weight for that pair.

        With undirected=True the reverse edge is recorded too.
        """
        self._adj.setdefault(tail, {})[head] = weight
        self.add_node(head)
        if undirected:
            self._adj[head][tail] = weight

    def nodes(self) -> Iterable[V]:
        return self._adj.keys()

    def edge_count(self) -> int:
        return sum(len(heads) for heads in self._adj.values())

    def outgoing(self, vertex: V) -> List[Tuple[V, W]]:
        # Fresh list each call; callers may sort or shuffle it.
        return list(self._adj.get(vertex, {}).items())
