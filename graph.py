"""
Weighted graph abstraction for the shortest-path engine.

Vertices are any hashable values. Edges are directed: u -> v with a
non-negative weight. Neighbours are computed on demand, so a graph never has
to materialise its adjacency.
"""

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Sequence, Tuple, TypeVar

V = TypeVar("V", bound=Hashable)
W = TypeVar("W")


class Graph(ABC, Generic[V, W]):
    """Directed, weighted graph queried one vertex at a time."""

    @abstractmethod
    def outgoing(self, vertex: V) -> Sequence[Tuple[V, W]]:
        """
        One-step neighbours of vertex and the weight of each edge.

        Returns a list of (neighbour, weight) pairs in no particular order.
        A vertex with no neighbours (or one the graph does not know about)
        yields an empty list.
        """
        raise NotImplementedError
