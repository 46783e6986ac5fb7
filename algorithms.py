"""
Algorithm interfaces for shortest-path search.

Keeps the search loop separate from the frontier it pops from and from the
domain (maze, adjacency list) that supplies the edges.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, NamedTuple, Optional, Tuple

from graph import Graph, V, W


class SolveResult(NamedTuple):
    """
    Outcome of one engine run.

    distances: settled vertex -> shortest distance from the nearest source.
    predecessors: vertex -> vertex that produced its best-known distance.
    reached_target: first target settled, or None if no target was reachable.
    """

    distances: Dict
    predecessors: Dict
    reached_target: Optional[object]


class Frontier(ABC, Generic[V, W]):
    """
    Open set of discovered but unsettled vertices, keyed by best-known distance.
    """

    @abstractmethod
    def push(self, vertex: V, distance: W) -> None:
        """
        Insert vertex, or overwrite its distance if it is already present.

        No comparison is made against the old distance; callers only push on
        a strict improvement.
        """
        raise NotImplementedError

    @abstractmethod
    def pop_min(self) -> Tuple[V, W]:
        """
        Remove and return the (vertex, distance) entry with the smallest distance.

        Raises IndexError when the frontier is empty.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, vertex: V) -> Optional[W]:
        """Current frontier distance of vertex, or None if it has no entry."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    def __contains__(self, vertex: object) -> bool:
        return self.get(vertex) is not None  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return len(self) > 0


class ShortestPathEngine(ABC):
    """
    Interface for multi-source shortest-path computation with early exit.
    """

    @abstractmethod
    def solve(
        self, graph: Graph, sources: Iterable, targets: Iterable
    ) -> SolveResult:
        """
        Settle vertices outward from all sources at once until a target is settled.

        Returns:
            SolveResult(distances, predecessors, reached_target). When no
            target is reachable, reached_target is None and distances covers
            the whole component reachable from the sources.
        """
        raise NotImplementedError
