"""
Frontier implementations for the Dijkstra engine.

HeapFrontier is the default: a binary heap with lazy invalidation.
ScanFrontier keeps every entry in a dict and scans it for the minimum, which
is O(V) per pop but trivially correct; it is kept for cross-checking.
"""

from typing import Dict, List, Optional, Tuple
import heapq
import itertools

from algorithms import Frontier
from graph import V, W


class HeapFrontier(Frontier[V, W]):
    """
    Binary-heap frontier.

    Decrease-key is a second push; the superseded heap entry stays behind and
    is skipped when it surfaces. Entries carry a monotone sequence number, so
    equal distances pop in push order and vertices are never compared.

    Complexity:
        O(log n) push and amortised pop, n counting stale entries.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[W, int, V]] = []
        self._best: Dict[V, W] = {}
        # vertex -> sequence number of its live heap entry
        self._live: Dict[V, int] = {}
        self._counter = itertools.count()

    def push(self, vertex: V, distance: W) -> None:
        seq = next(self._counter)
        self._best[vertex] = distance
        self._live[vertex] = seq
        heapq.heappush(self._heap, (distance, seq, vertex))

    def pop_min(self) -> Tuple[V, W]:
        while self._heap:
            distance, seq, vertex = heapq.heappop(self._heap)

            # Skip outdated entries
            if self._live.get(vertex) != seq:
                continue

            del self._live[vertex]
            del self._best[vertex]
            return vertex, distance

        raise IndexError("pop from an empty frontier")

    def get(self, vertex: V) -> Optional[W]:
        return self._best.get(vertex)

    def __len__(self) -> int:
        return len(self._live)

    @property
    def stale_entries(self) -> int:
        """Heap entries that have been superseded but not yet popped."""
        return len(self._heap) - len(self._live)


class ScanFrontier(Frontier[V, W]):
    """
    Linear-scan frontier.

    pop_min walks the entries in insertion order and keeps the first strictly
    smaller distance, so ties go to the earliest-inserted vertex. Improving a
    vertex keeps its original position.

    Complexity:
        O(1) push, O(n) pop.
    """

    def __init__(self) -> None:
        self._entries: Dict[V, W] = {}

    def push(self, vertex: V, distance: W) -> None:
        self._entries[vertex] = distance

    def pop_min(self) -> Tuple[V, W]:
        if not self._entries:
            raise IndexError("pop from an empty frontier")

        min_vertex: Optional[V] = None
        min_distance: Optional[W] = None
        for vertex, distance in self._entries.items():
            if min_distance is None or distance < min_distance:
                min_vertex = vertex
                min_distance = distance

        del self._entries[min_vertex]
        return min_vertex, min_distance

    def get(self, vertex: V) -> Optional[W]:
        return self._entries.get(vertex)

    def __len__(self) -> int:
        return len(self._entries)


FRONTIERS = {
    "heap": HeapFrontier,
    "scan": ScanFrontier,
}


def frontier_factory(name: str):
    """Look up a frontier class by its config name ("heap" or "scan")."""
    try:
        return FRONTIERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown frontier '{name}', expected one of {sorted(FRONTIERS)}"
        ) from None
