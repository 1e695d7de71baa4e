from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, FrozenSet, Iterable, Mapping, Set, Tuple

from .errors import InvalidEdge

logger = logging.getLogger(__name__)

EMPTY: FrozenSet[int] = frozenset()


def _check_vertex(edge: object, vertex: object) -> int:
    # bool is an int subclass but never a node id
    if isinstance(vertex, bool) or not isinstance(vertex, int):
        raise InvalidEdge(edge, f"node id {vertex!r} is not an integer")
    if vertex < 0:
        raise InvalidEdge(edge, f"node id {vertex} is negative")
    return vertex


class DataGraph:
    """Immutable undirected graph stored as adjacency sets keyed by node id."""

    def __init__(self, adjacency: Mapping[int, Iterable[int]]) -> None:
        """Wrap an already symmetric adjacency mapping.

        The mapping is copied into frozensets, so later changes to it do not
        reach the graph. Use :meth:`from_edges` to build from raw pairs.
        """
        self._adj: Dict[int, FrozenSet[int]] = {vid: frozenset(neigh) for vid, neigh in adjacency.items()}
        self._num_edges = sum(len(neigh) for neigh in self._adj.values()) // 2

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]]) -> "DataGraph":
        """Build a graph from ``(u, v)`` pairs.

        Repeated edges (in either orientation) collapse into one. A self-loop
        never becomes an edge, but its endpoint is still recorded as a node
        with degree 0. Raises :class:`InvalidEdge` for anything that is not a
        pair of non-negative integers; nothing is built in that case.
        """
        adj: Dict[int, Set[int]] = {}
        self_loops = 0
        for edge in edges:
            try:
                src, dst = edge
            except (TypeError, ValueError):
                raise InvalidEdge(edge, "expected a (u, v) pair") from None
            src = _check_vertex(edge, src)
            dst = _check_vertex(edge, dst)
            if src == dst:
                adj.setdefault(src, set())
                self_loops += 1
                logger.debug("dropping self-loop on node %d", src)
                continue
            adj.setdefault(src, set()).add(dst)
            adj.setdefault(dst, set()).add(src)
        if self_loops:
            logger.info("ignored %d self-loop(s)", self_loops)
        graph = cls(adj)
        logger.debug("built graph with %d nodes and %d edges", graph.num_nodes, graph.num_edges)
        return graph

    def neighbors(self, vertex: int) -> FrozenSet[int]:
        return self._adj.get(vertex, EMPTY)

    def degree(self, vertex: int) -> int:
        return len(self.neighbors(vertex))

    def degree_distribution(self) -> Dict[int, int]:
        return dict(Counter(len(neigh) for neigh in self._adj.values()))

    def all_node_ids(self) -> FrozenSet[int]:
        return frozenset(self._adj)

    @property
    def num_nodes(self) -> int:
        return len(self._adj)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def is_empty(self) -> bool:
        return not self._adj

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"DataGraph(nodes={self.num_nodes}, edges={self.num_edges})"
