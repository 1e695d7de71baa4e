from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict

from .datagraph import DataGraph
from .errors import EmptyGraph, UnknownNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathLengthSummary:
    source: int
    average: float
    reachable: int

    @property
    def defined(self) -> bool:
        return self.reachable > 0


def _check_source(graph: DataGraph, source: int, operation: str) -> None:
    if graph.is_empty():
        raise EmptyGraph(operation)
    if source not in graph:
        raise UnknownNode(source)


def bfs(graph: DataGraph, source: int) -> Dict[int, int]:
    """Hop distance from ``source`` to every node in its component.

    Unreachable nodes are left out of the result.
    """
    _check_source(graph, source, "bfs")
    distance: Dict[int, int] = {source: 0}
    frontier: deque[int] = deque([source])
    while frontier:
        u = frontier.popleft()
        next_dist = distance[u] + 1
        for v in graph.neighbors(u):
            if v not in distance:
                distance[v] = next_dist
                frontier.append(v)
    return distance


def average_shortest_path_length(graph: DataGraph, source: int) -> PathLengthSummary:
    """Mean BFS distance from ``source`` to the other nodes it can reach.

    The source itself is not counted. When nothing else is reachable the
    summary has ``reachable == 0`` and ``average == 0.0``.
    """
    distance = bfs(graph, source)
    reachable = len(distance) - 1
    if reachable == 0:
        logger.warning("node %d reaches no other node; average path length undefined", source)
        return PathLengthSummary(source=source, average=0.0, reachable=0)
    total = sum(distance.values())
    return PathLengthSummary(source=source, average=total / reachable, reachable=reachable)
