from __future__ import annotations

import heapq
import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Sequence

from tqdm import tqdm

from .datagraph import DataGraph
from .errors import UnknownNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimilarNode:
    node: int
    score: float


@dataclass(frozen=True)
class SimilarPair:
    first: int
    second: int
    score: float


def neighborhood_jaccard(left: AbstractSet[int], right: AbstractSet[int]) -> float:
    """Jaccard index of two neighbor sets, 0.0 when both are empty."""
    if len(left) > len(right):
        left, right = right, left
    common = sum(1 for v in left if v in right)
    union = len(left) + len(right) - common
    if union == 0:
        return 0.0
    return common / union


def jaccard(graph: DataGraph, a: int, b: int) -> float:
    for vertex in (a, b):
        if vertex not in graph:
            raise UnknownNode(vertex)
    return neighborhood_jaccard(graph.neighbors(a), graph.neighbors(b))


def top_k_similar(graph: DataGraph, target: int, k: int) -> List[SimilarNode]:
    """Rank every other node by neighborhood overlap with ``target``.

    Ordered by score descending, then node id ascending. Scoring every node
    costs O(V * average degree), which dominates on large graphs.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    if graph.is_empty():
        return []
    if target not in graph:
        raise UnknownNode(target)
    if k == 0:
        return []
    target_nbrs = graph.neighbors(target)
    scored = (
        SimilarNode(node=v, score=neighborhood_jaccard(target_nbrs, graph.neighbors(v)))
        for v in graph.all_node_ids()
        if v != target
    )
    return heapq.nsmallest(k, scored, key=lambda s: (-s.score, s.node))


def _beats(candidate: SimilarPair, best: Optional[SimilarPair]) -> bool:
    if best is None:
        return True
    if candidate.score != best.score:
        return candidate.score > best.score
    return (candidate.first, candidate.second) < (best.first, best.second)


def _best_pair_from(graph: DataGraph, anchors: Sequence[int], progress: bool = False) -> Optional[SimilarPair]:
    """Best pair (a, b) with a in ``anchors``, b > a and a shared neighbor."""
    best: Optional[SimilarPair] = None
    for a in tqdm(anchors, desc="Scanning pairs", unit="node", disable=not progress):
        a_nbrs = graph.neighbors(a)
        partners = set()
        for w in a_nbrs:
            partners.update(graph.neighbors(w))
        for b in partners:
            if b <= a:
                continue
            pair = SimilarPair(first=a, second=b, score=neighborhood_jaccard(a_nbrs, graph.neighbors(b)))
            if _beats(pair, best):
                best = pair
    return best


def most_similar_pair(graph: DataGraph, workers: int = 1, progress: bool = False) -> Optional[SimilarPair]:
    """Unordered pair of distinct nodes with the highest Jaccard score.

    Ties go to the lexicographically smallest ``(first, second)``. Only pairs
    that share a neighbor are scored, since every other pair scores 0; if no
    pair shares one the two smallest ids are returned with score 0.0.
    Returns None for graphs with fewer than two nodes. ``workers > 1`` spreads
    the scan over a process pool.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    nodes = sorted(graph.all_node_ids())
    if len(nodes) < 2:
        return None

    if workers == 1:
        best = _best_pair_from(graph, nodes, progress)
    else:
        # interleaved so every chunk mixes low and high ids
        chunks = [nodes[i::workers] for i in range(workers) if nodes[i::workers]]
        logger.debug("scanning %d nodes across %d workers", len(nodes), len(chunks))
        best = None
        with ProcessPoolExecutor(max_workers=len(chunks)) as executor:
            futures = [executor.submit(_best_pair_from, graph, chunk) for chunk in chunks]
            for future in tqdm(as_completed(futures), total=len(futures), desc="Scanning pairs",
                               unit="chunk", disable=not progress):
                partial = future.result()
                if partial is not None and _beats(partial, best):
                    best = partial

    if best is None:
        logger.debug("no two nodes share a neighbor")
        return SimilarPair(first=nodes[0], second=nodes[1], score=0.0)
    return best
