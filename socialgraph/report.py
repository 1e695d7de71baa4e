from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .datagraph import DataGraph
from .similarity import SimilarNode, SimilarPair
from .traversal import PathLengthSummary


def format_degree_histogram(distribution: Dict[int, int], width: int = 50) -> List[str]:
    """One ``*`` bar per degree, scaled so the most common degree is ``width`` wide."""
    if not distribution:
        return []
    max_count = max(distribution.values())
    lines = []
    for degree in sorted(distribution):
        bar = max(1, width * distribution[degree] // max_count)
        lines.append(f"{degree:>3} friend(s): {'*' * bar}")
    return lines


def format_report(
    graph: DataGraph,
    source: int,
    path_length: Optional[PathLengthSummary],
    target: int,
    ranking: Optional[Sequence[SimilarNode]],
    pair: Optional[SimilarPair],
) -> str:
    """Render the analyses; a None section is reported as unavailable."""
    out = [f"Number of users (nodes): {graph.num_nodes}"]
    if path_length is None:
        out.append(f"User {source} is not in the graph; no path length computed")
    else:
        out.append(f"User {source} has {graph.degree(source)} direct friends")
        if path_length.defined:
            out.append(
                f"On average, User {source} is {path_length.average:.2f} connections away "
                f"from the {path_length.reachable} users it can reach"
            )
        else:
            out.append(f"User {source} cannot reach any other user")

    out.append("")
    out.append("Friendship degree distribution - number of users with X friends")
    out.extend(format_degree_histogram(graph.degree_distribution()))

    out.append("")
    if ranking is None:
        out.append(f"User {target} is not in the graph; no similarity ranking computed")
    else:
        out.append(f"Top {len(ranking)} users most similar to User {target} (based on Jaccard similarity):")
        for item in ranking:
            out.append(f"User {item.node:>4} has similarity {item.score:.3f}")

    if pair is not None:
        out.append("")
        out.append(
            f"The most similar pair of users in the entire network is User {pair.first} "
            f"& User {pair.second} with similarity {pair.score:.3f}"
        )
    return "\n".join(out)
