from .datagraph import DataGraph
from .errors import EmptyGraph, GraphError, InvalidEdge, UnknownNode
from .loader import load_graph
from .similarity import SimilarNode, SimilarPair, jaccard, most_similar_pair, top_k_similar
from .traversal import PathLengthSummary, average_shortest_path_length, bfs

__all__ = [
    "DataGraph",
    "EmptyGraph",
    "GraphError",
    "InvalidEdge",
    "PathLengthSummary",
    "SimilarNode",
    "SimilarPair",
    "UnknownNode",
    "average_shortest_path_length",
    "bfs",
    "jaccard",
    "load_graph",
    "most_similar_pair",
    "top_k_similar",
]
