from __future__ import annotations

from typing import Any, Optional


class GraphError(Exception):
    """Base class for every failure raised by socialgraph."""


class InvalidEdge(GraphError, ValueError):
    def __init__(self, edge: Any, reason: str, line_number: Optional[int] = None) -> None:
        self.edge = edge
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}invalid edge {edge!r}: {reason}")


class UnknownNode(GraphError, KeyError):
    def __init__(self, node: Any) -> None:
        self.node = node
        super().__init__(node)

    def __str__(self) -> str:
        return f"node {self.node!r} does not appear in any edge"


class EmptyGraph(GraphError):
    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"cannot run {operation} on a graph with no nodes")
