from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from tqdm import tqdm

from .datagraph import DataGraph
from .errors import InvalidEdge

logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ("#", "%")


def parse_edge_line(line: str) -> Optional[Tuple[int, int]]:
    """Parse one ``u v`` line; blank and comment lines give None."""
    line = line.strip()
    if not line or line.startswith(COMMENT_PREFIXES):
        return None
    parts = line.split()
    if len(parts) != 2:
        raise ValueError(f"expected 2 tokens, got {len(parts)}")
    for token in parts:
        # plain ASCII digits only
        if not (token.isascii() and token.isdigit()):
            raise ValueError(f"node id {token!r} is not a non-negative integer")
    return int(parts[0]), int(parts[1])


class EdgeReader:
    """Iterates parsed edges, counting the lines it had to skip.

    Lines may be ``str`` or raw ``bytes``; bytes are decoded as UTF-8 with an
    optional BOM. Undecodable input raises :class:`InvalidEdge` whether or not
    ``strict`` is set.
    """

    def __init__(self, lines: Iterable[Union[str, bytes]], strict: bool = False) -> None:
        self.lines = lines
        self.strict = strict
        self.skipped = 0

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for line_number, line in enumerate(self.lines, start=1):
            if isinstance(line, bytes):
                try:
                    line = line.decode("utf-8-sig")
                except UnicodeDecodeError as exc:
                    raise InvalidEdge(line.rstrip(), f"not valid UTF-8 ({exc.reason})", line_number) from exc
            try:
                parsed = parse_edge_line(line)
            except ValueError as exc:
                if self.strict:
                    raise InvalidEdge(line.rstrip(), str(exc), line_number) from exc
                self.skipped += 1
                logger.warning("skipping line %d: %s", line_number, exc)
                continue
            if parsed is not None:
                yield parsed


def iter_edges(lines: Iterable[Union[str, bytes]], strict: bool = False) -> Iterator[Tuple[int, int]]:
    return iter(EdgeReader(lines, strict))


def load_graph(path: Union[str, Path], strict: bool = False, progress: bool = False) -> DataGraph:
    path = Path(path)
    with path.open("rb") as infile:
        lines = tqdm(infile, desc="Loading graph", unit="line", disable=not progress)
        reader = EdgeReader(lines, strict)
        graph = DataGraph.from_edges(reader)
    logger.info(
        "loaded %s: %d nodes, %d edges, %d skipped line(s)",
        path, graph.num_nodes, graph.num_edges, reader.skipped,
    )
    return graph
