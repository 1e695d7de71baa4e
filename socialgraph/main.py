from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .errors import GraphError
from .loader import load_graph
from .report import format_report
from .similarity import SimilarNode, SimilarPair, most_similar_pair, top_k_similar
from .traversal import PathLengthSummary, average_shortest_path_length

logger = logging.getLogger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Degree, path length and neighborhood similarity of a social graph")
    parser.add_argument("dataset", help="Path to whitespace-separated edge list")
    parser.add_argument("--source", type=int, default=0, help="Node to measure average path length from")
    parser.add_argument("--target", type=int, default=0, help="Node to rank similar nodes against")
    parser.add_argument("-k", "--top-k", type=int, default=5, help="Number of similar nodes to list")
    parser.add_argument("--workers", type=int, default=1, help="Processes used for the global pair scan")
    parser.add_argument("--skip-pair", action="store_true", help="Skip the all-pairs similarity scan")
    parser.add_argument("--strict", action="store_true", help="Fail on malformed lines instead of skipping them")
    parser.add_argument("--progress", action="store_true", help="Show progress bars")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)
    if args.top_k < 0:
        parser.error("--top-k must be non-negative")
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    return args


def _report_failure(section: str, exc: GraphError) -> None:
    logger.error("%s: %s", section, exc)
    print(f"error: {section}: {exc}", file=sys.stderr)


def run(argv: list[str]) -> int:
    """Load the dataset and print the report.

    Returns 1 if the dataset cannot be loaded, or if the path length or the
    similarity ranking failed; the sections that succeeded are still printed.
    """
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    try:
        graph = load_graph(args.dataset, strict=args.strict, progress=args.progress)
    except OSError as exc:
        logger.error("cannot read %s: %s", args.dataset, exc)
        print(f"error: cannot read {args.dataset}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except GraphError as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    status = 0
    path_length: Optional[PathLengthSummary] = None
    try:
        path_length = average_shortest_path_length(graph, args.source)
    except GraphError as exc:
        _report_failure("path length", exc)
        status = 1

    ranking: Optional[List[SimilarNode]] = None
    try:
        ranking = top_k_similar(graph, args.target, args.top_k)
    except GraphError as exc:
        _report_failure("similarity ranking", exc)
        status = 1

    pair: Optional[SimilarPair] = None
    if not args.skip_pair:
        pair = most_similar_pair(graph, workers=args.workers, progress=args.progress)

    print(format_report(graph, args.source, path_length, args.target, ranking, pair))
    return status


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
