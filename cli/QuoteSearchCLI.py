# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: QuoteSearchCLI.py
# -----------------------------------------------------------------------------
"""
Command line entry point.

    quote-search --load --csv quotes.csv
    quote-search --query "Vaya con Dios." --top-k 3

Loads quotes (optionally), then always runs the query and prints the
ranked results. Any pipeline error is logged and the process exits 1.
"""
import argparse
import sys
from typing import List, Optional, Sequence

import settings
from api.AppContainer import AppContainer
from utility.errors import QuoteSearchError
from utility.logging_utils import get_logger, set_global_level
from vectorstore.types import QueryResult

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quote-search",
        description="Embed quotes into a vector store and search them by meaning.",
    )
    parser.add_argument("--load", action="store_true", help="Load the CSV quotes into the vector store first")
    parser.add_argument("--query", default=settings.DEFAULT_QUERY, help="Query to search (default: %(default)r)")
    parser.add_argument("--csv", default=settings.QUOTES_CSV_DEFAULT, help="Quotes CSV used with --load")
    parser.add_argument("--class-name", default=settings.VECTOR_CLASS_NAME, help="Vector class to use")
    parser.add_argument("--top-k", type=int, default=None, help="Maximum number of results")
    parser.add_argument("--workers", type=int, default=None, help="Concurrent embedding requests during --load")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override QVS_LOG_LEVEL",
    )
    return parser


def format_results(query: str, results: Sequence[QueryResult]) -> str:
    lines: List[str] = [f"Results for {query!r}:"]
    if not results:
        lines.append("  (no matches)")
    for i, r in enumerate(results, start=1):
        who = f"{r.character}: " if r.character else ""
        lines.append(f"  {i}. {who}{r.quote_text}  (certainty={r.certainty:.4f}, distance={r.distance:.4f})")
    return "\n".join(lines)


def run(args: argparse.Namespace) -> int:
    if args.top_k is not None and args.top_k < 1:
        raise ValueError("--top-k must be >= 1")
    if args.workers is not None and args.workers < 1:
        raise ValueError("--workers must be >= 1")

    container = AppContainer(
        class_name=args.class_name,
        max_workers=args.workers,
        top_k=args.top_k,
    )

    if args.load:
        result = container.ingest_service.ingest_csv(args.csv)
        result.raise_for_errors()
        logger.info("Loaded %d quote(s) into '%s'", result.written, container.class_name)

    results = container.query_service.query(args.query)
    print(format_results(args.query, results))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        set_global_level(args.log_level)

    try:
        return run(args)
    except (QuoteSearchError, ValueError) as e:
        logger.error("Fatal: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
