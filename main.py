"""CLI entrypoint for the closed-loop area search."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List

from acreage.core.constants import TOTAL_CELLS
from acreage.core.models import Area
from acreage.engine.generator import LoopGenerator, SearchConfig, SearchResult
from acreage.engine.validator import LoopValidator
from acreage.utils.logger import configure_logging
from acreage.utils.pretty import pretty_print_grid, print_search_stats
from acreage.utils.report import summarize_by_length


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count closed loops of a given area on a 7x7 grid",
    )
    parser.add_argument(
        "--area",
        type=str,
        default="32",
        help="Target enclosed area, a multiple of 0.5 (default 32)",
    )
    parser.add_argument(
        "--max-inner-cells",
        type=int,
        default=TOTAL_CELLS,
        help="Prune loops using more cells off the outer ring (default: no pruning)",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=TOTAL_CELLS,
        help="Prune loops longer than this many segments (default: no pruning)",
    )
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=1_000_000,
        help="Log progress every N visited nodes",
    )
    parser.add_argument("--show", type=int, default=0, metavar="N", help="Print the first N layouts")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print layouts and curves per loop length",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Double-check every layout; exit with status 1 on failure",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def result_payload(result: SearchResult, limit: int) -> Dict[str, Any]:
    grids: List[List[str]] = [grid.to_jsonable() for grid in result.valid_grids[:limit]]
    return {
        "target_area": str(result.target),
        "valid_count": result.valid_cnt,
        "layout_count": result.layout_count,
        "nodes_visited": result.nodes_visited,
        "elapsed_seconds": round(result.elapsed_seconds, 3),
        "layouts": grids,
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    try:
        target = Area.from_value(args.area)
        config = SearchConfig(
            target=target,
            max_inner_cells=args.max_inner_cells,
            max_length=args.max_length,
            progress_interval=args.progress_interval,
        )
    except ValueError as exc:
        parser.error(str(exc))

    result = LoopGenerator(config).generate()

    exit_code = 0
    validation_messages: List[str] = []
    if args.validate:
        validation = LoopValidator(target).validate_result(result)
        validation_messages = validation.messages
        if not validation.ok:
            exit_code = 1

    if args.json:
        payload = result_payload(result, args.show)
        payload["validation"] = validation_messages
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return exit_code

    for index, grid in enumerate(result.valid_grids[: args.show]):
        pretty_print_grid(grid, label=f"Layout {index + 1} (length {grid.segment_count()})")
        print()
    print_search_stats(result)
    if args.summary and result.valid_grids:
        print()
        print(summarize_by_length(result).to_string(index=False))
    for message in validation_messages:
        print(f"  {message}", file=sys.stderr)
    print()
    print(f"Found {result.valid_cnt} valid grids with target area {result.target}")
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
