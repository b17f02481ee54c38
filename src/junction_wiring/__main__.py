"""Command line entry point for the junction wiring engine."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .pipeline import CircuitBuilderConfig
from .runner import solve_file
from .summary import AXES


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Wire junction boxes together along the shortest cables.")
    parser.add_argument("input", type=Path, help="Path to a file of x,y,z rows (text, CSV or Excel)")
    parser.add_argument("--output", type=Path, help="Optional CSV or Excel path for per-point circuit labels")
    parser.add_argument(
        "--edge-limit",
        type=int,
        default=int(os.getenv("JUNCTION_EDGE_LIMIT", "1000")),
        help="Number of shortest edges wired before sizing circuits (default: 1000)",
    )
    parser.add_argument(
        "--largest",
        type=_positive_int,
        default=3,
        help="How many of the largest circuit sizes to multiply (default: 3)",
    )
    parser.add_argument(
        "--axis",
        choices=AXES,
        default="x",
        help="Coordinate multiplied across the final connecting edge (default: x)",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars",
    )
    parser.add_argument("--verbose", action="store_true", help="Print progress for each step")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = CircuitBuilderConfig(
        edge_limit=args.edge_limit,
        largest_count=args.largest,
        combine_axis=args.axis,
        use_tqdm=False if args.disable_tqdm else None,
        verbose=args.verbose,
    )

    report = solve_file(args.input, args.output, config)
    if report is None:
        return 1
    if report.bounded is not None:
        print(f"Part 1: {report.bounded.product}")
    if report.connected.endpoints is not None:
        print(f"Part 2: {report.connected.value}")
    return 0 if report.bounded is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
