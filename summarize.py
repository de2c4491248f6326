#!/usr/bin/env python3
"""
Load the vote datasets and print or export the summaries.

Usage:
    python summarize.py                    # Print legislator and bill summaries
    python summarize.py --data DIR         # Read CSV files from DIR
    python summarize.py --validate         # Check data integrity
    python summarize.py --export OUT_DIR   # Write summary CSV files to OUT_DIR
"""

import sys

from app.container import Container
from app.repositories import LoadError
from etl import export_summaries, validate_snapshot
from settings import DATA_DIR, LOG_LEVEL
from settings.logging import setup_logging

logger = setup_logging(level=LOG_LEVEL, to_file=False, component="cli")


def _option(args: list[str], name: str) -> str | None:
    """Value following a --name flag."""
    if name not in args:
        return None
    idx = args.index(name)
    if idx + 1 >= len(args):
        print(__doc__)
        sys.exit(1)
    return args[idx + 1]


def run_validation(container: Container) -> bool:
    """Print integrity report."""
    result = validate_snapshot(container.records.snapshot)
    stats = result["stats"]

    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)
    print(f"  Legislators:  {stats['legislators']:,}")
    print(f"  Bills:        {stats['bills']:,}")
    print(f"  Votes:        {stats['votes']:,}")
    print(f"  Vote results: {stats['vote_results']:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("=" * 60)
    print("✅ All data valid!" if result["valid"] else "❌ Some issues found.")
    print("=" * 60 + "\n")
    return result["valid"]


def print_summaries(container: Container) -> None:
    print("\nLEGISLATORS")
    print(f"{'ID':>10}  {'Legislator':<45} {'Supported':>9} {'Opposed':>8}")
    for s in container.summary.legislator_summaries():
        print(f"{s.id:>10}  {s.legislator:<45} {s.supported_bills:>9} {s.opposed_bills:>8}")

    print("\nBILLS")
    print(f"{'ID':>10}  {'Bill':<55} {'For':>5} {'Against':>7}  Primary sponsor")
    for s in container.summary.bill_summaries():
        print(f"{s.id:>10}  {s.bill:<55} {s.supporters:>5} {s.opposers:>7}  {s.primary_sponsor}")
    print()


def main():
    args = sys.argv[1:]
    container = Container(_option(args, "--data") or DATA_DIR)

    try:
        container.init()
    except LoadError as e:
        logger.error("Load failed: {}", e)
        sys.exit(2)

    if "--validate" in args:
        sys.exit(0 if run_validation(container) else 1)

    out_dir = _option(args, "--export")
    if out_dir:
        export_summaries(container.summary.legislator_summaries(), container.summary.bill_summaries(), out_dir)
        return

    print_summaries(container)


if __name__ == "__main__":
    main()
