# ============================================
# Author: trip-analyzer maintainers
# File: src/trip_analyzer/cli.py
# Description:
#   Command-line entry point: ingest one trip CSV, print both
#   rankings, optionally write them as CSV reports.
# ============================================

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from trip_analyzer.config import DEFAULT_MIN_COLUMNS, DEFAULT_TOP_K, IngestConfig
from trip_analyzer.pipeline import run_trip_analysis


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Rank the busiest pickup zones and zone/hour slots of a trip CSV.",
    )
    parser.add_argument("csv_path", type=Path, help="Trip CSV to ingest.")
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP_K,
        help="Number of entries per ranking, negative for all (default: 10).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Also write top_zones.csv and top_busy_slots.csv here.",
    )
    parser.add_argument(
        "--min-columns",
        type=int,
        default=DEFAULT_MIN_COLUMNS,
        help="Rows with fewer columns are skipped (default: 4).",
    )
    parser.add_argument(
        "--uppercase-zones",
        action="store_true",
        help="Upper-case zone identifiers before counting.",
    )
    parser.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Show a progress bar while reading the file.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every skipped row.")
    args = parser.parse_args(argv)

    try:
        args.config = IngestConfig(
            min_columns=args.min_columns,
            uppercase_zones=args.uppercase_zones,
        )
    except ValueError as e:
        parser.error(f"invalid configuration: {e}")
    return args


def format_report(analyzer, k: int) -> List[str]:
    lines = ["Top zones:"]
    zones = analyzer.top_zones(k)
    if not zones:
        lines.append("  (none)")
    for rank, z in enumerate(zones, start=1):
        lines.append(f"  {rank:>3}. {z.zone}: {z.count}")

    lines.append("")
    lines.append("Top busy slots:")
    slots = analyzer.top_busy_slots(k)
    if not slots:
        lines.append("  (none)")
    for rank, s in enumerate(slots, start=1):
        lines.append(f"  {rank:>3}. {s.zone} @ {s.hour:02d}:00: {s.count}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    analyzer = run_trip_analysis(
        args.csv_path,
        k=args.top,
        output_dir=args.output_dir,
        config=args.config,
        show_progress=args.progress,
    )

    print()
    for line in format_report(analyzer, args.top):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
