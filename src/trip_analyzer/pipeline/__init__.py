# ============================================
# Author: trip-analyzer maintainers
# File: src/trip_analyzer/pipeline/__init__.py
# Description:
#   Public orchestration function for the trip_analyzer pipeline.
#
#   Exposes:
#     - run_trip_analysis()
# ============================================

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from trip_analyzer.config import DEFAULT_TOP_K, IngestConfig

from .ingest_trips import PathLike
from .report_trips import write_reports

if TYPE_CHECKING:
    from trip_analyzer.analyzer import TripAnalyzer


def run_trip_analysis(
    csv_path: PathLike,
    k: int = DEFAULT_TOP_K,
    output_dir: Optional[Union[str, Path]] = None,
    config: Optional[IngestConfig] = None,
    show_progress: bool = False,
) -> "TripAnalyzer":
    """
    Ingest one trip CSV and, if `output_dir` is given, write the two
    ranking reports there.

    Returns:
        TripAnalyzer: the analyzer holding the aggregated tables, so the
        caller can run further top_zones() / top_busy_slots() queries.
    """
    from trip_analyzer.analyzer import TripAnalyzer

    analyzer = TripAnalyzer(config=config)

    print(f"=== Ingesting {csv_path} ===")
    stats = analyzer.ingest_file(csv_path, show_progress=show_progress)

    if not stats.opened:
        print(f"[trip_analyzer] ⚠ Could not open {csv_path}, nothing ingested.")
    else:
        print(
            f"[trip_analyzer] {stats.rows_accepted} rows accepted, "
            f"{stats.rows_rejected} rejected ({stats.lines_read} lines read)."
        )

    if output_dir is not None:
        write_reports(analyzer, output_dir, k=k)

    return analyzer


__all__ = ["run_trip_analysis"]
