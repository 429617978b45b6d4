# ============================================
# Author: trip-analyzer maintainers
# File: src/trip_analyzer/analyzer.py
# Description:
#   TripAnalyzer facade: one aggregator, ingest_file() to feed it,
#   top_zones() / top_busy_slots() to query it.
# ============================================

from __future__ import annotations

from typing import List, Optional

from trip_analyzer.config import DEFAULT_TOP_K, IngestConfig
from trip_analyzer.models import IngestStats, SlotCount, ZoneCount
from trip_analyzer.pipeline.aggregate_trips import TripAggregator
from trip_analyzer.pipeline.ingest_trips import PathLike, ingest_file


class TripAnalyzer:
    """
    Public entry point: ingest trip CSVs, then ask for rankings.

        analyzer = TripAnalyzer()
        analyzer.ingest_file("trips.csv")
        analyzer.top_zones(10)
        analyzer.top_busy_slots(10)

    Not thread-safe: do not query while an ingestion is running.
    """

    def __init__(self, config: Optional[IngestConfig] = None) -> None:
        self.config = config
        self.aggregator = TripAggregator()
        self.last_stats: Optional[IngestStats] = None

    def ingest_file(self, csv_path: PathLike, show_progress: bool = False) -> IngestStats:
        self.last_stats = ingest_file(
            csv_path,
            self.aggregator,
            config=self.config,
            show_progress=show_progress,
        )
        return self.last_stats

    def top_zones(self, k: int = DEFAULT_TOP_K) -> List[ZoneCount]:
        return self.aggregator.top_zones(k)

    def top_busy_slots(self, k: int = DEFAULT_TOP_K) -> List[SlotCount]:
        return self.aggregator.top_busy_slots(k)
