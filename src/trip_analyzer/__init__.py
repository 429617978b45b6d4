"""
Trip Analyzer package.

Ingests trip-record CSV files and ranks:
- the busiest pickup zones
- the busiest (zone, pickup hour) slots

Submodules:
- pipeline: ingestion, aggregation and CSV reports
- analyzer: the TripAnalyzer facade
- cli: command-line entry point
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from trip_analyzer.analyzer import TripAnalyzer
from trip_analyzer.config import IngestConfig
from trip_analyzer.models import IngestStats, SlotCount, ZoneCount

try:
    __version__ = version("trip-analyzer")
except PackageNotFoundError:  # pragma: no cover - package not installed
    __version__ = "0.0.0"

__all__ = [
    "TripAnalyzer",
    "IngestConfig",
    "IngestStats",
    "SlotCount",
    "ZoneCount",
]
