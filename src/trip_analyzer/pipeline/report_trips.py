# ============================================
# Author: trip-analyzer maintainers
# File: src/trip_analyzer/pipeline/report_trips.py
# Description:
#   Turn ranked results into DataFrames and write them as CSV:
#
#     1) top_zones.csv
#        - zone, trip_count
#
#     2) top_busy_slots.csv
#        - zone, hour, trip_count
#
#   Row order is the ranking order, no re-sorting here.
# ============================================

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, Union

import pandas as pd

from trip_analyzer.config import DEFAULT_TOP_K
from trip_analyzer.models import SlotCount, ZoneCount

if TYPE_CHECKING:
    from trip_analyzer.analyzer import TripAnalyzer

ZONE_COLUMNS = ["zone", "trip_count"]
SLOT_COLUMNS = ["zone", "hour", "trip_count"]


def zones_to_frame(zones: Iterable[ZoneCount]) -> pd.DataFrame:
    rows = [{"zone": z.zone, "trip_count": z.count} for z in zones]
    return pd.DataFrame(rows, columns=ZONE_COLUMNS)


def slots_to_frame(slots: Iterable[SlotCount]) -> pd.DataFrame:
    rows = [{"zone": s.zone, "hour": s.hour, "trip_count": s.count} for s in slots]
    return pd.DataFrame(rows, columns=SLOT_COLUMNS)


def write_reports(
    analyzer: "TripAnalyzer",
    output_dir: Union[str, Path],
    k: int = DEFAULT_TOP_K,
) -> Dict[str, Path]:
    """
    Write both rankings of `analyzer` into `output_dir` (created if needed).

    Returns a dict with the path of each written file.
    """
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    zones_path = out_dir / "top_zones.csv"
    slots_path = out_dir / "top_busy_slots.csv"

    print(f"[report_trips] Writing {zones_path}")
    zones_to_frame(analyzer.top_zones(k)).to_csv(zones_path, index=False)

    print(f"[report_trips] Writing {slots_path}")
    slots_to_frame(analyzer.top_busy_slots(k)).to_csv(slots_path, index=False)

    return {
        "top_zones": zones_path,
        "top_busy_slots": slots_path,
    }
