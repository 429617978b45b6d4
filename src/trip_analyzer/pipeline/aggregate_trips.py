# ============================================
# Author: trip-analyzer maintainers
# File: src/trip_analyzer/pipeline/aggregate_trips.py
# Description:
#   In-memory aggregation tables for ingested trips:
#
#     1) zone totals
#        - pickup zone -> number of trips
#
#     2) hourly slots
#        - pickup zone -> 24 counters, one per pickup hour
#
#   plus the two ranking queries built on top of them:
#     - top_zones()       count desc, zone asc
#     - top_busy_slots()  count desc, zone asc, hour asc
#
#   A negative k means "no limit".
# ============================================

from __future__ import annotations

from typing import Dict, List

from trip_analyzer.config import DEFAULT_TOP_K, HOURS_PER_DAY
from trip_analyzer.models import SlotCount, ZoneCount


def _truncate(rows: list, k: int) -> list:
    if 0 <= k < len(rows):
        return rows[:k]
    return rows


class TripAggregator:
    """
    Owns the zone totals and the per-zone hourly vectors.

    Both tables only grow: record() is the single mutation point and it
    always touches both, so for every zone the total equals the sum of
    its hourly vector.
    """

    def __init__(self) -> None:
        self._zone_totals: Dict[str, int] = {}
        self._hourly_slots: Dict[str, List[int]] = {}

    def record(self, zone: str, hour: int) -> None:
        if not 0 <= hour < HOURS_PER_DAY:
            raise ValueError(f"Hour out of range: {hour}")

        self._zone_totals[zone] = self._zone_totals.get(zone, 0) + 1
        hours = self._hourly_slots.setdefault(zone, [0] * HOURS_PER_DAY)
        hours[hour] += 1

    # ------------------ read-only accessors ------------------

    def __len__(self) -> int:
        return len(self._zone_totals)

    @property
    def zone_count(self) -> int:
        return len(self._zone_totals)

    @property
    def total_trips(self) -> int:
        return sum(self._zone_totals.values())

    def zone_total(self, zone: str) -> int:
        return self._zone_totals.get(zone, 0)

    def hourly_counts(self, zone: str) -> List[int]:
        """Copy of the 24-slot vector for `zone` (all zeros if unseen)."""
        return list(self._hourly_slots.get(zone, [0] * HOURS_PER_DAY))

    # ------------------ ranking queries ------------------

    def top_zones(self, k: int = DEFAULT_TOP_K) -> List[ZoneCount]:
        rows = [ZoneCount(zone, count) for zone, count in self._zone_totals.items()]
        rows.sort(key=lambda r: (-r.count, r.zone))
        return _truncate(rows, k)

    def top_busy_slots(self, k: int = DEFAULT_TOP_K) -> List[SlotCount]:
        rows = [
            SlotCount(zone, hour, count)
            for zone, hours in self._hourly_slots.items()
            for hour, count in enumerate(hours)
            if count > 0
        ]
        rows.sort(key=lambda r: (-r.count, r.zone, r.hour))
        return _truncate(rows, k)
