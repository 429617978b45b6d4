# ============================================
# Author: trip-analyzer maintainers
# File: src/trip_analyzer/config.py
# Description:
#   Fixed schema and defaults for trip CSV ingestion.
#
#   Expected column order:
#     TripID, PickupZoneID, DropoffZoneID, PickupDateTime, DistanceKm, FareAmount
#
#   Only PickupZoneID and PickupDateTime are read; everything after
#   PickupDateTime is optional and ignored.
# ============================================

from __future__ import annotations

from dataclasses import dataclass

DELIMITER = ","
ZONE_COLUMN = 1
TIMESTAMP_COLUMN = 3
DEFAULT_MIN_COLUMNS = 4

DEFAULT_TOP_K = 10
HOURS_PER_DAY = 24


@dataclass(frozen=True)
class IngestConfig:
    min_columns: int = DEFAULT_MIN_COLUMNS
    zone_index: int = ZONE_COLUMN
    timestamp_index: int = TIMESTAMP_COLUMN
    delimiter: str = DELIMITER
    uppercase_zones: bool = False

    def __post_init__(self) -> None:
        if self.zone_index < 0 or self.timestamp_index < 0:
            raise ValueError("Column indices must be non-negative.")
        needed = max(self.zone_index, self.timestamp_index) + 1
        if self.min_columns < needed:
            raise ValueError(
                f"min_columns={self.min_columns} does not cover column "
                f"index {needed - 1}."
            )
        if not self.delimiter:
            raise ValueError("Delimiter must be a non-empty string.")


DEFAULT_CONFIG = IngestConfig()
