# ============================================
# Author: trip-analyzer maintainers
# File: src/trip_analyzer/models.py
# Description:
#   Value types returned by the pipeline:
#     - ZoneCount / SlotCount: ranking rows (immutable snapshots)
#     - IngestStats: per-file ingestion summary
# ============================================

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

# skip reasons that do not stand for a malformed row
NON_ROW_REASONS = ("empty_line", "read_error")


@dataclass(frozen=True)
class ZoneCount:
    zone: str
    count: int


@dataclass(frozen=True)
class SlotCount:
    zone: str
    hour: int  # 0-23
    count: int


@dataclass
class IngestStats:
    """
    Summary of one ingest_file() call.

    `skipped` maps a reason ("short_row", "bad_timestamp", ...) to the
    number of lines dropped for it. Empty lines are tracked there too,
    under "empty_line", even though they are not malformed, and a read
    failure that cut the file short under "read_error". Neither counts
    as a rejected row.
    """

    path: Path
    opened: bool = False
    lines_read: int = 0
    rows_accepted: int = 0
    header_skipped: bool = False
    skipped: Counter = field(default_factory=Counter)

    @property
    def rows_rejected(self) -> int:
        return sum(
            n for reason, n in self.skipped.items() if reason not in NON_ROW_REASONS
        )
