# ============================================
# Author: trip-analyzer maintainers
# File: src/trip_analyzer/pipeline/ingest_trips.py
# Description:
#   Read one trip CSV line by line and feed valid rows into a
#   TripAggregator.
#
#   - plain split on the delimiter, NO quoting support
#     (a comma inside a field breaks the row: known limitation)
#   - optional header, detected once on the first row that has
#     enough columns: first token not starting with a digit -> header
#   - pickup hour read from "YYYY-MM-DD HH:MM" (text after the first
#     space, up to the next ':')
#
#   Dirty data never stops the run: bad rows are skipped, a file that
#   cannot be opened is simply treated as empty.
# ============================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from tqdm import tqdm

from trip_analyzer.config import DEFAULT_CONFIG, HOURS_PER_DAY, IngestConfig
from trip_analyzer.models import IngestStats
from trip_analyzer.pipeline.aggregate_trips import TripAggregator

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


# ------------------ field helpers ------------------


def split_row(line: str, delimiter: str = ",") -> List[str]:
    return line.split(delimiter)


def clean_field(value: str) -> str:
    """Trim spaces, tabs and stray carriage returns."""
    return value.strip()


def looks_like_header(first_token: str) -> bool:
    token = clean_field(first_token)
    return not token or not ("0" <= token[0] <= "9")


def normalize_zone(zone: str, uppercase: bool = False) -> str:
    return zone.upper() if uppercase else zone


def parse_pickup_hour(timestamp: str) -> Optional[int]:
    """
    Extract the hour from a "YYYY-MM-DD HH:MM" style timestamp.

    The hour is whatever sits between the first space and the next ':'
    and must be one or two ASCII digits. Returns None when the shape
    does not match. The range check is left to the caller.
    """
    _, space, time_part = timestamp.partition(" ")
    if not space:
        return None

    hour_text, colon, _ = time_part.strip().partition(":")
    if not colon:
        return None
    if not 1 <= len(hour_text) <= 2:
        return None
    if not (hour_text.isascii() and hour_text.isdigit()):
        return None
    return int(hour_text)


# ------------------ ingestion ------------------


def ingest_file(
    path: PathLike,
    aggregator: TripAggregator,
    config: Optional[IngestConfig] = None,
    show_progress: bool = False,
) -> IngestStats:
    """
    Ingest a single trip CSV into `aggregator`.

    Never raises for bad input: rows that fail validation are counted in
    the returned IngestStats and skipped, and a file that cannot be
    opened (missing, unreadable, invalid path) leaves the aggregator
    untouched. Lines end at newline only, so a stray carriage return inside a
    field is trimmed with the field instead of breaking the row.
    """
    cfg = config or DEFAULT_CONFIG
    csv_path = Path(path)
    stats = IngestStats(path=csv_path)

    def skip(line_no: int, reason: str) -> None:
        stats.skipped[reason] += 1
        logger.debug("%s:%d skipped (%s)", csv_path.name, line_no, reason)

    try:
        handle = open(csv_path, "r", encoding="utf-8", errors="replace", newline="\n")
    except (OSError, ValueError) as e:
        logger.debug("Cannot open %s: %s", csv_path, e)
        return stats

    stats.opened = True
    header_checked = False

    with handle:
        lines = tqdm(
            handle,
            desc=f"Ingesting {csv_path.name}",
            unit="line",
            disable=not show_progress,
        )
        try:
            for line_no, raw_line in enumerate(lines, start=1):
                stats.lines_read += 1

                line = raw_line.rstrip("\r\n")
                if not line:
                    stats.skipped["empty_line"] += 1
                    continue

                tokens = split_row(line, cfg.delimiter)
                if len(tokens) < cfg.min_columns:
                    skip(line_no, "short_row")
                    continue

                if not header_checked:
                    header_checked = True
                    if looks_like_header(tokens[0]):
                        stats.header_skipped = True
                        logger.debug("%s:%d header row skipped", csv_path.name, line_no)
                        continue

                zone = clean_field(tokens[cfg.zone_index])
                if not zone:
                    skip(line_no, "empty_zone")
                    continue

                timestamp = clean_field(tokens[cfg.timestamp_index])
                if not timestamp:
                    skip(line_no, "empty_timestamp")
                    continue

                hour = parse_pickup_hour(timestamp)
                if hour is None:
                    skip(line_no, "bad_timestamp")
                    continue
                if not 0 <= hour < HOURS_PER_DAY:
                    skip(line_no, "hour_out_of_range")
                    continue

                aggregator.record(normalize_zone(zone, cfg.uppercase_zones), hour)
                stats.rows_accepted += 1
        except OSError as e:
            # keep what was aggregated so far, drop the rest of the file
            stats.skipped["read_error"] += 1
            logger.debug("Read error on %s after %d lines: %s", csv_path, stats.lines_read, e)
        finally:
            lines.close()

    logger.debug(
        "%s: %d lines, %d accepted, %d rejected",
        csv_path.name,
        stats.lines_read,
        stats.rows_accepted,
        stats.rows_rejected,
    )
    return stats
