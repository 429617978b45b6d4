from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

HEADER = "TripID,PickupZoneID,DropoffZoneID,PickupDateTime,DistanceKm,FareAmount"


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    def _write(lines: Iterable[str], name: str = "trips.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_csv(write_csv) -> Path:
    return write_csv(
        [
            HEADER,
            "1,A,Z,2024-01-01 08:15,3.2,12.50",
            "2,B,Z,2024-01-01 08:30,1.1,7.00",
            "3,A,Z,2024-01-01 09:00,5.0,18.25",
        ]
    )
