from __future__ import annotations

from typing import Iterable

import pandas as pd

from .rank import DriverDistance

COLUMNS = ["driver_id", "driver_name", "city", "total_distance"]


def rank_report_to_frame(entries: Iterable[DriverDistance]) -> pd.DataFrame:
    """
    Tabulates a rank report, longest total distance first.
    """
    rows = [
        {
            "driver_id": entry.driver.id,
            "driver_name": entry.driver.name,
            "city": entry.driver.city.name,
            "total_distance": entry.total_distance,
        }
        for entry in entries
    ]
    frame = pd.DataFrame(rows, columns=COLUMNS)
    # mergesort is stable, so equal totals keep report order
    return frame.sort_values("total_distance", ascending=False, kind="mergesort").reset_index(drop=True)
