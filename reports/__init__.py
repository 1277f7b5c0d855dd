"""
Reports package.

Public API:
- DriverDistance
- get_driver_rank_report, get_driver_rank_report_by_city, sort_rank_report
- rank_report_to_frame (pandas)
"""
from .export import rank_report_to_frame
from .rank import (
    DriverDistance,
    get_driver_rank_report,
    get_driver_rank_report_by_city,
    sort_rank_report,
)

__all__ = [
    "DriverDistance",
    "get_driver_rank_report",
    "get_driver_rank_report_by_city",
    "sort_rank_report",
    "rank_report_to_frame",
]
