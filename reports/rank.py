"""
Purpose: Driver rank reports.
What it does:
Sums, per driver, the distance of every delivery they made and returns one
DriverDistance per driver (drivers without deliveries report 0).

- get_driver_rank_report: every driver, every delivery
- get_driver_rank_report_by_city: drivers based in the city, deliveries whose
  restaurant is in the city

Totals are truncated to whole distance units. The reports are not ordered;
use sort_rank_report when a ranking is needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from drivers.models import Driver
from orders.models import City, Delivery


@dataclass(frozen=True)
class DriverDistance:
    driver: Driver
    total_distance: int


def _total_distance(deliveries: Iterable[Delivery]) -> int:
    total = 0.0
    for delivery in deliveries:
        total += delivery.distance
    # int() truncates toward zero, distances are never negative
    return int(total)


def get_driver_rank_report(store) -> List[DriverDistance]:
    return [
        DriverDistance(driver=driver, total_distance=_total_distance(store.find_deliveries_by_driver(driver)))
        for driver in store.find_all_drivers()
    ]


def get_driver_rank_report_by_city(store, city: City) -> List[DriverDistance]:
    if city is None:
        raise ValueError("city is required for a per-city rank report")

    return [
        DriverDistance(
            driver=driver,
            total_distance=_total_distance(store.find_deliveries_by_city_and_driver(city, driver)),
        )
        for driver in store.find_drivers_by_city(city)
    ]


def sort_rank_report(entries: Iterable[DriverDistance], descending: bool = True) -> List[DriverDistance]:
    """
    Orders a rank report by total distance. Equal totals keep their input order.
    """
    return sorted(entries, key=lambda entry: entry.total_distance, reverse=descending)
