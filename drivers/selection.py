"""
Purpose: Business rules for choosing the driver of an order.
What it does:
Filters the drivers of a city down to the ones free at the requested delivery
time, then picks the least busy of them (fewest deliveries ever assigned).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from orders.models import City
from .models import Driver

logger = logging.getLogger(__name__)


def find_available_drivers(store, city: City, delivery_time: datetime) -> List[Driver]:
    """
    Returns the drivers based in `city` that have no delivery scheduled at
    exactly `delivery_time`. An empty list means nobody is free.
    """
    if city is None:
        raise ValueError("city is required to look up available drivers")

    available = []

    for driver in store.find_drivers_by_city(city):
        if store.find_delivery_by_driver_and_time(driver, delivery_time) is not None:
            continue

        available.append(driver)

    return available


def count_driver_deliveries(store, driver: Driver) -> int:
    """
    Lifetime busyness of a driver, regardless of city or time.
    """
    return len(store.find_deliveries_by_driver(driver))


def select_least_busy_driver(store, drivers: Iterable[Driver]) -> Optional[Driver]:
    """
    Picks the candidate with the fewest lifetime deliveries. `drivers` may be
    any iterable; it is read once.

    Ties keep the earliest candidate, so the result follows the order in which
    the store enumerated the drivers.
    """
    candidates = list(drivers)
    if not candidates:
        return None

    if len(candidates) == 1:
        return candidates[0]

    least_busy = None
    least_busy_count = None

    for driver in candidates:
        delivery_count = count_driver_deliveries(store, driver)
        logger.debug("Driver %s has %d deliveries", driver.name, delivery_count)

        if least_busy_count is None or delivery_count < least_busy_count:
            least_busy = driver
            least_busy_count = delivery_count

    return least_busy


def find_driver_for_order(store, city: City, delivery_time: datetime) -> Optional[Driver]:
    available = find_available_drivers(store, city, delivery_time)
    return select_least_busy_driver(store, available)
