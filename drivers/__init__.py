"""
Drivers domain package.

Public API:
- Domain model: Driver
- Selection: find_available_drivers, select_least_busy_driver, find_driver_for_order
"""
from .models import Driver
from .selection import (
    count_driver_deliveries,
    find_available_drivers,
    find_driver_for_order,
    select_least_busy_driver,
)

__all__ = [
    "Driver",
    "count_driver_deliveries",
    "find_available_drivers",
    "find_driver_for_order",
    "select_least_busy_driver",
]
