"""
Purpose: In-memory Entity Store.
What it does:
- Owns the records for every entity kind:
   - cities, customers, restaurants, drivers, deliveries

Provides the query operations the dispatch and report layers depend on:
   - find_customer_by_name / find_restaurant_by_name / find_city_by_name
   - find_all_* enumerations
   - find_drivers_by_city
   - find_delivery_by_driver_and_time
   - find_deliveries_by_driver / find_deliveries_by_city_and_driver
   - save / save_all

Enumeration order is insertion order. Cities are matched by name, not by object
identity, so two City records with the same name are treated as the same city.

Rule: Store owns records and lookups, dispatch owns decisions.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Iterator, List, Optional

from drivers.models import Driver
from orders.models import City, Customer, Delivery, Restaurant


def _same_city(left: Optional[City], right: Optional[City]) -> bool:
    if left is None or right is None:
        return False
    return left.name == right.name


@dataclass
class InMemoryEntityStore:
    """
    Thread-safe in-process store. One dict per entity kind, keyed by id.
    """
    _cities: Dict[int, City] = field(default_factory=dict)
    _customers: Dict[int, Customer] = field(default_factory=dict)
    _restaurants: Dict[int, Restaurant] = field(default_factory=dict)
    _drivers: Dict[int, Driver] = field(default_factory=dict)
    _deliveries: Dict[int, Delivery] = field(default_factory=dict)

    # one id sequence per entity kind
    _sequences: Dict[type, Iterator[int]] = field(default_factory=dict)
    _lock: Any = field(default_factory=threading.RLock, repr=False)

    # --- Writes ---

    def save(self, entity):
        """
        Persist a single entity, assigning an id if it has none.
        Saving an entity that already has an id replaces the stored record.
        """
        table = self._table_for(entity)
        with self._lock:
            if entity.id is None:
                sequence = self._sequences.setdefault(type(entity), itertools.count(1))
                entity.id = next(sequence)
            table[entity.id] = entity
        return entity

    def save_all(self, entities: Iterable) -> List:
        with self._lock:
            return [self.save(entity) for entity in entities]

    # --- Cities ---

    def find_city_by_name(self, name: str) -> Optional[City]:
        with self._lock:
            return next((city for city in self._cities.values() if city.name == name), None)

    def find_all_cities(self) -> List[City]:
        with self._lock:
            return list(self._cities.values())

    # --- Customers ---

    def find_customer_by_name(self, name: str) -> Optional[Customer]:
        with self._lock:
            return next((customer for customer in self._customers.values() if customer.name == name), None)

    def find_all_customers(self) -> List[Customer]:
        with self._lock:
            return list(self._customers.values())

    # --- Restaurants ---

    def find_restaurant_by_name(self, name: str) -> Optional[Restaurant]:
        with self._lock:
            return next((restaurant for restaurant in self._restaurants.values() if restaurant.name == name), None)

    def find_all_restaurants(self) -> List[Restaurant]:
        with self._lock:
            return list(self._restaurants.values())

    # --- Drivers ---

    def find_drivers_by_city(self, city: City) -> List[Driver]:
        with self._lock:
            return [driver for driver in self._drivers.values() if _same_city(driver.city, city)]

    def find_all_drivers(self) -> List[Driver]:
        with self._lock:
            return list(self._drivers.values())

    # --- Deliveries ---

    def find_delivery_by_driver_and_time(self, driver: Driver, delivery_time: datetime) -> Optional[Delivery]:
        with self._lock:
            return next(
                (
                    delivery
                    for delivery in self._deliveries.values()
                    if delivery.driver.id == driver.id and delivery.delivery_time == delivery_time
                ),
                None,
            )

    def find_deliveries_by_driver(self, driver: Driver) -> List[Delivery]:
        with self._lock:
            return [delivery for delivery in self._deliveries.values() if delivery.driver.id == driver.id]

    def find_deliveries_by_city_and_driver(self, city: City, driver: Driver) -> List[Delivery]:
        """
        Deliveries of `driver` whose restaurant is located in `city`.
        """
        with self._lock:
            return [
                delivery
                for delivery in self._deliveries.values()
                if delivery.driver.id == driver.id and _same_city(delivery.restaurant.city, city)
            ]

    def find_all_deliveries(self) -> List[Delivery]:
        with self._lock:
            return list(self._deliveries.values())

    # --- Internal helpers ---

    def _table_for(self, entity) -> Dict[int, Any]:
        if isinstance(entity, Delivery):
            return self._deliveries
        if isinstance(entity, Driver):
            return self._drivers
        if isinstance(entity, Customer):
            return self._customers
        if isinstance(entity, Restaurant):
            return self._restaurants
        if isinstance(entity, City):
            return self._cities
        raise TypeError(f"Cannot store object of type {type(entity).__name__}")
