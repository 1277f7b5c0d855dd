"""
Purpose: Orchestrator / decision pipeline (the "glue").
What it does:
Accepts an order (customer, restaurant, delivery time), validates it, picks
the least busy free driver of the restaurant's city and persists the Delivery.

Validate -> Select -> Persist. Any failure aborts before anything is saved.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Tuple

from drivers.selection import find_driver_for_order
from orders.models import Customer, Delivery, Restaurant
from .distance import RandomDistanceProvider
from .exceptions import CustomerNotFoundError, DifferentCityError, NoAvailableDriverError
from .locks import KeyedLockManager
from .policy import AssignmentPolicy, default_assignment_policy

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Coordinates the assignment of an order to a Driver.
    """
    def __init__(
        self,
        store,
        distance_provider: Optional[Callable[..., float]] = None,
        lock_manager: Optional[KeyedLockManager] = None,
        policy: Optional[AssignmentPolicy] = None,
    ):
        self.store = store
        self.policy = policy or default_assignment_policy()
        self.distance_provider = distance_provider or RandomDistanceProvider(
            max_distance=self.policy.max_distance,
            seed=self.policy.random_seed,
        )
        self.lock_manager = lock_manager or KeyedLockManager()

    def create_order_and_assign_driver(
        self, customer: Optional[Customer], restaurant: Restaurant, delivery_time: datetime
    ) -> Delivery:
        """
        Creates a Delivery for the order and assigns it the least busy driver
        available in the restaurant's city at `delivery_time`.

        Raises CustomerNotFoundError, DifferentCityError or NoAvailableDriverError.
        """
        # 1. The customer must be known to the store. Only the name is checked.
        if customer is None or customer.name is None or self.store.find_customer_by_name(customer.name) is None:
            logger.warning("Rejected order: customer %r does not exist", getattr(customer, "name", None))
            raise CustomerNotFoundError()

        if restaurant is None or restaurant.city is None:
            raise ValueError("restaurant and its city are required to create an order")

        # 2. Same city, compared by name.
        customer_city_name = customer.city.name if customer.city is not None else None
        if customer_city_name != restaurant.city.name:
            logger.warning(
                "Rejected order: customer %s lives in %s but restaurant %s is in %s",
                customer.name, customer_city_name, restaurant.name, restaurant.city.name,
            )
            raise DifferentCityError()

        # 3 + 4. Availability is read and the delivery saved under one lock per
        #        (city, time) slot, so a driver can't be handed the same slot twice.
        with self.lock_manager.lock(self._slot_key(restaurant, delivery_time)):
            driver = find_driver_for_order(self.store, restaurant.city, delivery_time)
            if driver is None:
                logger.warning(
                    "Rejected order: no available driver in %s at %s",
                    restaurant.city.name, delivery_time.isoformat(),
                )
                raise NoAvailableDriverError()

            delivery = Delivery.new(
                driver=driver,
                restaurant=restaurant,
                customer=customer,
                delivery_time=delivery_time,
                distance=self.distance_provider(restaurant, customer),
            )
            self.store.save(delivery)

        logger.info(
            "Delivery %s assigned to driver %s in %s (distance %.2f)",
            delivery.id, driver.name, restaurant.city.name, delivery.distance,
        )
        return delivery

    @staticmethod
    def _slot_key(restaurant: Restaurant, delivery_time: datetime) -> Tuple[str, datetime]:
        # datetime hashing agrees with ==, so equal instants in different timezones share a slot
        return (restaurant.city.name, delivery_time)
