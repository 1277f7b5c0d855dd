"""
Purpose: Domain models for the Orders capability.
What it does:
- Defines core data structures:
- City (id, name)
- Customer (id, name, city, address)
- Restaurant (id, name, city, description)
- Delivery (id, driver, restaurant, customer, delivery_time, distance)

Ids start as None and are assigned by the entity store on save.

Rule: No selection logic, no store queries. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from drivers.models import Driver


@dataclass
class City:
    name: str
    id: Optional[int] = None


@dataclass
class Customer:
    """
    A customer is looked up by name, so names are expected to be unique in the store.
    """

    name: Optional[str] = None
    city: Optional[City] = None
    address: str = ""
    id: Optional[int] = None


@dataclass
class Restaurant:
    name: str
    city: City
    description: str = ""
    id: Optional[int] = None


@dataclass
class Delivery:
    """
    Output of order assignment. Written once and never mutated afterwards.
    """

    driver: Driver
    restaurant: Restaurant
    customer: Customer
    delivery_time: datetime

    # stand-in for a routed distance, set at creation time
    distance: float = 0.0
    id: Optional[int] = None

    @staticmethod
    def new(
        driver: Driver,
        restaurant: Restaurant,
        customer: Customer,
        delivery_time: datetime,
        distance: float = 0.0,
    ) -> Delivery:
        return Delivery(
            driver=driver,
            restaurant=restaurant,
            customer=customer,
            delivery_time=delivery_time,
            distance=distance,
        )
