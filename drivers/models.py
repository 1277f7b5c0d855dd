"""
Purpose: Core data models for the drivers domain.
What it does:
Defines the structure of a Driver. Busyness is not stored here: it is derived
from the deliveries saved against the driver (see drivers.selection).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from orders.models import City


@dataclass
class Driver:
    """
    A driver based in exactly one city.
    """
    name: str
    city: City
    id: Optional[int] = None

    @classmethod
    def new(cls, name: str, city: City) -> Driver:
        if city is None:
            raise ValueError(f"Driver {name} must belong to a city.")
        return cls(name=name, city=city)
