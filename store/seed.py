"""
Purpose: Seed an InMemoryEntityStore from CSV files.
What it does:
Reads cities.csv, customers.csv, restaurants.csv and drivers.csv from a
directory (pandas), resolves every row's city by name and saves the records.

Deliveries are never seeded: they are only created by order assignment.
"""

from __future__ import annotations

import os
from typing import Dict

import pandas as pd

from drivers.models import Driver
from orders.models import City, Customer, Restaurant
from .memory import InMemoryEntityStore


def _read(directory: str, filename: str) -> pd.DataFrame:
    # keep_default_na=False so that an empty address stays "" instead of NaN
    return pd.read_csv(os.path.join(directory, filename), dtype=str, keep_default_na=False)


def _resolve_city(cities: Dict[str, City], name: str, filename: str) -> City:
    if name not in cities:
        raise ValueError(f"{filename} references unknown city '{name}'")
    return cities[name]


def load_store_from_csv(directory: str, store: InMemoryEntityStore = None) -> InMemoryEntityStore:
    store = store if store is not None else InMemoryEntityStore()

    cities: Dict[str, City] = {}
    for _, row in _read(directory, "cities.csv").iterrows():
        cities[row["name"]] = store.save(City(name=row["name"]))

    customers = []
    for _, row in _read(directory, "customers.csv").iterrows():
        customers.append(
            Customer(
                name=row["name"],
                city=_resolve_city(cities, row["city"], "customers.csv"),
                address=row["address"],
            )
        )
    store.save_all(customers)

    restaurants = []
    for _, row in _read(directory, "restaurants.csv").iterrows():
        restaurants.append(
            Restaurant(
                name=row["name"],
                city=_resolve_city(cities, row["city"], "restaurants.csv"),
                description=row["description"],
            )
        )
    store.save_all(restaurants)

    drivers = []
    for _, row in _read(directory, "drivers.csv").iterrows():
        drivers.append(Driver.new(row["name"], _resolve_city(cities, row["city"], "drivers.csv")))
    store.save_all(drivers)

    return store
