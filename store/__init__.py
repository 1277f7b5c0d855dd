"""
Entity store package.

Public API:
- InMemoryEntityStore: the in-process store used by dispatch and reports
- load_store_from_csv: seed a store from the sample CSV files
"""
from .memory import InMemoryEntityStore
from .seed import load_store_from_csv

__all__ = ["InMemoryEntityStore", "load_store_from_csv"]
