"""
Purpose: Package entry + stable exports.
What it does:

Marks orders as a Python package and re-exports the public API so other
modules can do:

from orders import City, Customer, Restaurant, Delivery

Should not contain business logic.
"""
from .models import City, Customer, Restaurant, Delivery

__all__ = ["City",
           "Customer",
             "Restaurant",
               "Delivery",
               ]
