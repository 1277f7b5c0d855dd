#Expose the high-level pipeline pieces:
#Dispatcher orchestrator (the "one call" entry point)
#Typed errors for every rejected order
#Policy + distance provider so callers can tune or inject them

from .dispatcher import Dispatcher
from .distance import RandomDistanceProvider
from .exceptions import (
    CustomerNotFoundError,
    DifferentCityError,
    DispatchError,
    NoAvailableDriverError,
)
from .locks import KeyedLockManager
from .policy import AssignmentPolicy, default_assignment_policy

__all__ = [
    "Dispatcher",
    "RandomDistanceProvider",
    "KeyedLockManager",
    "AssignmentPolicy",
    "default_assignment_policy",
    "DispatchError",
    "CustomerNotFoundError",
    "DifferentCityError",
    "NoAvailableDriverError",
]
