class DispatchError(Exception):
    """Base class for every reason an order cannot be assigned."""
    default_message = "Order could not be dispatched"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class CustomerNotFoundError(DispatchError):
    """Raised when the ordering customer is missing or unknown to the store."""
    default_message = "Given customer doesn't exist"


class DifferentCityError(DispatchError):
    """Raised when the customer and the restaurant are in different cities."""
    default_message = "Given customer doesn't live in the same city of the restaurant"


class NoAvailableDriverError(DispatchError):
    """Raised when every driver of the restaurant's city is busy at the requested time."""
    default_message = "There is no available driver in the restaurant's city at the requested time"
