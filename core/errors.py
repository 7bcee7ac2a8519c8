"""
Domain errors raised by the laundry services
"""


class LaundryError(Exception):
    """Base class for every error the services raise on purpose."""
    pass


class ValidationError(LaundryError):
    """Raised when submitted data cannot be turned into a valid record."""
    pass


class AuthenticationError(LaundryError):
    """Raised when credentials do not match a known user."""
    pass


class NotFoundError(LaundryError):
    """Raised when a record id is not present in its holder."""
    entity = "Record"

    def __init__(self, record_id):
        self.record_id = record_id
        super().__init__(f"{self.entity} {record_id} not found")


class OrderNotFoundError(NotFoundError):
    entity = "Order"


class RiderNotFoundError(NotFoundError):
    entity = "Rider"


class AreaNotFoundError(NotFoundError):
    entity = "Service area"


class PricingItemNotFoundError(NotFoundError):
    entity = "Pricing item"


class UserNotFoundError(NotFoundError):
    entity = "User"
