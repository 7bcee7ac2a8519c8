"""
Core package for the laundry booking platform
Contains the domain errors; the service wiring lives in core.platform
"""

from .errors import (
    LaundryError, ValidationError, AuthenticationError, NotFoundError,
    OrderNotFoundError, RiderNotFoundError, AreaNotFoundError,
    PricingItemNotFoundError, UserNotFoundError
)

__all__ = [
    'LaundryError', 'ValidationError', 'AuthenticationError', 'NotFoundError',
    'OrderNotFoundError', 'RiderNotFoundError', 'AreaNotFoundError',
    'PricingItemNotFoundError', 'UserNotFoundError'
]
