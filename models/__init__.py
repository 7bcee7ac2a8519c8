"""
Models package for the laundry booking platform
Contains data models and type definitions
"""

from .catalog import ServiceItem, PricingItem
from .delivery import Rider, RiderStatus, ServiceArea
from .order import Order, OrderItem, OrderStatus, StatusChange
from .user import User, UserRole

__all__ = [
    'ServiceItem', 'PricingItem',
    'Rider', 'RiderStatus', 'ServiceArea',
    'Order', 'OrderItem', 'OrderStatus', 'StatusChange',
    'User', 'UserRole'
]
