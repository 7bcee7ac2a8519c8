"""
Services package for the laundry booking platform
Contains business logic services
"""

from .analytics_service import AnalyticsService
from .area_service import AreaService, AreaApiClient
from .auth_service import AuthService
from .cart_service import CartService
from .delivery_service import DeliveryService
from .order_service import OrderService
from .pricing_service import PricingService

__all__ = [
    'AnalyticsService', 'AreaService', 'AreaApiClient', 'AuthService',
    'CartService', 'DeliveryService', 'OrderService', 'PricingService'
]
