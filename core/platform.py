"""
Main LaundryPlatform class - wires repositories and services together
"""
from typing import Optional

from database.connection import DatabaseConnection
from database.repository import (
    UserRepository, CatalogRepository, OrderRepository, RiderRepository, AreaRepository
)
from services.analytics_service import AnalyticsService
from services.area_service import AreaService, AreaApiClient, API_TIMEOUT
from services.auth_service import AuthService
from services.cart_service import CartService
from services.delivery_service import DeliveryService
from services.order_service import OrderService, DEFAULT_DELIVERY_FEE
from services.pricing_service import PricingService


class LaundryPlatform:
    # One instance per process: every service shares the same in-memory database

    def __init__(self, delivery_fee: float = DEFAULT_DELIVERY_FEE,
                 simulated_delay: float = 0.0,
                 api_base_url: Optional[str] = None,
                 api_timeout: float = API_TIMEOUT):
        # In-memory database seeded from fixtures
        self.db_connection = DatabaseConnection()

        # Repository layer
        self.user_repo = UserRepository(self.db_connection)
        self.catalog_repo = CatalogRepository(self.db_connection)
        self.order_repo = OrderRepository(self.db_connection)
        self.rider_repo = RiderRepository(self.db_connection)
        self.area_repo = AreaRepository(self.db_connection)

        # Service layer
        self.auth_service = AuthService(self.user_repo)
        self.order_service = OrderService(self.order_repo, self.catalog_repo, delivery_fee=delivery_fee)
        self.cart_service = CartService(self.catalog_repo, delivery_fee=delivery_fee)
        self.delivery_service = DeliveryService(self.rider_repo, self.order_service,
                                                simulated_delay=simulated_delay)
        self.analytics_service = AnalyticsService(self.order_service)
        self.pricing_service = PricingService(self.catalog_repo)
        api_client = AreaApiClient(api_base_url, api_timeout) if api_base_url else None
        self.area_service = AreaService(self.area_repo, api_client)

    def reset(self):
        # Back to the fixture data, as after a restart
        self.db_connection.init_database()
