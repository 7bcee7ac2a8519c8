"""
In-memory database holding every domain list for the process lifetime
"""
import copy
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, Generator, List, Optional, Any

from models.catalog import ServiceItem, PricingItem
from models.delivery import Rider, ServiceArea
from models.order import Order, OrderItem
from models.user import User
from . import fixtures


class InMemoryState:
    # Every domain list, alive only as long as the process

    def __init__(self):
        self.users: List[User] = []
        self.passwords: Dict[str, str] = {}
        self.service_items: List[ServiceItem] = []
        self.pricing_items: List[PricingItem] = []
        self.orders: List[Order] = []
        self.riders: List[Rider] = []
        self.areas: List[ServiceArea] = []


class DatabaseConnection:
    # Owns the in-memory state and serialises access to it

    def __init__(self, seed: bool = True):
        # Lock is re-entrant so a service can call another service inside a transaction
        self._lock = threading.RLock()
        self.state = InMemoryState()
        if seed:
            self.init_database()

    def init_database(self):
        # Reset every list to the fixture data
        with self.get_connection() as state:
            state.users = [User.from_dict(row) for row in fixtures.USERS]
            state.passwords = dict(fixtures.PASSWORDS)
            state.service_items = [ServiceItem(**row) for row in fixtures.SERVICE_ITEMS]
            state.pricing_items = [PricingItem(**row, is_active=True) for row in fixtures.SERVICE_ITEMS]
            state.orders = [_order_from_fixture(row) for row in fixtures.ORDERS]
            state.riders = [Rider(**row) for row in fixtures.RIDERS]
            state.areas = [ServiceArea(**row) for row in fixtures.SERVICE_AREAS]

    @contextmanager
    def get_connection(self) -> Generator[InMemoryState, None, None]:
        # Hold the lock for the whole read/modify/write of a repository call
        with self._lock:
            yield self.state


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _order_from_fixture(row: Dict[str, Any]) -> Order:
    row = copy.deepcopy(row)
    row["items"] = [OrderItem(**item) for item in row["items"]]
    for key in ("pickup_time", "delivery_time", "created_at", "updated_at"):
        row[key] = _parse_time(row[key])
    return Order(**row)
