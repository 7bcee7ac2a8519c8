"""
Repository classes over the in-memory database
"""
import dataclasses
from typing import Callable, List, Optional, Dict, Any, TypeVar

from core.errors import ValidationError
from models.catalog import ServiceItem, PricingItem
from models.delivery import Rider, ServiceArea
from models.order import Order
from models.user import User
from .connection import DatabaseConnection

T = TypeVar("T")


def merge_record(record: T, patch: Dict[str, Any]) -> T:
    # Build a new record with the patch applied; the id never changes
    allowed = {f.name for f in dataclasses.fields(record)} - {"id"}
    unknown = set(patch) - allowed
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(sorted(unknown))}")
    return dataclasses.replace(record, **patch)


class BaseRepository:
    # Shared connection handling for the table repositories

    def __init__(self, db_connection: DatabaseConnection):
        self.db = db_connection

    def transaction(self):
        """Hold the database lock across several repository calls.

        The lock is re-entrant, so repository methods called inside the
        block share it instead of waiting on it.
        """
        return self.db.get_connection()


class UserRepository(BaseRepository):
    # User accounts and their demo passwords

    def find_all(self) -> List[User]:
        with self.db.get_connection() as state:
            return list(state.users)

    def get_by_id(self, user_id: int) -> Optional[User]:
        with self.db.get_connection() as state:
            return next((u for u in state.users if u.id == user_id), None)

    def find_by_email(self, email: str, role: Optional[str] = None) -> Optional[User]:
        email = email.strip().lower()
        with self.db.get_connection() as state:
            for user in state.users:
                if user.email.lower() == email and (role is None or user.role == role):
                    return user
            return None

    def check_password(self, email: str, password: str) -> bool:
        with self.db.get_connection() as state:
            return state.passwords.get(email.strip().lower()) == password

    def create(self, build: Callable[[int], User], password: Optional[str] = None) -> User:
        # Id allocation, the email uniqueness check and the insert share one lock hold
        with self.db.get_connection() as state:
            user = build(max((u.id for u in state.users), default=0) + 1)
            if any(u.email.lower() == user.email.lower() for u in state.users):
                raise ValidationError("An account with this email already exists")
            state.users.append(user)
            if password:
                state.passwords[user.email.lower()] = password
            return user

    def update(self, user_id: int, patch: Dict[str, Any]) -> Optional[User]:
        with self.db.get_connection() as state:
            for index, user in enumerate(state.users):
                if user.id == user_id:
                    state.users[index] = merge_record(user, patch)
                    return state.users[index]
            return None


class CatalogRepository(BaseRepository):
    # Static service catalog plus the admin-editable price list

    def service_items(self) -> List[ServiceItem]:
        with self.db.get_connection() as state:
            return list(state.service_items)

    def pricing_items(self, active_only: bool = False) -> List[PricingItem]:
        with self.db.get_connection() as state:
            return [p for p in state.pricing_items if p.is_active or not active_only]

    def get_pricing_item(self, item_id: int) -> Optional[PricingItem]:
        with self.db.get_connection() as state:
            return next((p for p in state.pricing_items if p.id == item_id), None)

    def add_pricing_item(self, data: Dict[str, Any]) -> PricingItem:
        with self.db.get_connection() as state:
            next_id = max((p.id for p in state.pricing_items), default=0) + 1
            item = PricingItem(id=next_id, **data)
            state.pricing_items.append(item)
            return item

    def update_pricing_item(self, item_id: int, patch: Dict[str, Any]) -> Optional[PricingItem]:
        with self.db.get_connection() as state:
            for index, item in enumerate(state.pricing_items):
                if item.id == item_id:
                    state.pricing_items[index] = merge_record(item, patch)
                    return state.pricing_items[index]
            return None

    def delete_pricing_item(self, item_id: int) -> bool:
        with self.db.get_connection() as state:
            before = len(state.pricing_items)
            state.pricing_items = [p for p in state.pricing_items if p.id != item_id]
            return len(state.pricing_items) < before


class OrderRepository(BaseRepository):
    # Order list, newest orders kept at the front

    def find_all(self) -> List[Order]:
        with self.db.get_connection() as state:
            return list(state.orders)

    def find_by_customer(self, customer_id: int) -> List[Order]:
        with self.db.get_connection() as state:
            return [o for o in state.orders if o.customer_id == customer_id]

    def find_by_vendor(self, vendor_id: int) -> List[Order]:
        with self.db.get_connection() as state:
            return [o for o in state.orders if o.vendor_id == vendor_id]

    def find_by_rider(self, rider_id: str) -> List[Order]:
        with self.db.get_connection() as state:
            return [o for o in state.orders if o.rider_id == rider_id]

    def get_by_id(self, order_id: int) -> Optional[Order]:
        with self.db.get_connection() as state:
            return next((o for o in state.orders if o.id == order_id), None)

    def next_order_id(self) -> int:
        with self.db.get_connection() as state:
            if not state.orders:
                return 1001
            return max(o.id for o in state.orders) + 1

    def create(self, build: Callable[[int], Order]) -> Order:
        # Id allocation and insert happen under one lock hold
        with self.db.get_connection() as state:
            order = build(self.next_order_id())
            state.orders.insert(0, order)
            return order

    def update(self, order_id: int, patch: Dict[str, Any]) -> Optional[Order]:
        with self.db.get_connection() as state:
            for index, order in enumerate(state.orders):
                if order.id == order_id:
                    state.orders[index] = merge_record(order, patch)
                    return state.orders[index]
            return None

    def modify(self, order_id: int, change: Callable[[Order], Dict[str, Any]]) -> Optional[Order]:
        # Read-modify-write of one order; change() sees the current record
        with self.db.get_connection() as state:
            for index, order in enumerate(state.orders):
                if order.id == order_id:
                    state.orders[index] = merge_record(order, change(order))
                    return state.orders[index]
            return None


class RiderRepository(BaseRepository):
    # Delivery riders

    def find_all(self) -> List[Rider]:
        with self.db.get_connection() as state:
            return list(state.riders)

    def find_by_status(self, status: str) -> List[Rider]:
        with self.db.get_connection() as state:
            return [r for r in state.riders if r.status == status]

    def get_by_id(self, rider_id: str) -> Optional[Rider]:
        with self.db.get_connection() as state:
            return next((r for r in state.riders if r.id == rider_id), None)

    def add(self, data: Dict[str, Any]) -> Rider:
        with self.db.get_connection() as state:
            rider = Rider(id=str(len(state.riders) + 1), **data)
            state.riders.append(rider)
            return rider

    def update(self, rider_id: str, patch: Dict[str, Any]) -> Optional[Rider]:
        with self.db.get_connection() as state:
            for index, rider in enumerate(state.riders):
                if rider.id == rider_id:
                    state.riders[index] = merge_record(rider, patch)
                    return state.riders[index]
            return None


class AreaRepository(BaseRepository):
    # Service areas

    def find_all(self, active_only: bool = False) -> List[ServiceArea]:
        with self.db.get_connection() as state:
            return [a for a in state.areas if a.is_active or not active_only]

    def get_by_id(self, area_id: int) -> Optional[ServiceArea]:
        with self.db.get_connection() as state:
            return next((a for a in state.areas if a.id == area_id), None)

    def add(self, data: Dict[str, Any]) -> ServiceArea:
        with self.db.get_connection() as state:
            next_id = max((a.id for a in state.areas), default=0) + 1
            area = ServiceArea.from_dict(next_id, data)
            state.areas.append(area)
            return area

    def put(self, area: ServiceArea) -> ServiceArea:
        # Replace the area with the same id, or append it
        with self.db.get_connection() as state:
            for index, existing in enumerate(state.areas):
                if existing.id == area.id:
                    state.areas[index] = area
                    return area
            state.areas.append(area)
            return area

    def update(self, area_id: int, patch: Dict[str, Any]) -> Optional[ServiceArea]:
        with self.db.get_connection() as state:
            for index, area in enumerate(state.areas):
                if area.id == area_id:
                    state.areas[index] = merge_record(area, patch)
                    return state.areas[index]
            return None

    def delete(self, area_id: int) -> bool:
        with self.db.get_connection() as state:
            before = len(state.areas)
            state.areas = [a for a in state.areas if a.id != area_id]
            return len(state.areas) < before
