"""
Order service - handles order creation, updates and listing
"""
import logging
from datetime import datetime, timedelta, date
from typing import Dict, List, Any, Optional

from core.errors import OrderNotFoundError, ValidationError
from database.repository import OrderRepository, CatalogRepository
from models.catalog import ServiceItem
from models.order import Order, OrderItem, OrderStatus, StatusChange, PAYMENT_METHODS
from models.user import User

logger = logging.getLogger(__name__)

DEFAULT_DELIVERY_FEE = 10
DEFAULT_VENDOR_ID = 3


def calculate_subtotal(items: List[OrderItem]) -> float:
    return sum(item.price * item.quantity for item in items)


def calculate_loyalty_points(total: float) -> int:
    # One point per 10 SAR spent
    return int(total // 10)


class OrderService:
    # Business logic for the order list and the service catalog

    def __init__(self, order_repository: OrderRepository, catalog_repository: CatalogRepository,
                 delivery_fee: float = DEFAULT_DELIVERY_FEE, default_vendor_id: int = DEFAULT_VENDOR_ID):
        self.order_repo = order_repository
        self.catalog_repo = catalog_repository
        self.delivery_fee = delivery_fee
        self.default_vendor_id = default_vendor_id

    # === Listing ===
    def get_all_orders(self) -> List[Order]:
        return self.order_repo.find_all()

    def get_customer_orders(self, customer_id: int) -> List[Order]:
        return self.order_repo.find_by_customer(customer_id)

    def get_vendor_orders(self, vendor_id: int) -> List[Order]:
        return self.order_repo.find_by_vendor(vendor_id)

    def get_orders_for_user(self, user: User) -> List[Order]:
        # Each role sees a different slice of the order list
        if user.role == "customer":
            return self.get_customer_orders(user.id)
        if user.role == "vendor":
            return self.get_vendor_orders(user.id)
        return self.get_all_orders()

    def get_order(self, order_id: int) -> Order:
        order = self.order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def get_service_items(self) -> List[ServiceItem]:
        return self.catalog_repo.service_items()

    # === Mutations ===
    def create_order(self, items: List[Dict[str, Any]], payment_method: str, user: User,
                     address: Optional[str] = None) -> Order:
        """Create a pending order from cart lines and put it at the front of the list.

        Each cart line needs ``id``, ``name``, ``quantity`` and ``price``.
        """
        if not items:
            raise ValidationError("Cart is empty")
        if not payment_method:
            raise ValidationError("Payment method is required")

        order_items = []
        for raw in items:
            quantity = int(raw.get("quantity", 0))
            if quantity < 1:
                raise ValidationError(f"Invalid quantity for {raw.get('name', 'item')}")
            order_items.append(OrderItem(
                id=int(raw["id"]),
                name=str(raw["name"]),
                quantity=quantity,
                price=float(raw["price"])
            ))

        subtotal = calculate_subtotal(order_items)
        total = subtotal + self.delivery_fee
        now = datetime.now()

        def build(order_id: int) -> Order:
            return Order(
                id=order_id,
                customer_id=user.id,
                customer_name=user.name or "Customer",
                customer_phone=user.phone or "",
                vendor_id=self.default_vendor_id,
                address=address if address is not None else (user.address or ""),
                items=order_items,
                subtotal=subtotal,
                delivery_fee=self.delivery_fee,
                discount=0,
                total=total,
                status=OrderStatus.PENDING.value,
                payment_method=payment_method,
                pickup_time=now + timedelta(days=1),
                delivery_time=now + timedelta(days=2),
                created_at=now,
                updated_at=now,
                loyalty_points=calculate_loyalty_points(total),
                status_history=[StatusChange(OrderStatus.PENDING.value, now)]
            )

        order = self.order_repo.create(build)
        logger.info("Created order %s for customer %s, total %s", order.id, user.id, total)
        return order

    def update_order(self, order_id: int, patch: Dict[str, Any]) -> Order:
        # Merge the patch and stamp updated_at
        patch = dict(patch)
        patch["updated_at"] = datetime.now()
        updated = self.order_repo.update(order_id, patch)
        if updated is None:
            logger.error("Update order error: order %s not found", order_id)
            raise OrderNotFoundError(order_id)
        return updated

    def update_status(self, order_id: int, status: str) -> Order:
        # Any known status may follow any other
        if not OrderStatus.is_known(status):
            raise ValidationError(f"Unknown order status: {status}")

        def change(order: Order) -> Dict[str, Any]:
            now = datetime.now()
            history = list(order.status_history) + [StatusChange(status, now)]
            return {"status": status, "status_history": history, "updated_at": now}

        updated = self.order_repo.modify(order_id, change)
        if updated is None:
            logger.error("Update status error: order %s not found", order_id)
            raise OrderNotFoundError(order_id)
        return updated

    # === Admin order list ===
    def filter_orders(self, orders: List[Order], status: str = "all", query: str = "",
                      start_date: Optional[date] = None, end_date: Optional[date] = None) -> List[Order]:
        filtered = list(orders)

        if status and status != "all":
            filtered = [o for o in filtered if o.status == status]

        if query:
            needle = query.lower()
            filtered = [
                o for o in filtered
                if needle in str(o.id)
                or (o.customer_name and needle in o.customer_name.lower())
                or (o.customer_phone and query in o.customer_phone)
            ]

        if start_date and end_date:
            start = datetime.combine(start_date, datetime.min.time())
            # End date is inclusive of the whole day
            end = datetime.combine(end_date, datetime.max.time())
            filtered = [o for o in filtered if start <= o.created_at <= end]

        filtered.sort(key=lambda o: o.created_at, reverse=True)
        return filtered

    @staticmethod
    def payment_methods() -> List[str]:
        return list(PAYMENT_METHODS)
