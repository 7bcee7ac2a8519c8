"""
Order related data models
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Dict, Any


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PICKUP = "pickup"
    PROCESSING = "processing"
    READY_FOR_DELIVERY = "readyForDelivery"
    DELIVERY = "delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> List[str]:
        return [status.value for status in cls]

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in cls.values()


# Statuses in which an order still needs work from someone
OPEN_STATUSES = [
    OrderStatus.PENDING.value,
    OrderStatus.CONFIRMED.value,
    OrderStatus.PICKUP.value,
    OrderStatus.PROCESSING.value,
    OrderStatus.READY_FOR_DELIVERY.value,
    OrderStatus.DELIVERY.value,
]

# Statuses in which a rider is physically carrying the order
ON_ROAD_STATUSES = [OrderStatus.PICKUP.value, OrderStatus.DELIVERY.value]

PAYMENT_METHODS = ["cash", "card"]


@dataclass
class OrderItem:
    """Order line item"""
    id: int
    name: str
    quantity: int
    price: float

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price,
            "line_total": self.line_total
        }


@dataclass
class StatusChange:
    status: str
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "timestamp": self.timestamp.isoformat()}


@dataclass
class Order:
    """Order data model"""
    id: int
    customer_id: int
    customer_name: str
    customer_phone: str
    vendor_id: int
    address: str
    items: List[OrderItem]
    subtotal: float
    delivery_fee: float
    discount: float
    total: float
    status: str
    payment_method: str
    pickup_time: datetime
    delivery_time: datetime
    created_at: datetime
    updated_at: datetime
    loyalty_points: int
    rider_id: Optional[str] = None
    status_history: List[StatusChange] = field(default_factory=list)

    @property
    def is_assigned(self) -> bool:
        return bool(self.rider_id)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "customer_name": self.customer_name,
            "customer_phone": self.customer_phone,
            "vendor_id": self.vendor_id,
            "address": self.address,
            "items": [item.to_dict() for item in self.items],
            "subtotal": self.subtotal,
            "delivery_fee": self.delivery_fee,
            "discount": self.discount,
            "total": self.total,
            "status": self.status,
            "payment_method": self.payment_method,
            "pickup_time": self.pickup_time.isoformat(),
            "delivery_time": self.delivery_time.isoformat(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "loyalty_points": self.loyalty_points,
            "rider_id": self.rider_id,
            "status_history": [change.to_dict() for change in self.status_history]
        }
