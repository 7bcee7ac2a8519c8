"""
Rider and service area data models
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class RiderStatus(Enum):
    AVAILABLE = "available"
    BUSY = "busy"
    OFFLINE = "offline"


@dataclass
class Rider:
    """Delivery person data model"""
    id: str
    name: str
    email: str
    phone: str
    vehicle: str
    status: str = RiderStatus.AVAILABLE.value
    vendor_id: Optional[int] = None
    avatar: str = "/static/images/default-rider.png"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "vehicle": self.vehicle,
            "status": self.status,
            "vendor_id": self.vendor_id,
            "avatar": self.avatar
        }


@dataclass
class ServiceArea:
    """Geographic zone with its own delivery rules"""
    id: int
    name: str
    name_ar: str
    city: str
    city_ar: str
    delivery_fee: float
    min_order_amount: float
    is_active: bool = True
    estimated_delivery_time: int = 24  # hours

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "name_ar": self.name_ar,
            "city": self.city,
            "city_ar": self.city_ar,
            "delivery_fee": self.delivery_fee,
            "min_order_amount": self.min_order_amount,
            "is_active": self.is_active,
            "estimated_delivery_time": self.estimated_delivery_time
        }

    @classmethod
    def from_dict(cls, area_id: int, data: Dict[str, Any]) -> "ServiceArea":
        return cls(
            id=area_id,
            name=data.get("name", ""),
            name_ar=data.get("name_ar", ""),
            city=data.get("city", ""),
            city_ar=data.get("city_ar", ""),
            delivery_fee=float(data.get("delivery_fee", 0)),
            min_order_amount=float(data.get("min_order_amount", 0)),
            is_active=bool(data.get("is_active", True)),
            estimated_delivery_time=int(data.get("estimated_delivery_time", 24))
        )
