"""
User related data models
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class UserRole(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"
    VENDOR = "vendor"
    DELIVERY = "delivery"
    LAUNDRY = "laundry"


# Landing page of each role after login
DASHBOARD_PATHS = {
    UserRole.CUSTOMER.value: "/dashboard",
    UserRole.ADMIN.value: "/admin",
    UserRole.VENDOR.value: "/vendor",
    UserRole.DELIVERY.value: "/delivery",
    UserRole.LAUNDRY.value: "/laundry",
}


@dataclass
class User:
    """User data model"""
    id: int
    name: str
    email: str
    phone: str
    role: str
    address: Optional[str] = None
    city: Optional[str] = None
    is_active: bool = True

    @property
    def dashboard_path(self) -> str:
        return DASHBOARD_PATHS.get(self.role, "/dashboard")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "role": self.role,
            "address": self.address,
            "city": self.city,
            "is_active": self.is_active
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            phone=data.get("phone", ""),
            role=data["role"],
            address=data.get("address"),
            city=data.get("city"),
            is_active=data.get("is_active", True)
        )
