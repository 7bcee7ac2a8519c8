"""
Service catalog and pricing data models
"""
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class ServiceItem:
    """Bedding item the laundry cleans, priced per piece"""
    id: int
    name: str
    name_ar: str
    price: float
    description: str = ""
    description_ar: str = ""
    icon: str = "🧺"

    def localized_name(self, language: str) -> str:
        return self.name_ar if language == "ar" and self.name_ar else self.name

    def localized_description(self, language: str) -> str:
        return self.description_ar if language == "ar" and self.description_ar else self.description

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "name_ar": self.name_ar,
            "price": self.price,
            "description": self.description,
            "description_ar": self.description_ar,
            "icon": self.icon
        }


@dataclass
class PricingItem(ServiceItem):
    """Admin-editable price list entry"""
    is_active: bool = True

    def to_service_item(self) -> ServiceItem:
        return ServiceItem(
            id=self.id,
            name=self.name,
            name_ar=self.name_ar,
            price=self.price,
            description=self.description,
            description_ar=self.description_ar,
            icon=self.icon
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["is_active"] = self.is_active
        return data
