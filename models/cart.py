"""
Cart related data models
"""
from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass
class CartLine:
    """One service item in the booking cart"""
    item_id: int
    name: str
    name_ar: str
    icon: str
    price: float
    quantity: int

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_order_item(self) -> Dict[str, Any]:
        return {"id": self.item_id, "name": self.name, "quantity": self.quantity, "price": self.price}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "item_id": self.item_id,
            "name": self.name,
            "name_ar": self.name_ar,
            "icon": self.icon,
            "price": self.price,
            "quantity": self.quantity,
            "line_total": self.line_total
        }


@dataclass
class CartSummary:
    """Cart totals"""
    lines: List[CartLine] = field(default_factory=list)
    subtotal: float = 0
    delivery_fee: float = 0
    total: float = 0

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "lines": [line.to_dict() for line in self.lines],
            "total_quantity": self.total_quantity,
            "subtotal": self.subtotal,
            "delivery_fee": self.delivery_fee,
            "total": self.total
        }
