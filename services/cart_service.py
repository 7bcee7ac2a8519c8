"""
Cart service - handles the booking cart kept in the user's session
"""
from typing import Dict, List, Any

from core.errors import ValidationError
from database.repository import CatalogRepository
from models.cart import CartLine, CartSummary
from .order_service import DEFAULT_DELIVERY_FEE

# The session cart maps str(item_id) -> quantity
Cart = Dict[str, int]


class CartService:
    # Cart arithmetic; the cart dict itself lives in the session

    def __init__(self, catalog_repository: CatalogRepository, delivery_fee: float = DEFAULT_DELIVERY_FEE):
        self.catalog_repo = catalog_repository
        self.delivery_fee = delivery_fee

    def add_item(self, cart: Cart, item_id: int) -> Cart:
        # Add one piece of an active service item
        item = self.catalog_repo.get_pricing_item(item_id)
        if item is None or not item.is_active:
            raise ValidationError(f"Unknown service item: {item_id}")
        cart = dict(cart)
        key = str(item_id)
        cart[key] = cart.get(key, 0) + 1
        return cart

    def remove_item(self, cart: Cart, item_id: int) -> Cart:
        # Take one piece off; the line disappears at zero
        cart = dict(cart)
        key = str(item_id)
        if key not in cart:
            return cart
        if cart[key] > 1:
            cart[key] -= 1
        else:
            del cart[key]
        return cart

    def get_cart_details(self, cart: Cart) -> CartSummary:
        # Price the cart against the active price list, dropping withdrawn items
        prices = {item.id: item for item in self.catalog_repo.pricing_items(active_only=True)}
        lines: List[CartLine] = []
        for key, quantity in cart.items():
            item = prices.get(int(key))
            if item is None or quantity < 1:
                continue
            lines.append(CartLine(
                item_id=item.id,
                name=item.name,
                name_ar=item.name_ar,
                icon=item.icon,
                price=item.price,
                quantity=quantity
            ))

        if not lines:
            return CartSummary()

        subtotal = sum(line.line_total for line in lines)
        return CartSummary(
            lines=lines,
            subtotal=subtotal,
            delivery_fee=self.delivery_fee,
            total=subtotal + self.delivery_fee
        )

    def to_order_items(self, cart: Cart) -> List[Dict[str, Any]]:
        return [line.to_order_item() for line in self.get_cart_details(cart).lines]
