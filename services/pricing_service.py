"""
Pricing service - the admin-editable price list
"""
import logging
from typing import Dict, List, Any

from core.errors import PricingItemNotFoundError, ValidationError
from database.repository import CatalogRepository
from models.catalog import PricingItem

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "name_ar", "price", "description", "description_ar", "icon", "is_active")


def clean_pricing_form(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    # Keep known fields and coerce the form strings
    cleaned = {key: data[key] for key in EDITABLE_FIELDS if key in data}
    if "price" in cleaned:
        try:
            cleaned["price"] = float(cleaned["price"])
        except (TypeError, ValueError):
            raise ValidationError("Price must be a number")
        if cleaned["price"] < 0:
            raise ValidationError("Price cannot be negative")
    if "is_active" in cleaned:
        cleaned["is_active"] = _as_bool(cleaned["is_active"])
    if not partial:
        if not cleaned.get("name"):
            raise ValidationError("Name is required")
        cleaned.setdefault("name_ar", "")
        cleaned.setdefault("price", 0.0)
        cleaned.setdefault("icon", "🧺")
    return cleaned


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "on", "yes")
    return bool(value)


class PricingService:

    def __init__(self, catalog_repository: CatalogRepository):
        self.catalog_repo = catalog_repository

    def get_pricing_items(self, active_only: bool = False) -> List[PricingItem]:
        return self.catalog_repo.pricing_items(active_only)

    def get_pricing_item(self, item_id: int) -> PricingItem:
        item = self.catalog_repo.get_pricing_item(item_id)
        if item is None:
            raise PricingItemNotFoundError(item_id)
        return item

    def add_pricing_item(self, data: Dict[str, Any]) -> PricingItem:
        item = self.catalog_repo.add_pricing_item(clean_pricing_form(data))
        logger.info("Added pricing item %s (%s)", item.id, item.name)
        return item

    def update_pricing_item(self, item_id: int, data: Dict[str, Any]) -> PricingItem:
        updated = self.catalog_repo.update_pricing_item(item_id, clean_pricing_form(data, partial=True))
        if updated is None:
            raise PricingItemNotFoundError(item_id)
        logger.info("Updated pricing item %s", item_id)
        return updated

    def toggle_pricing_item(self, item_id: int) -> PricingItem:
        item = self.get_pricing_item(item_id)
        return self.update_pricing_item(item_id, {"is_active": not item.is_active})

    def delete_pricing_item(self, item_id: int) -> None:
        if not self.catalog_repo.delete_pricing_item(item_id):
            raise PricingItemNotFoundError(item_id)
        logger.info("Deleted pricing item %s", item_id)
