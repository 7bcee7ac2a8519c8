"""
Service area service

Area edits are sent to the remote areas API when one is configured
(LAUNDRY_API_BASE_URL). Any failure there falls back to editing the local
in-memory list, so the admin page always succeeds.
"""
import logging
from typing import Dict, List, Any, Optional

import requests

from core.errors import AreaNotFoundError, ValidationError
from database.repository import AreaRepository
from models.delivery import ServiceArea

logger = logging.getLogger(__name__)

API_TIMEOUT = 5  # seconds
EDITABLE_FIELDS = ("name", "name_ar", "city", "city_ar", "delivery_fee",
                   "min_order_amount", "is_active", "estimated_delivery_time")


class AreaApiClient:
    """Thin client for the remote ``/api/areas`` endpoints.

    Every call returns ``None`` (or ``False``) instead of raising, so callers
    can fall back to local data.
    """

    def __init__(self, base_url: str, timeout: float = API_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        url = f"{self.base_url}{path}"
        try:
            logger.info("%s %s", method, url)
            response = requests.request(method, url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            if response.status_code == 204 or not response.content:
                return {}
            return response.json()

        except requests.exceptions.Timeout:
            logger.error("Areas API timeout for %s %s", method, url)
            return None

        except requests.exceptions.RequestException as e:
            logger.error("Areas API error: %s", e)
            return None

        except ValueError as e:
            logger.error("Areas API returned invalid JSON: %s", e)
            return None

    def list_areas(self) -> Optional[List[Dict[str, Any]]]:
        data = self._request("GET", "/api/areas")
        return data if isinstance(data, list) else None

    def create_area(self, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        result = self._request("POST", "/api/areas", data)
        return result if isinstance(result, dict) and "id" in result else None

    def update_area(self, area_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        result = self._request("PUT", f"/api/areas/{area_id}", data)
        return result if isinstance(result, dict) and "id" in result else None

    def delete_area(self, area_id: int) -> bool:
        return self._request("DELETE", f"/api/areas/{area_id}") is not None


def clean_area_form(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    cleaned = {key: data[key] for key in EDITABLE_FIELDS if key in data}
    try:
        for key in ("delivery_fee", "min_order_amount"):
            if key in cleaned:
                cleaned[key] = float(cleaned[key])
        if "estimated_delivery_time" in cleaned:
            cleaned["estimated_delivery_time"] = int(cleaned["estimated_delivery_time"])
    except (TypeError, ValueError):
        raise ValidationError("Fees, minimum order and delivery time must be numbers")
    if "is_active" in cleaned and isinstance(cleaned["is_active"], str):
        cleaned["is_active"] = cleaned["is_active"].lower() in ("1", "true", "on", "yes")
    if not partial and not cleaned.get("name"):
        raise ValidationError("Area name is required")
    return cleaned


def parse_remote_area(row: Any, area_id: Optional[int] = None) -> Optional[ServiceArea]:
    # Remote rows are untrusted; a row that cannot become a ServiceArea yields None
    try:
        return ServiceArea.from_dict(int(row["id"]) if area_id is None else area_id, row)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Areas API returned a malformed area %r: %s", row, e)
        return None


class AreaService:

    def __init__(self, area_repository: AreaRepository, api_client: Optional[AreaApiClient] = None):
        self.area_repo = area_repository
        self.api_client = api_client

    def get_areas(self, active_only: bool = False) -> List[ServiceArea]:
        if self.api_client is not None:
            remote = self.api_client.list_areas()
            parsed = [parse_remote_area(row) for row in remote] if remote is not None else None
            if parsed is not None and None not in parsed:
                for area in parsed:
                    self.area_repo.put(area)
            else:
                logger.warning("Using local service areas")
        return self.area_repo.find_all(active_only)

    def get_area(self, area_id: int) -> ServiceArea:
        area = self.area_repo.get_by_id(area_id)
        if area is None:
            raise AreaNotFoundError(area_id)
        return area

    def create_area(self, data: Dict[str, Any]) -> ServiceArea:
        cleaned = clean_area_form(data)
        if self.api_client is not None:
            remote = self.api_client.create_area(cleaned)
            area = parse_remote_area(remote) if remote is not None else None
            if area is not None:
                return self.area_repo.put(area)
            logger.warning("Saving new service area locally")
        area = self.area_repo.add(cleaned)
        logger.info("Added service area %s (%s)", area.id, area.name)
        return area

    def update_area(self, area_id: int, data: Dict[str, Any]) -> ServiceArea:
        cleaned = clean_area_form(data, partial=True)
        if self.api_client is not None:
            merged = dict(self.get_area(area_id).to_dict(), **cleaned)
            remote = self.api_client.update_area(area_id, merged)
            area = parse_remote_area(remote, area_id) if remote is not None else None
            if area is not None:
                return self.area_repo.put(area)
            logger.warning("Updating service area %s locally", area_id)
        updated = self.area_repo.update(area_id, cleaned)
        if updated is None:
            raise AreaNotFoundError(area_id)
        return updated

    def toggle_area(self, area_id: int) -> ServiceArea:
        area = self.get_area(area_id)
        return self.update_area(area_id, {"is_active": not area.is_active})

    def delete_area(self, area_id: int) -> None:
        if self.api_client is not None and not self.api_client.delete_area(area_id):
            logger.warning("Deleting service area %s locally", area_id)
        if not self.area_repo.delete(area_id):
            raise AreaNotFoundError(area_id)
        logger.info("Deleted service area %s", area_id)
