"""
Delivery service - riders, rider assignment and the rider's own workflow
"""
import logging
import time
from datetime import datetime
from typing import Dict, List, Any, Optional

from core.errors import RiderNotFoundError, ValidationError
from database.repository import RiderRepository
from models.delivery import Rider, RiderStatus
from models.order import Order, OrderStatus, ON_ROAD_STATUSES
from models.user import User
from .order_service import OrderService
from .periods import earnings_period_start

logger = logging.getLogger(__name__)

EARNING_PER_DELIVERY = 15  # SAR
TERMINAL_STATUSES = (OrderStatus.DELIVERED.value, OrderStatus.CANCELLED.value)
RIDER_PROFILE_FIELDS = ("name", "phone", "vehicle")
VEHICLES = ("motorcycle", "bike", "car", "van")


class DeliveryService:
    # Rider list and the assignment of riders to orders

    def __init__(self, rider_repository: RiderRepository, order_service: OrderService,
                 simulated_delay: float = 0.0):
        self.rider_repo = rider_repository
        self.order_service = order_service
        self.simulated_delay = simulated_delay

    def _simulate_latency(self):
        if self.simulated_delay > 0:
            time.sleep(self.simulated_delay)

    def _require_rider(self, rider_id: str) -> Rider:
        rider = self.rider_repo.get_by_id(rider_id)
        if rider is None:
            raise RiderNotFoundError(rider_id)
        return rider

    # === Riders ===
    def get_riders(self) -> List[Rider]:
        self._simulate_latency()
        return self.rider_repo.find_all()

    def get_available_riders(self) -> List[Rider]:
        return self.rider_repo.find_by_status(RiderStatus.AVAILABLE.value)

    def get_busy_riders(self) -> List[Rider]:
        return self.rider_repo.find_by_status(RiderStatus.BUSY.value)

    def add_rider(self, data: Dict[str, Any]) -> Rider:
        self._simulate_latency()
        if not data.get("name"):
            raise ValidationError("Rider name is required")
        rider = self.rider_repo.add({
            "name": data["name"],
            "email": data.get("email", ""),
            "phone": data.get("phone", ""),
            "vehicle": data.get("vehicle", "motorcycle"),
            "status": data.get("status") or RiderStatus.AVAILABLE.value,
            "vendor_id": data.get("vendor_id")
        })
        logger.info("Added rider %s (%s)", rider.id, rider.name)
        return rider

    def update_rider_status(self, rider_id: str, status: str) -> Rider:
        self._simulate_latency()
        updated = self.rider_repo.update(rider_id, {"status": status})
        if updated is None:
            raise RiderNotFoundError(rider_id)
        logger.info("Updated rider %s status to %s", rider_id, status)
        return updated

    def rider_for_user(self, user: User) -> Optional[Rider]:
        # A delivery account drives the rider record that shares its id
        return self.rider_repo.get_by_id(str(user.id))

    def update_rider_profile(self, rider_id: str, data: Dict[str, Any]) -> Rider:
        # Riders edit their own name, phone and vehicle from the profile page
        patch = {k: data[k].strip() for k in RIDER_PROFILE_FIELDS if isinstance(data.get(k), str)}
        if "name" in patch and not patch["name"]:
            raise ValidationError("Rider name is required")
        if "vehicle" in patch and patch["vehicle"] not in VEHICLES:
            raise ValidationError(f"Unknown vehicle: {patch['vehicle']}")
        updated = self.rider_repo.update(rider_id, patch)
        if updated is None:
            raise RiderNotFoundError(rider_id)
        logger.info("Updated rider %s profile", rider_id)
        return updated

    # === Deliveries ===
    def _open_orders(self) -> List[Order]:
        return [o for o in self.order_service.get_all_orders() if o.status not in TERMINAL_STATUSES]

    def get_assigned_deliveries(self) -> List[Order]:
        return [o for o in self._open_orders() if o.is_assigned]

    def get_unassigned_deliveries(self) -> List[Order]:
        return [o for o in self._open_orders() if not o.is_assigned]

    def assign_rider(self, order_id: int, rider_id: str) -> Order:
        """Hand an order to a rider: the order goes out for delivery and the rider becomes busy.

        Reassigning frees the previous rider once they have nothing else on the road.
        """
        self._simulate_latency()
        return self._assign(order_id, rider_id)

    def _assign(self, order_id: int, rider_id: str, accepting: bool = False) -> Order:
        with self.rider_repo.transaction():
            self._require_rider(rider_id)
            previous = self.order_service.get_order(order_id).rider_id
            if accepting and previous and previous != rider_id:
                self._reject_foreign(order_id, rider_id, previous)
            self.order_service.update_status(order_id, OrderStatus.DELIVERY.value)
            order = self.order_service.update_order(order_id, {"rider_id": rider_id})
            self.rider_repo.update(rider_id, {"status": RiderStatus.BUSY.value})
            if previous and previous != rider_id:
                self._release_if_idle(previous)
        logger.info("Assigned rider %s to order %s", rider_id, order_id)
        return order

    def _release_if_idle(self, rider_id: str):
        if not self.get_active_deliveries(rider_id):
            self.rider_repo.update(rider_id, {"status": RiderStatus.AVAILABLE.value})
            logger.info("Rider %s has no active deliveries and is available again", rider_id)

    # === Rider's own workflow ===
    def get_active_deliveries(self, rider_id: str) -> List[Order]:
        return [
            o for o in self.order_service.get_all_orders()
            if o.status in ON_ROAD_STATUSES and o.rider_id == rider_id
        ]

    def get_pending_deliveries(self) -> List[Order]:
        return [
            o for o in self.order_service.get_all_orders()
            if o.status == OrderStatus.READY_FOR_DELIVERY.value and not o.rider_id
        ]

    def get_delivery_history(self, rider_id: str) -> List[Order]:
        orders = [o for o in self.order_service.get_all_orders() if o.rider_id == rider_id]
        orders.sort(key=lambda o: o.updated_at, reverse=True)
        return orders

    @staticmethod
    def _reject_foreign(order_id: int, rider_id: str, holder: str):
        logger.warning("Rider %s tried to act on order %s held by rider %s", rider_id, order_id, holder)
        raise ValidationError(f"Order {order_id} is assigned to another rider")

    def accept_delivery(self, order_id: int, rider_id: str) -> Order:
        self._simulate_latency()
        return self._assign(order_id, rider_id, accepting=True)

    def update_delivery_status(self, order_id: int, rider_id: str, status: str) -> Order:
        # Rider moves one of their own orders along; finishing the last active one frees the rider
        with self.rider_repo.transaction():
            self._require_rider(rider_id)
            holder = self.order_service.get_order(order_id).rider_id
            if holder and holder != rider_id:
                self._reject_foreign(order_id, rider_id, holder)
            self.order_service.update_status(order_id, status)
            order = self.order_service.update_order(order_id, {"rider_id": rider_id})
            if status in TERMINAL_STATUSES:
                self._release_if_idle(rider_id)
            elif status in ON_ROAD_STATUSES:
                self.rider_repo.update(rider_id, {"status": RiderStatus.BUSY.value})
        return order

    def calculate_earnings(self, rider_id: str, period: str = "all",
                           now: Optional[datetime] = None) -> Dict[str, Any]:
        start = earnings_period_start(period, now)
        delivered = [
            o for o in self.order_service.get_all_orders()
            if o.rider_id == rider_id
            and o.status == OrderStatus.DELIVERED.value
            and o.updated_at >= start
        ]
        return {
            "period": period,
            "deliveries": len(delivered),
            "earnings": len(delivered) * EARNING_PER_DELIVERY,
            "per_delivery": EARNING_PER_DELIVERY
        }
