"""
Laundry facility dashboard: move orders through cleaning
"""
import logging

from flask import Blueprint, render_template, request, redirect, flash, url_for

from core.errors import LaundryError
from models.order import OrderStatus
from .guards import get_platform, role_required
from .i18n import t

logger = logging.getLogger(__name__)

bp = Blueprint("laundry", __name__, url_prefix="/laundry")

# What the facility works on, and the status each button moves an order to
FACILITY_STATUSES = [
    OrderStatus.CONFIRMED.value,
    OrderStatus.PICKUP.value,
    OrderStatus.PROCESSING.value,
    OrderStatus.READY_FOR_DELIVERY.value,
]


@bp.route("/")
@role_required("laundry")
def index(user):
    orders = get_platform().order_service.get_all_orders()
    queues = {
        status: [o for o in orders if o.status == status]
        for status in [OrderStatus.PENDING.value] + FACILITY_STATUSES
    }
    return render_template("laundry/index.html", queues=queues, next_statuses=FACILITY_STATUSES)


@bp.route("/orders/<int:order_id>/status", methods=["POST"])
@role_required("laundry")
def order_status(user, order_id):
    status = request.form.get("status", "")
    if status not in FACILITY_STATUSES:
        flash(t("That status is set by delivery staff", "هذه الحالة يحددها موظفو التوصيل"), "error")
        return redirect(url_for("laundry.index"))
    try:
        get_platform().order_service.update_status(order_id, status)
        flash(t(f"Order #{order_id} moved to {status}", f"تم نقل الطلب #{order_id} إلى {status}"), "success")
    except LaundryError as e:
        logger.error("Error updating order status: %s", e)
        flash(t("Failed to update order", "فشل تحديث الطلب"), "error")
    return redirect(url_for("laundry.index"))
