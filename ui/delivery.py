"""
Rider dashboard: accept deliveries, move them along, history, earnings and profile
"""
import logging

from flask import Blueprint, render_template, request, redirect, flash, url_for

from core.errors import LaundryError
from models.delivery import RiderStatus
from models.order import OrderStatus
from services.delivery_service import VEHICLES
from .guards import get_platform, role_required, login_user
from .i18n import t

logger = logging.getLogger(__name__)

bp = Blueprint("delivery", __name__, url_prefix="/delivery")

EARNING_PERIODS = ("week", "month", "year", "all")


def _rider_id(user) -> str:
    rider = get_platform().delivery_service.rider_for_user(user)
    return rider.id if rider else str(user.id)


@bp.route("/")
@role_required("delivery")
def index(user):
    delivery = get_platform().delivery_service
    rider = delivery.rider_for_user(user)
    rider_id = _rider_id(user)
    return render_template(
        "delivery/index.html",
        rider=rider,
        rider_statuses=[s.value for s in RiderStatus],
        active=delivery.get_active_deliveries(rider_id),
        pending=delivery.get_pending_deliveries(),
        next_statuses=[OrderStatus.DELIVERY.value, OrderStatus.DELIVERED.value, OrderStatus.CANCELLED.value]
    )


@bp.route("/status", methods=["POST"])
@role_required("delivery")
def rider_status(user):
    try:
        get_platform().delivery_service.update_rider_status(_rider_id(user), request.form.get("status", ""))
    except LaundryError as e:
        logger.error("Error updating rider status: %s", e)
        flash(t("Failed to update status", "فشل تحديث الحالة"), "error")
    return redirect(url_for("delivery.index"))


@bp.route("/orders/<int:order_id>/accept", methods=["POST"])
@role_required("delivery")
def accept(user, order_id):
    try:
        get_platform().delivery_service.accept_delivery(order_id, _rider_id(user))
        flash(t(f"Delivery #{order_id} accepted", f"تم قبول التوصيل #{order_id}"), "success")
    except LaundryError as e:
        logger.error("Error accepting delivery: %s", e)
        flash(t("Failed to accept delivery", "فشل قبول التوصيل"), "error")
    return redirect(url_for("delivery.index"))


@bp.route("/orders/<int:order_id>/status", methods=["POST"])
@role_required("delivery")
def order_status(user, order_id):
    try:
        get_platform().delivery_service.update_delivery_status(
            order_id, _rider_id(user), request.form.get("status", "")
        )
        flash(t(f"Order #{order_id} updated", f"تم تحديث الطلب #{order_id}"), "success")
    except LaundryError as e:
        logger.error("Error updating order status: %s", e)
        flash(t("Failed to update order", "فشل تحديث الطلب"), "error")
    return redirect(url_for("delivery.index"))


@bp.route("/history")
@role_required("delivery")
def history(user):
    orders = get_platform().delivery_service.get_delivery_history(_rider_id(user))
    return render_template("delivery/history.html", orders=orders)


@bp.route("/earnings")
@role_required("delivery")
def earnings(user):
    period = request.args.get("period", "week")
    if period not in EARNING_PERIODS:
        period = "week"
    delivery = get_platform().delivery_service
    rider_id = _rider_id(user)
    return render_template(
        "delivery/earnings.html",
        period=period,
        periods=EARNING_PERIODS,
        summary=delivery.calculate_earnings(rider_id, period),
        all_time=delivery.calculate_earnings(rider_id, "all")
    )


@bp.route("/profile", methods=["GET", "POST"])
@role_required("delivery")
def profile(user):
    platform = get_platform()
    delivery = platform.delivery_service
    if request.method == "POST":
        form = request.form.to_dict()
        try:
            if delivery.rider_for_user(user) is not None:
                delivery.update_rider_profile(_rider_id(user), form)
            user = platform.auth_service.update_user(user.id, form)
            login_user(user)
            flash(t("Profile updated successfully!", "تم تحديث الملف الشخصي بنجاح!"), "success")
        except LaundryError as e:
            logger.error("Error updating rider profile: %s", e)
            flash(t("Failed to update profile", "فشل في تحديث الملف الشخصي"), "error")
        return redirect(url_for("delivery.profile"))
    return render_template("delivery/profile.html", user=user, rider=delivery.rider_for_user(user),
                           vehicles=VEHICLES)
