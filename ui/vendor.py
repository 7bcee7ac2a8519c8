"""
Vendor dashboard and account settings
"""
import logging

from flask import Blueprint, render_template, request, redirect, flash, url_for

from core.errors import LaundryError
from models.order import OrderStatus
from .guards import get_platform, role_required, login_user
from .i18n import LANGUAGES, set_language, t

logger = logging.getLogger(__name__)

bp = Blueprint("vendor", __name__, url_prefix="/vendor")


@bp.route("/")
@role_required("vendor")
def index(user):
    platform = get_platform()
    orders = platform.order_service.get_vendor_orders(user.id)
    delivery_orders = [
        o for o in orders
        if o.status in (OrderStatus.READY_FOR_DELIVERY.value, OrderStatus.DELIVERY.value)
    ]
    return render_template(
        "vendor/index.html",
        stats=platform.analytics_service.vendor_stats(user.id),
        recent_orders=orders[:5],
        delivery_orders=delivery_orders
    )


@bp.route("/orders")
@role_required("vendor")
def orders(user):
    platform = get_platform()
    status = request.args.get("status", "all")
    vendor_orders = platform.order_service.filter_orders(
        platform.order_service.get_vendor_orders(user.id), status=status
    )
    return render_template("vendor/orders.html", orders=vendor_orders, status=status,
                           statuses=OrderStatus.values())


@bp.route("/settings", methods=["GET", "POST"])
@role_required("vendor")
def settings(user):
    if request.method == "POST":
        try:
            user = get_platform().auth_service.update_user(user.id, request.form.to_dict())
            login_user(user)
            set_language(request.form.get("language", ""))
            flash(t("Settings saved", "تم حفظ الإعدادات"), "success")
        except LaundryError as e:
            logger.error("Error saving vendor settings: %s", e)
            flash(t("Failed to save settings", "فشل حفظ الإعدادات"), "error")
        return redirect(url_for("vendor.settings"))
    return render_template("vendor/settings.html", user=user, languages=LANGUAGES)
