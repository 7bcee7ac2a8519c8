"""
Customer dashboard: booking cart, order tracking and profile
"""
import logging

from flask import Blueprint, render_template, request, redirect, flash, url_for, session, abort

from core.errors import LaundryError, ValidationError, OrderNotFoundError
from models.order import OrderStatus
from .guards import get_platform, role_required, login_user
from .i18n import t

logger = logging.getLogger(__name__)

bp = Blueprint("customer", __name__, url_prefix="/dashboard")

# Steps shown on the order tracker, in order
TRACKER_STEPS = [
    OrderStatus.PENDING.value,
    OrderStatus.CONFIRMED.value,
    OrderStatus.PICKUP.value,
    OrderStatus.PROCESSING.value,
    OrderStatus.READY_FOR_DELIVERY.value,
    OrderStatus.DELIVERY.value,
    OrderStatus.DELIVERED.value,
]


@bp.route("/")
@role_required("customer")
def index(user):
    platform = get_platform()
    orders = platform.order_service.get_customer_orders(user.id)
    return render_template(
        "customer/dashboard.html",
        orders=orders[:5],
        summary=platform.analytics_service.customer_summary(orders)
    )


@bp.route("/book", methods=["GET", "POST"])
@role_required("customer")
def book(user):
    platform = get_platform()
    cart = session.get("cart", {})

    if request.method == "POST":
        action = request.form.get("action")
        try:
            if action == "add":
                cart = platform.cart_service.add_item(cart, int(request.form["item_id"]))
            elif action == "remove":
                cart = platform.cart_service.remove_item(cart, int(request.form["item_id"]))
            elif action == "clear":
                cart = {}
            elif action == "checkout":
                return _checkout(user, cart)
            else:
                abort(400)
        except (KeyError, ValueError):
            abort(400)
        except ValidationError as e:
            logger.error("Cart error: %s", e)
            flash(t("This service is no longer available", "هذه الخدمة لم تعد متاحة"), "error")
        session["cart"] = cart
        return redirect(url_for("customer.book"))

    return render_template(
        "customer/book.html",
        services=platform.pricing_service.get_pricing_items(active_only=True),
        cart=platform.cart_service.get_cart_details(cart),
        payment_methods=platform.order_service.payment_methods()
    )


def _checkout(user, cart):
    platform = get_platform()
    payment_method = request.form.get("payment_method", "")
    if payment_method not in platform.order_service.payment_methods():
        flash(t("Please select a payment method", "الرجاء اختيار طريقة الدفع"), "error")
        return redirect(url_for("customer.book"))

    try:
        order = platform.order_service.create_order(
            items=platform.cart_service.to_order_items(cart),
            payment_method=payment_method,
            user=user,
            address=request.form.get("address") or None
        )
    except ValidationError as e:
        logger.error("Create order error: %s", e)
        flash(t("Your cart is empty", "سلة التسوق فارغة"), "error")
        return redirect(url_for("customer.book"))

    session["cart"] = {}
    flash(t(f"Order #{order.id} placed successfully", f"تم تقديم الطلب #{order.id} بنجاح"), "success")
    return redirect(url_for("customer.order_detail", order_id=order.id))


@bp.route("/orders")
@role_required("customer")
def orders(user):
    status = request.args.get("status", "all")
    platform = get_platform()
    customer_orders = platform.order_service.filter_orders(
        platform.order_service.get_customer_orders(user.id), status=status
    )
    return render_template("customer/orders.html", orders=customer_orders, status=status,
                           statuses=OrderStatus.values())


@bp.route("/orders/<int:order_id>")
@role_required("customer")
def order_detail(user, order_id):
    try:
        order = get_platform().order_service.get_order(order_id)
    except OrderNotFoundError:
        abort(404)
    if order.customer_id != user.id:
        abort(404)
    step = TRACKER_STEPS.index(order.status) if order.status in TRACKER_STEPS else -1
    return render_template("customer/order_detail.html", order=order, steps=TRACKER_STEPS, current_step=step)


@bp.route("/profile", methods=["GET", "POST"])
@role_required("customer")
def profile(user):
    platform = get_platform()
    if request.method == "POST":
        try:
            user = platform.auth_service.update_user(user.id, request.form.to_dict())
            login_user(user)
            flash(t("Profile updated", "تم تحديث الملف الشخصي"), "success")
        except LaundryError as e:
            logger.error("Update user error: %s", e)
            flash(t("Failed to update profile", "فشل تحديث الملف الشخصي"), "error")
        return redirect(url_for("customer.profile"))

    orders = platform.order_service.get_customer_orders(user.id)
    return render_template("customer/profile.html", user=user,
                           summary=platform.analytics_service.customer_summary(orders))


@bp.route("/help")
@role_required("customer")
def help_page(user):
    return render_template("customer/help.html")
