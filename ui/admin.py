"""
Admin panel: orders, riders, analytics, pricing, service areas, users and vendors
"""
import logging
from datetime import date

from flask import Blueprint, render_template, request, redirect, flash, url_for, abort

from core.errors import LaundryError, NotFoundError, OrderNotFoundError
from models.order import OrderStatus
from models.user import UserRole
from services.analytics_service import PERIODS
from .guards import get_platform, role_required
from .i18n import t

logger = logging.getLogger(__name__)

bp = Blueprint("admin", __name__, url_prefix="/admin")


def _parse_date(value: str):
    try:
        return date.fromisoformat(value) if value else None
    except ValueError:
        return None


@bp.route("/")
@role_required("admin")
def index(user):
    platform = get_platform()
    orders = platform.order_service.get_all_orders()
    return render_template(
        "admin/index.html",
        analytics=platform.analytics_service.admin_analytics("month", orders=orders),
        recent_orders=orders[:5],
        unassigned=platform.delivery_service.get_unassigned_deliveries(),
        available_riders=platform.delivery_service.get_available_riders()
    )


# === Orders ===
@bp.route("/orders")
@role_required("admin")
def orders(user):
    platform = get_platform()
    status = request.args.get("status", "all")
    query = request.args.get("q", "").strip()
    start = _parse_date(request.args.get("start", ""))
    end = _parse_date(request.args.get("end", ""))
    filtered = platform.order_service.filter_orders(
        platform.order_service.get_all_orders(), status=status, query=query,
        start_date=start, end_date=end
    )
    return render_template("admin/orders.html", orders=filtered, status=status, query=query,
                           start=start, end=end, statuses=OrderStatus.values())


@bp.route("/orders/<int:order_id>")
@role_required("admin")
def order_detail(user, order_id):
    platform = get_platform()
    try:
        order = platform.order_service.get_order(order_id)
    except OrderNotFoundError:
        abort(404)
    rider = platform.rider_repo.get_by_id(order.rider_id) if order.rider_id else None
    return render_template("admin/order_detail.html", order=order, rider=rider,
                           statuses=OrderStatus.values(),
                           riders=platform.delivery_service.get_available_riders())


@bp.route("/orders/<int:order_id>/status", methods=["POST"])
@role_required("admin")
def update_order_status(user, order_id):
    new_status = request.form.get("status", "")
    try:
        get_platform().order_service.update_status(order_id, new_status)
        flash(t(f"Order #{order_id} status updated to {new_status}",
                f"تم تحديث حالة الطلب #{order_id} إلى {new_status}"), "success")
    except OrderNotFoundError:
        abort(404)
    except LaundryError as e:
        logger.error("Update order error: %s", e)
        flash(t("Failed to update status", "فشل تحديث الحالة"), "error")
    return redirect(url_for("admin.order_detail", order_id=order_id))


@bp.route("/orders/<int:order_id>/assign", methods=["POST"])
@role_required("admin")
def assign_rider(user, order_id):
    rider_id = request.form.get("rider_id", "")
    try:
        get_platform().delivery_service.assign_rider(order_id, rider_id)
        flash(t(f"Order #{order_id} assigned to delivery personnel",
                f"تم تعيين الطلب #{order_id} إلى موظف التوصيل"), "success")
    except OrderNotFoundError:
        abort(404)
    except LaundryError as e:
        logger.error("Assign rider error: %s", e)
        flash(t("Failed to assign order", "فشل تعيين الطلب"), "error")
    return redirect(url_for("admin.order_detail", order_id=order_id))


# === Riders ===
@bp.route("/riders", methods=["GET", "POST"])
@role_required("admin")
def riders(user):
    delivery = get_platform().delivery_service
    if request.method == "POST":
        try:
            rider = delivery.add_rider(request.form.to_dict())
            flash(t(f"Rider {rider.name} added", f"تمت إضافة السائق {rider.name}"), "success")
        except LaundryError as e:
            logger.error("Add rider error: %s", e)
            flash(t("Failed to add rider", "فشل إضافة السائق"), "error")
        return redirect(url_for("admin.riders"))

    return render_template(
        "admin/riders.html",
        riders=delivery.get_riders(),
        available_riders=delivery.get_available_riders(),
        unassigned=delivery.get_unassigned_deliveries(),
        assigned=delivery.get_assigned_deliveries()
    )


@bp.route("/riders/<rider_id>/status", methods=["POST"])
@role_required("admin")
def rider_status(user, rider_id):
    try:
        get_platform().delivery_service.update_rider_status(rider_id, request.form.get("status", "available"))
    except NotFoundError:
        abort(404)
    return redirect(url_for("admin.riders"))


# === Analytics ===
@bp.route("/analytics")
@role_required("admin")
def analytics(user):
    period = request.args.get("period", "week")
    if period not in PERIODS:
        period = "week"
    data = get_platform().analytics_service.admin_analytics(period)
    return render_template("admin/analytics.html", analytics=data, period=period, periods=PERIODS)


# === Pricing ===
@bp.route("/pricing", methods=["GET", "POST"])
@role_required("admin")
def pricing(user):
    pricing_service = get_platform().pricing_service
    if request.method == "POST":
        form = _checkbox_form("is_active")
        item_id = form.pop("id", "")
        try:
            if item_id:
                item = pricing_service.update_pricing_item(int(item_id), form)
                flash(t(f"Successfully updated {item.name}", f"تم تحديث {item.name_ar} بنجاح"), "success")
            else:
                item = pricing_service.add_pricing_item(form)
                flash(t(f"Successfully added {item.name}", f"تمت إضافة {item.name_ar} بنجاح"), "success")
        except LaundryError as e:
            logger.error("Error saving pricing item: %s", e)
            flash(t(f"Failed to save: {e}", "فشل الحفظ"), "error")
        return redirect(url_for("admin.pricing"))

    editing = None
    if request.args.get("edit"):
        try:
            editing = pricing_service.get_pricing_item(int(request.args["edit"]))
        except (ValueError, NotFoundError):
            abort(404)
    return render_template("admin/pricing.html", items=pricing_service.get_pricing_items(), editing=editing,
                           adding=request.args.get("new") is not None)


@bp.route("/pricing/<int:item_id>/toggle", methods=["POST"])
@role_required("admin")
def toggle_pricing(user, item_id):
    try:
        get_platform().pricing_service.toggle_pricing_item(item_id)
    except NotFoundError:
        abort(404)
    return redirect(url_for("admin.pricing"))


@bp.route("/pricing/<int:item_id>/delete", methods=["POST"])
@role_required("admin")
def delete_pricing(user, item_id):
    pricing_service = get_platform().pricing_service
    try:
        item = pricing_service.get_pricing_item(item_id)
        pricing_service.delete_pricing_item(item_id)
        flash(t(f"Successfully deleted {item.name}", f"تم حذف {item.name_ar} بنجاح"), "success")
    except NotFoundError:
        abort(404)
    return redirect(url_for("admin.pricing"))


# === Service areas ===
@bp.route("/areas", methods=["GET", "POST"])
@role_required("admin")
def areas(user):
    area_service = get_platform().area_service
    if request.method == "POST":
        form = _checkbox_form("is_active")
        area_id = form.pop("id", "")
        try:
            if area_id:
                area = area_service.update_area(int(area_id), form)
                flash(t(f"Successfully updated {area.name}", f"تم تحديث {area.name_ar} بنجاح"), "success")
            else:
                area = area_service.create_area(form)
                flash(t(f"Successfully added {area.name}", f"تمت إضافة {area.name_ar} بنجاح"), "success")
        except LaundryError as e:
            logger.error("Error saving area: %s", e)
            flash(t(f"Failed to save: {e}", "فشل الحفظ"), "error")
        return redirect(url_for("admin.areas"))

    editing = None
    if request.args.get("edit"):
        try:
            editing = area_service.get_area(int(request.args["edit"]))
        except (ValueError, NotFoundError):
            abort(404)
    return render_template("admin/areas.html", areas=area_service.get_areas(), editing=editing,
                           adding=request.args.get("new") is not None)


@bp.route("/areas/<int:area_id>/toggle", methods=["POST"])
@role_required("admin")
def toggle_area(user, area_id):
    try:
        get_platform().area_service.toggle_area(area_id)
    except NotFoundError:
        abort(404)
    return redirect(url_for("admin.areas"))


@bp.route("/areas/<int:area_id>/delete", methods=["POST"])
@role_required("admin")
def delete_area(user, area_id):
    area_service = get_platform().area_service
    try:
        area = area_service.get_area(area_id)
        area_service.delete_area(area_id)
        flash(t(f"Successfully deleted {area.name}", f"تم حذف {area.name_ar} بنجاح"), "success")
    except NotFoundError:
        abort(404)
    return redirect(url_for("admin.areas"))


# === People ===
@bp.route("/customers")
@role_required("admin")
def customers(user):
    platform = get_platform()
    rows = []
    for customer in platform.auth_service.get_all_users(UserRole.CUSTOMER.value):
        orders = platform.order_service.get_customer_orders(customer.id)
        rows.append({"user": customer, **platform.analytics_service.customer_summary(orders)})
    return render_template("admin/customers.html", customers=rows)


@bp.route("/users")
@role_required("admin")
def users(user):
    query = request.args.get("q", "").strip().lower()
    all_users = get_platform().auth_service.get_all_users()
    counts = {role.value: len([u for u in all_users if u.role == role.value]) for role in UserRole}
    if query:
        all_users = [u for u in all_users if query in u.name.lower() or query in u.email.lower()]
    return render_template("admin/users.html", users=all_users, counts=counts, query=query)


@bp.route("/vendors", methods=["GET", "POST"])
@role_required("admin")
def vendors(user):
    auth = get_platform().auth_service
    if request.method == "POST":
        try:
            auth.create_vendor(request.form.to_dict())
            flash(t("Vendor created successfully", "تم إنشاء البائع بنجاح"), "success")
            return redirect(url_for("admin.vendors"))
        except LaundryError as e:
            logger.error("Error creating vendor: %s", e)
            flash(t(f"Error creating vendor: {e}", f"خطأ في إنشاء البائع: {e}"), "error")
    query = request.args.get("q", "").strip()
    return render_template("admin/vendors.html", vendors=auth.get_vendors(query), query=query)


@bp.route("/vendors/<int:vendor_id>/toggle", methods=["POST"])
@role_required("admin")
def toggle_vendor(user, vendor_id):
    try:
        get_platform().auth_service.toggle_vendor_active(vendor_id)
        flash(t("Vendor status updated", "تم تحديث حالة البائع"), "success")
    except NotFoundError:
        abort(404)
    return redirect(url_for("admin.vendors"))


def _checkbox_form(*checkboxes):
    # Unchecked boxes are absent from the post body
    form = request.form.to_dict()
    for name in checkboxes:
        form[name] = name in request.form
    return form
