"""
JSON endpoints backing the admin pages
"""
import logging

from flask import Blueprint, jsonify, request

from core.errors import LaundryError, NotFoundError, ValidationError
from .guards import get_platform, current_user

logger = logging.getLogger(__name__)

bp = Blueprint("api", __name__, url_prefix="/api")


@bp.errorhandler(NotFoundError)
def handle_not_found(e):
    return jsonify({"error": str(e)}), 404


@bp.errorhandler(ValidationError)
def handle_validation(e):
    return jsonify({"error": str(e)}), 400


@bp.errorhandler(LaundryError)
def handle_laundry_error(e):
    logger.error("API error: %s", e)
    return jsonify({"error": str(e)}), 400


def _require_admin():
    user = current_user()
    if user is None:
        return jsonify({"error": "Authentication required"}), 401
    if user.role != "admin":
        return jsonify({"error": "Admin access required"}), 403
    return None


def _payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object")
    return data


# === Public catalog ===
@bp.route("/services")
def list_services():
    items = get_platform().pricing_service.get_pricing_items(active_only=True)
    return jsonify([item.to_dict() for item in items])


# === Service areas ===
@bp.route("/areas", methods=["GET"])
def list_areas():
    areas = get_platform().area_service.get_areas()
    return jsonify([area.to_dict() for area in areas])


@bp.route("/areas", methods=["POST"])
def create_area():
    denied = _require_admin()
    if denied:
        return denied
    area = get_platform().area_service.create_area(_payload())
    return jsonify(area.to_dict()), 201


@bp.route("/areas/<int:area_id>", methods=["PUT"])
def update_area(area_id):
    denied = _require_admin()
    if denied:
        return denied
    area = get_platform().area_service.update_area(area_id, _payload())
    return jsonify(area.to_dict())


@bp.route("/areas/<int:area_id>", methods=["DELETE"])
def delete_area(area_id):
    denied = _require_admin()
    if denied:
        return denied
    get_platform().area_service.delete_area(area_id)
    return "", 204


# === Pricing ===
@bp.route("/pricing", methods=["GET"])
def list_pricing():
    items = get_platform().pricing_service.get_pricing_items()
    return jsonify([item.to_dict() for item in items])


@bp.route("/pricing/<int:item_id>", methods=["PUT"])
def update_pricing(item_id):
    denied = _require_admin()
    if denied:
        return denied
    item = get_platform().pricing_service.update_pricing_item(item_id, _payload())
    return jsonify(item.to_dict())


# === Orders and riders ===
@bp.route("/orders")
def list_orders():
    user = current_user()
    if user is None:
        return jsonify({"error": "Authentication required"}), 401
    orders = get_platform().order_service.get_orders_for_user(user)
    return jsonify({"orders": [order.to_dict() for order in orders]})


@bp.route("/riders")
def list_riders():
    denied = _require_admin()
    if denied:
        return denied
    delivery = get_platform().delivery_service
    status = request.args.get("status")
    riders = delivery.get_riders()
    if status:
        riders = [r for r in riders if r.status == status]
    return jsonify([rider.to_dict() for rider in riders])
