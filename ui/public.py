"""
Marketing pages, language switch and health check
"""
import logging

from flask import Blueprint, render_template, request, redirect, flash, jsonify, url_for

from .guards import get_platform
from .i18n import set_language, toggle_language, t

logger = logging.getLogger(__name__)

bp = Blueprint("public", __name__)


@bp.route("/")
def index():
    """Landing page"""
    platform = get_platform()
    return render_template(
        "index.html",
        services=platform.pricing_service.get_pricing_items(active_only=True)[:3],
        areas=platform.area_service.get_areas(active_only=True)
    )


@bp.route("/about")
def about():
    return render_template("about.html")


@bp.route("/services")
def services():
    items = get_platform().pricing_service.get_pricing_items(active_only=True)
    return render_template("services.html", services=items)


@bp.route("/contact", methods=["GET", "POST"])
def contact():
    if request.method == "POST":
        name = request.form.get("name", "").strip()
        email = request.form.get("email", "").strip()
        message = request.form.get("message", "").strip()
        if not name or not email or not message:
            flash(t("Please fill in all fields", "يرجى ملء جميع الحقول"), "error")
            return render_template("contact.html", form=request.form), 400
        logger.info("Contact message from %s <%s>", name, email)
        flash(t("Thank you! We will get back to you soon.", "شكراً لك! سنعود إليك قريباً."), "success")
        return redirect(url_for("public.contact"))
    return render_template("contact.html", form={})


@bp.route("/language/toggle", methods=["POST"])
def language_toggle():
    toggle_language()
    return redirect(_back())


@bp.route("/language/<lang>", methods=["POST"])
def language_set(lang):
    set_language(lang)
    return redirect(_back())


@bp.route("/health")
def health():
    """Health check endpoint"""
    return jsonify({"status": "ok", "message": "Laundry booking platform is running!"})


def _back() -> str:
    target = request.form.get("next") or request.referrer or "/"
    return target if target.startswith("/") or target.startswith(request.host_url) else "/"
