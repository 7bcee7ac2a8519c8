"""
Login, registration and logout
"""
import logging

from flask import Blueprint, render_template, request, redirect, flash, url_for

from core.errors import AuthenticationError, ValidationError
from models.user import UserRole
from .guards import get_platform, login_user, logout_user, current_user
from .i18n import t

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__)

ROLES = [role.value for role in UserRole]


def _safe_next(target: str):
    # Only local paths, never another host
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return None


@bp.route("/login", methods=["GET", "POST"])
def login():
    user = current_user()
    if user is not None:
        return redirect(user.dashboard_path)

    if request.method == "POST":
        email = request.form.get("email", "")
        password = request.form.get("password", "")
        role = request.form.get("role", UserRole.CUSTOMER.value)
        try:
            user = get_platform().auth_service.login(email, password, role)
        except AuthenticationError:
            flash(t("Invalid email or password", "البريد الإلكتروني أو كلمة المرور غير صحيحة"), "error")
            return render_template("login.html", roles=ROLES, form=request.form), 401

        login_user(user)
        flash(t(f"Welcome back, {user.name}!", f"مرحباً بعودتك، {user.name}!"), "success")
        return redirect(_safe_next(request.args.get("next", "")) or user.dashboard_path)

    return render_template("login.html", roles=ROLES, form={"role": request.args.get("role", "customer")})


@bp.route("/register", methods=["GET", "POST"])
def register():
    if request.method == "POST":
        form = request.form
        if form.get("password") != form.get("confirm_password"):
            flash(t("Passwords do not match", "كلمات المرور غير متطابقة"), "error")
            return render_template("register.html", roles=ROLES, form=form), 400
        try:
            user = get_platform().auth_service.register(
                name=form.get("name", ""),
                email=form.get("email", ""),
                phone=form.get("phone", ""),
                password=form.get("password", ""),
                role=form.get("role", UserRole.CUSTOMER.value)
            )
        except ValidationError as e:
            logger.error("Registration error: %s", e)
            flash(t(str(e), "فشل التسجيل، يرجى التحقق من البيانات"), "error")
            return render_template("register.html", roles=ROLES, form=form), 400

        login_user(user)
        flash(t("Your account has been created", "تم إنشاء حسابك"), "success")
        return redirect(user.dashboard_path)

    return render_template("register.html", roles=ROLES, form={"role": "customer"})


@bp.route("/logout", methods=["GET", "POST"])
def logout():
    logout_user()
    flash(t("You have been logged out", "تم تسجيل الخروج"), "info")
    return redirect(url_for("public.index"))
