"""
Session login state and per-role page guards
"""
from functools import wraps
from typing import Optional

from flask import session, redirect, request, url_for, current_app

from models.user import User


def get_platform():
    return current_app.extensions["laundry"]


def login_user(user: User):
    session["user"] = user.to_dict()


def logout_user():
    session.pop("user", None)
    session.pop("cart", None)


def current_user() -> Optional[User]:
    data = session.get("user")
    if not data:
        return None
    # Prefer the live record so profile edits show up immediately
    user = get_platform().auth_service.get_user(data.get("id"))
    if user is not None and user.email == data.get("email"):
        return user if user.is_active else None
    return User.from_dict(data)


def role_required(*roles: str):
    """Send anonymous visitors to the login page and other roles to their own dashboard."""
    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            user = current_user()
            if user is None:
                return redirect(url_for("auth.login", next=request.path))
            if roles and user.role not in roles:
                return redirect(user.dashboard_path)
            return view(user, *args, **kwargs)
        return wrapped
    return decorator


def inject_user():
    return {"current_user": current_user()}
