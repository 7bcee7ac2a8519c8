"""
UI package for the laundry booking platform
Contains the Flask blueprints for every role
"""

from . import admin, api, auth, customer, delivery, laundry, public, vendor
from .guards import inject_user
from .i18n import inject_language

BLUEPRINTS = [public.bp, auth.bp, customer.bp, admin.bp, vendor.bp, delivery.bp, laundry.bp, api.bp]


def register_ui(app):
    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)
    app.context_processor(inject_language)
    app.context_processor(inject_user)


__all__ = ['register_ui', 'BLUEPRINTS']
