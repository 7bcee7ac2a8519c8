"""
Auth service - demo login, registration, profile updates and vendor accounts
"""
import logging
from typing import Dict, List, Any, Optional

from core.errors import AuthenticationError, UserNotFoundError, ValidationError
from database.repository import UserRepository
from models.user import User, UserRole

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "phone", "address", "city")


class AuthService:
    # Identity and role of the people using the platform

    def __init__(self, user_repository: UserRepository):
        self.user_repo = user_repository

    def login(self, email: str, password: str, role: str) -> User:
        # Email, password and the chosen role must all match
        user = self.user_repo.find_by_email(email or "", role)
        if user is None or not self.user_repo.check_password(user.email, password or ""):
            logger.warning("Failed login for %s as %s", email, role)
            raise AuthenticationError("Invalid email, password or account type")
        if not user.is_active:
            logger.warning("Login refused for deactivated user %s", user.id)
            raise AuthenticationError("This account has been deactivated")
        logger.info("User %s logged in as %s", user.id, role)
        return user

    def _create_user(self, name: str, email: str, phone: str, role: str,
                     password: Optional[str], address: Optional[str] = None) -> User:
        if not name or not name.strip() or not email or not email.strip():
            raise ValidationError("Name and email are required")
        if role not in [r.value for r in UserRole]:
            raise ValidationError(f"Unknown account type: {role}")

        def build(user_id: int) -> User:
            return User(
                id=user_id,
                name=name.strip(),
                email=email.strip().lower(),
                phone=(phone or "").strip(),
                role=role,
                address=(address or "").strip() or None
            )

        return self.user_repo.create(build, password)

    def register(self, name: str, email: str, phone: str, password: str,
                 role: str = UserRole.CUSTOMER.value) -> User:
        if not password:
            raise ValidationError("Name, email and password are required")
        user = self._create_user(name, email, phone, role, password)
        logger.info("Registered user %s as %s", user.id, role)
        return user

    def update_user(self, user_id: int, data: Dict[str, Any]) -> User:
        patch = {key: value for key, value in data.items() if key in PROFILE_FIELDS}
        if "name" in patch and not (patch["name"] or "").strip():
            raise ValidationError("Name is required")
        updated = self.user_repo.update(user_id, patch)
        if updated is None:
            raise UserNotFoundError(user_id)
        return updated

    def get_user(self, user_id: int) -> Optional[User]:
        return self.user_repo.get_by_id(user_id)

    def get_all_users(self, role: Optional[str] = None) -> List[User]:
        users = self.user_repo.find_all()
        if role:
            users = [u for u in users if u.role == role]
        return users

    # === Vendor accounts (admin) ===
    def get_vendors(self, query: str = "") -> List[User]:
        """Vendor accounts, optionally narrowed to a name or email match."""
        vendors = self.get_all_users(UserRole.VENDOR.value)
        needle = (query or "").strip().lower()
        if needle:
            vendors = [v for v in vendors if needle in v.name.lower() or needle in v.email.lower()]
        return vendors

    def create_vendor(self, data: Dict[str, Any]) -> User:
        # A vendor created without a password exists but cannot sign in yet
        vendor = self._create_user(
            data.get("name", ""), data.get("email", ""), data.get("phone", ""),
            UserRole.VENDOR.value, data.get("password") or None, address=data.get("address")
        )
        logger.info("Created vendor %s (%s)", vendor.id, vendor.email)
        return vendor

    def set_user_active(self, user_id: int, is_active: bool) -> User:
        updated = self.user_repo.update(user_id, {"is_active": bool(is_active)})
        if updated is None:
            raise UserNotFoundError(user_id)
        logger.info("User %s is now %s", user_id, "active" if updated.is_active else "inactive")
        return updated

    def toggle_vendor_active(self, vendor_id: int) -> User:
        vendor = self.get_user(vendor_id)
        if vendor is None or vendor.role != UserRole.VENDOR.value:
            raise UserNotFoundError(vendor_id)
        return self.set_user_active(vendor_id, not vendor.is_active)
