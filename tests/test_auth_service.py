"""
Tests for demo login, registration and profile updates
"""
import unittest

from core.errors import AuthenticationError, UserNotFoundError, ValidationError
from core.platform import LaundryPlatform


class TestAuthService(unittest.TestCase):
    """Test cases for AuthService"""

    def setUp(self):
        self.platform = LaundryPlatform()
        self.auth = self.platform.auth_service

    def test_demo_logins(self):
        """Test that every role has a working demo account"""
        expected = {
            "customer": "/dashboard",
            "admin": "/admin",
            "vendor": "/vendor",
            "delivery": "/delivery",
            "laundry": "/laundry",
        }
        for role, path in expected.items():
            user = self.auth.login(f"{role}@example.com", f"{role}123", role)
            self.assertEqual(user.role, role)
            self.assertEqual(user.dashboard_path, path)

    def test_login_email_is_case_insensitive(self):
        user = self.auth.login("Admin@Example.com", "admin123", "admin")
        self.assertEqual(user.id, 2)

    def test_wrong_password(self):
        with self.assertRaises(AuthenticationError):
            self.auth.login("customer@example.com", "nope", "customer")

    def test_wrong_role(self):
        with self.assertRaises(AuthenticationError):
            self.auth.login("customer@example.com", "customer123", "admin")

    def test_register(self):
        user = self.auth.register("Sara", "Sara@Example.com", "+966 55 000 0000", "secret")

        self.assertEqual(user.id, 6)
        self.assertEqual(user.email, "sara@example.com")
        self.assertEqual(user.role, "customer")
        self.assertEqual(self.auth.login("sara@example.com", "secret", "customer").id, 6)

    def test_register_duplicate_email(self):
        with self.assertRaises(ValidationError):
            self.auth.register("Again", "customer@example.com", "", "secret")

    def test_register_unknown_role(self):
        with self.assertRaises(ValidationError):
            self.auth.register("Sara", "sara@example.com", "", "secret", role="owner")

    def test_register_missing_fields(self):
        with self.assertRaises(ValidationError):
            self.auth.register("", "sara@example.com", "", "secret")

    def test_update_user_only_profile_fields(self):
        user = self.auth.update_user(1, {"name": "Renamed", "city": "Jeddah", "role": "admin"})

        self.assertEqual(user.name, "Renamed")
        self.assertEqual(user.city, "Jeddah")
        self.assertEqual(user.role, "customer")

    def test_update_unknown_user(self):
        with self.assertRaises(UserNotFoundError):
            self.auth.update_user(99, {"name": "Ghost"})

    def test_list_users(self):
        self.assertEqual(len(self.auth.get_all_users()), 5)
        self.assertEqual([u.id for u in self.auth.get_all_users("customer")], [1])


class TestVendorAccounts(unittest.TestCase):
    """Admin management of vendor accounts"""

    def setUp(self):
        self.platform = LaundryPlatform()
        self.auth = self.platform.auth_service

    def test_create_vendor(self):
        vendor = self.auth.create_vendor({"name": "Clean Co", "email": "Clean@Co.sa",
                                          "phone": "+966 11 000 0000", "address": "Olaya St"})

        self.assertEqual(vendor.id, 6)
        self.assertEqual(vendor.role, "vendor")
        self.assertEqual(vendor.email, "clean@co.sa")
        self.assertEqual(vendor.address, "Olaya St")
        self.assertTrue(vendor.is_active)
        self.assertEqual([v.id for v in self.auth.get_vendors()], [3, 6])

    def test_vendor_without_password_cannot_sign_in(self):
        self.auth.create_vendor({"name": "Clean Co", "email": "clean@co.sa"})
        with self.assertRaises(AuthenticationError):
            self.auth.login("clean@co.sa", "", "vendor")

    def test_vendor_with_password_can_sign_in(self):
        self.auth.create_vendor({"name": "Clean Co", "email": "clean@co.sa", "password": "wash"})
        self.assertEqual(self.auth.login("clean@co.sa", "wash", "vendor").name, "Clean Co")

    def test_create_vendor_validation(self):
        with self.assertRaises(ValidationError):
            self.auth.create_vendor({"name": "No Email"})
        with self.assertRaises(ValidationError):
            self.auth.create_vendor({"name": "Twin", "email": "vendor@example.com"})
        self.assertEqual(len(self.auth.get_vendors()), 1)

    def test_search_vendors_by_name_or_email(self):
        self.auth.create_vendor({"name": "Clean Co", "email": "hello@fresh.sa"})

        self.assertEqual([v.name for v in self.auth.get_vendors("clean")], ["Clean Co"])
        self.assertEqual([v.name for v in self.auth.get_vendors("FRESH")], ["Clean Co"])
        self.assertEqual([v.id for v in self.auth.get_vendors("example.com")], [3])
        self.assertEqual(self.auth.get_vendors("nobody"), [])

    def test_toggle_vendor_blocks_login(self):
        """Test that a deactivated vendor cannot log in until reactivated"""
        vendor = self.auth.toggle_vendor_active(3)
        self.assertFalse(vendor.is_active)
        with self.assertRaises(AuthenticationError):
            self.auth.login("vendor@example.com", "vendor123", "vendor")

        self.assertTrue(self.auth.toggle_vendor_active(3).is_active)
        self.assertEqual(self.auth.login("vendor@example.com", "vendor123", "vendor").id, 3)

    def test_toggle_only_applies_to_vendors(self):
        with self.assertRaises(UserNotFoundError):
            self.auth.toggle_vendor_active(1)
        with self.assertRaises(UserNotFoundError):
            self.auth.toggle_vendor_active(99)
        self.assertTrue(self.auth.get_user(1).is_active)


if __name__ == '__main__':
    unittest.main()
