"""
Tests for service areas, locally and through the remote areas API
"""
import unittest
from unittest import mock

import requests

from core.errors import AreaNotFoundError, ValidationError
from core.platform import LaundryPlatform
from services.area_service import AreaApiClient, AreaService


def _response(payload=None, status_code=200):
    response = mock.Mock()
    response.status_code = status_code
    response.content = b"" if payload is None else b"{}"
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class TestLocalAreas(unittest.TestCase):
    """Test cases for AreaService without a remote API"""

    def setUp(self):
        self.platform = LaundryPlatform()
        self.areas = self.platform.area_service

    def test_list_areas(self):
        self.assertEqual(len(self.areas.get_areas()), 5)
        self.assertEqual(len(self.areas.get_areas(active_only=True)), 4)

    def test_create_area(self):
        area = self.areas.create_area({"name": "Khobar", "city": "Khobar", "delivery_fee": "18",
                                       "min_order_amount": "60", "is_active": "on"})
        self.assertEqual(area.id, 6)
        self.assertEqual(area.delivery_fee, 18.0)
        self.assertTrue(area.is_active)

    def test_create_after_delete_does_not_collide(self):
        self.areas.delete_area(3)
        area = self.areas.create_area({"name": "Taif"})
        self.assertEqual(area.id, 6)
        self.assertEqual(len({a.id for a in self.areas.get_areas()}), 5)

    def test_create_requires_name(self):
        with self.assertRaises(ValidationError):
            self.areas.create_area({"city": "Nowhere"})

    def test_create_rejects_bad_numbers(self):
        with self.assertRaises(ValidationError):
            self.areas.create_area({"name": "Abha", "delivery_fee": "free"})

    def test_update_area(self):
        area = self.areas.update_area(2, {"delivery_fee": "11", "estimated_delivery_time": "12"})
        self.assertEqual(area.delivery_fee, 11.0)
        self.assertEqual(area.estimated_delivery_time, 12)
        self.assertEqual(area.name, "Riyadh North")

    def test_update_unknown_area(self):
        with self.assertRaises(AreaNotFoundError):
            self.areas.update_area(99, {"name": "Ghost"})

    def test_toggle_area(self):
        self.assertTrue(self.areas.toggle_area(5).is_active)
        self.assertEqual(len(self.areas.get_areas(active_only=True)), 5)

    def test_delete_area(self):
        self.areas.delete_area(1)
        with self.assertRaises(AreaNotFoundError):
            self.areas.get_area(1)
        with self.assertRaises(AreaNotFoundError):
            self.areas.delete_area(1)


class TestRemoteAreas(unittest.TestCase):
    """Test cases for AreaService backed by the remote areas API"""

    def setUp(self):
        self.platform = LaundryPlatform()
        self.client = AreaApiClient("http://api.example.com/", timeout=2)
        self.areas = AreaService(self.platform.area_repo, self.client)

    @mock.patch("services.area_service.requests.request")
    def test_remote_list_merged_into_local(self, request):
        request.return_value = _response([
            {"id": 9, "name": "Khobar", "city": "Khobar", "delivery_fee": 18, "min_order_amount": 60},
            {"id": 1, "name": "Riyadh Downtown", "city": "Riyadh", "delivery_fee": 10, "min_order_amount": 50},
        ])

        areas = {a.id: a for a in self.areas.get_areas()}

        request.assert_called_once_with("GET", "http://api.example.com/api/areas", json=None, timeout=2)
        self.assertEqual(areas[9].name, "Khobar")
        self.assertEqual(areas[1].name, "Riyadh Downtown")
        self.assertEqual(len(areas), 6)

    @mock.patch("services.area_service.requests.request")
    def test_remote_create(self, request):
        request.return_value = _response({"id": 42, "name": "Tabuk", "city": "Tabuk",
                                          "delivery_fee": 25, "min_order_amount": 80})

        area = self.areas.create_area({"name": "Tabuk", "delivery_fee": "25"})

        self.assertEqual(area.id, 42)
        self.assertEqual(self.platform.area_repo.get_by_id(42).name, "Tabuk")
        method, url = request.call_args[0]
        self.assertEqual((method, url), ("POST", "http://api.example.com/api/areas"))
        self.assertEqual(request.call_args[1]["json"]["delivery_fee"], 25.0)

    @mock.patch("services.area_service.requests.request")
    def test_create_falls_back_when_api_down(self, request):
        """Test that a connection error still saves the area locally"""
        request.side_effect = requests.exceptions.ConnectionError("down")

        area = self.areas.create_area({"name": "Tabuk"})

        self.assertEqual(area.id, 6)
        self.assertIsNotNone(self.platform.area_repo.get_by_id(6))

    @mock.patch("services.area_service.requests.request")
    def test_list_falls_back_on_timeout(self, request):
        request.side_effect = requests.exceptions.Timeout()
        self.assertEqual(len(self.areas.get_areas()), 5)

    @mock.patch("services.area_service.requests.request")
    def test_remote_update_sends_whole_record(self, request):
        request.return_value = _response({"id": 2, "name": "Riyadh North", "city": "Riyadh",
                                          "delivery_fee": 9, "min_order_amount": 50})

        area = self.areas.update_area(2, {"delivery_fee": "9"})

        self.assertEqual(area.delivery_fee, 9.0)
        sent = request.call_args[1]["json"]
        self.assertEqual(sent["name"], "Riyadh North")
        self.assertEqual(sent["delivery_fee"], 9.0)

    @mock.patch("services.area_service.requests.request")
    def test_update_falls_back_on_http_error(self, request):
        response = _response({"error": "boom"}, status_code=500)
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("500")
        request.return_value = response

        area = self.areas.update_area(2, {"delivery_fee": "9"})

        self.assertEqual(area.delivery_fee, 9.0)
        self.assertEqual(self.platform.area_repo.get_by_id(2).delivery_fee, 9.0)

    @mock.patch("services.area_service.requests.request")
    def test_delete_with_no_content(self, request):
        request.return_value = _response(status_code=204)

        self.areas.delete_area(4)

        self.assertIsNone(self.platform.area_repo.get_by_id(4))
        request.assert_called_once_with("DELETE", "http://api.example.com/api/areas/4", json=None, timeout=2)

    @mock.patch("services.area_service.requests.request")
    def test_invalid_json_is_a_failure(self, request):
        response = _response({"id": 1})
        response.json.side_effect = ValueError("not json")
        request.return_value = response

        self.assertIsNone(self.client.create_area({"name": "X"}))
        self.assertEqual(len(self.areas.get_areas()), 5)

    @mock.patch("services.area_service.requests.request")
    def test_request_logging_defers_formatting(self, request):
        request.side_effect = requests.exceptions.Timeout()

        with self.assertLogs("services.area_service", level="INFO") as logs:
            self.client.list_areas()

        self.assertEqual([r.msg for r in logs.records], ["%s %s", "Areas API timeout for %s %s"])
        self.assertEqual(logs.records[0].args, ("GET", "http://api.example.com/api/areas"))

    @mock.patch("services.area_service.requests.request")
    def test_malformed_remote_list_uses_local_areas(self, request):
        """Test that a row without an id leaves the local list untouched"""
        request.return_value = _response([
            {"id": 9, "name": "Khobar", "delivery_fee": 18},
            {"name": "Olaya"},
        ])

        areas = self.areas.get_areas()

        self.assertEqual(len(areas), 5)
        self.assertIsNone(self.platform.area_repo.get_by_id(9))

    @mock.patch("services.area_service.requests.request")
    def test_remote_list_with_bad_numbers_uses_local_areas(self, request):
        request.return_value = _response([{"id": 1, "name": "Riyadh", "delivery_fee": "ten"}, "junk"])

        self.assertEqual(len(self.areas.get_areas()), 5)
        self.assertEqual(self.platform.area_repo.get_by_id(1).delivery_fee, 10.0)

    @mock.patch("services.area_service.requests.request")
    def test_malformed_remote_create_saves_locally(self, request):
        request.return_value = _response({"id": "abc", "name": "Tabuk"})

        area = self.areas.create_area({"name": "Tabuk"})

        self.assertEqual(area.id, 6)
        self.assertEqual(self.platform.area_repo.get_by_id(6).name, "Tabuk")

    @mock.patch("services.area_service.requests.request")
    def test_malformed_remote_update_applies_locally(self, request):
        request.return_value = _response({"id": 2, "name": "Riyadh North", "delivery_fee": "lots"})

        area = self.areas.update_area(2, {"delivery_fee": "9"})

        self.assertEqual(area.delivery_fee, 9.0)
        self.assertEqual(self.platform.area_repo.get_by_id(2).delivery_fee, 9.0)


if __name__ == '__main__':
    unittest.main()
