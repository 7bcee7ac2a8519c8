"""
Tests for admin analytics, vendor stats and reporting periods
"""
import unittest
from datetime import datetime

from core.platform import LaundryPlatform
from services.periods import months_ago, years_ago, analytics_period_start, earnings_period_start


class TestAdminAnalytics(unittest.TestCase):
    """Test cases for AnalyticsService.admin_analytics"""

    def setUp(self):
        self.platform = LaundryPlatform()
        self.analytics = self.platform.analytics_service
        self.now = datetime(2025, 4, 26, 12, 0)

    def test_week_totals(self):
        data = self.analytics.admin_analytics("week", now=self.now)

        self.assertEqual(data["total_orders"], 3)
        self.assertEqual(data["total_revenue"], 355)
        self.assertAlmostEqual(data["average_order_value"], 355 / 3)
        self.assertEqual(data["unique_customers"], 1)
        self.assertEqual(data["completed_orders_count"], 1)
        self.assertEqual(data["completed_revenue"], 100)
        self.assertAlmostEqual(data["conversion_rate"], 100 / 3)

    def test_orders_by_status_has_every_status(self):
        data = self.analytics.admin_analytics("week", now=self.now)
        by_status = data["orders_by_status"]

        self.assertEqual(len(by_status), 8)
        self.assertEqual(by_status["delivered"], 1)
        self.assertEqual(by_status["processing"], 1)
        self.assertEqual(by_status["pending"], 1)
        self.assertEqual(by_status["cancelled"], 0)

    def test_orders_by_service(self):
        data = self.analytics.admin_analytics("week", now=self.now)
        self.assertEqual(data["orders_by_service"]["Bed Sheets"], {"count": 2, "revenue": 50})
        self.assertEqual(data["orders_by_service"]["Blankets"], {"count": 2, "revenue": 90})

    def test_time_series_one_bucket_per_day(self):
        series = self.analytics.admin_analytics("week", now=self.now)["time_series"]

        self.assertEqual(len(series), 8)
        self.assertEqual(series[0]["date"], "2025-04-19")
        self.assertEqual(series[-1]["date"], "2025-04-26")
        by_date = {row["date"]: row for row in series}
        self.assertEqual(by_date["2025-04-22"]["orders"], 1)
        self.assertEqual(by_date["2025-04-22"]["revenue"], 100)
        self.assertEqual(sum(row["orders"] for row in series), 3)

    def test_day_period_starts_at_midnight(self):
        data = self.analytics.admin_analytics("day", now=datetime(2025, 4, 25, 20, 0))
        self.assertEqual(data["total_orders"], 1)
        self.assertEqual(len(data["time_series"]), 1)

    def test_orders_after_now_are_excluded(self):
        """Test that a past reference time ignores orders created later"""
        data = self.analytics.admin_analytics("week", now=datetime(2025, 4, 24, 9, 0))

        self.assertEqual(data["total_orders"], 1)
        self.assertEqual(data["total_revenue"], 100)
        self.assertEqual(data["orders_by_status"]["pending"], 0)
        self.assertEqual(sum(row["orders"] for row in data["time_series"]), 1)
        self.assertEqual(data["time_series"][-1]["date"], "2025-04-24")

    def test_month_period(self):
        data = self.analytics.admin_analytics("month", now=datetime(2025, 5, 23, 12, 0))
        self.assertEqual(data["total_orders"], 2)

    def test_unknown_period_is_week(self):
        data = self.analytics.admin_analytics("decade", now=self.now)
        self.assertEqual(data["period"], "week")
        self.assertEqual(data["total_orders"], 3)

    def test_empty_period(self):
        data = self.analytics.admin_analytics("week", now=datetime(2026, 1, 1))
        self.assertEqual(data["total_orders"], 0)
        self.assertEqual(data["average_order_value"], 0)
        self.assertEqual(data["conversion_rate"], 0)


class TestVendorAndCustomerStats(unittest.TestCase):

    def setUp(self):
        self.platform = LaundryPlatform()
        self.analytics = self.platform.analytics_service

    def test_vendor_stats(self):
        stats = self.analytics.vendor_stats(3, now=datetime(2025, 4, 26, 12, 0))

        self.assertEqual(stats["total_orders"], 3)
        self.assertEqual(stats["pending_orders"], 2)
        self.assertEqual(stats["completed_orders"], 1)
        self.assertEqual(stats["cancelled_orders"], 0)
        self.assertEqual(stats["total_revenue"], 100)
        self.assertEqual(stats["daily_revenue"], 0)
        self.assertEqual(stats["weekly_revenue"], 100)
        self.assertEqual(stats["monthly_revenue"], 100)

    def test_vendor_without_orders(self):
        stats = self.analytics.vendor_stats(99)
        self.assertEqual(stats["total_orders"], 0)
        self.assertEqual(stats["total_revenue"], 0)

    def test_customer_summary(self):
        orders = self.platform.order_service.get_customer_orders(1)
        summary = self.analytics.customer_summary(orders)

        self.assertEqual(summary["total_orders"], 3)
        self.assertEqual(summary["active_orders"], 2)
        self.assertEqual(summary["total_spent"], 355)
        self.assertEqual(summary["loyalty_points"], 35)
        self.assertEqual(summary["points_to_next_reward"], 465)


class TestPeriods(unittest.TestCase):

    def test_months_ago_clamps_day(self):
        self.assertEqual(months_ago(datetime(2025, 3, 31), 1), datetime(2025, 2, 28))
        self.assertEqual(months_ago(datetime(2025, 1, 15), 1), datetime(2024, 12, 15))

    def test_years_ago_leap_day(self):
        self.assertEqual(years_ago(datetime(2024, 2, 29), 1), datetime(2023, 2, 28))

    def test_analytics_period_start(self):
        now = datetime(2025, 4, 26, 12, 30)
        self.assertEqual(analytics_period_start("day", now), datetime(2025, 4, 26))
        self.assertEqual(analytics_period_start("week", now), datetime(2025, 4, 19, 12, 30))
        self.assertEqual(analytics_period_start("year", now), datetime(2024, 4, 26, 12, 30))

    def test_earnings_all_time(self):
        self.assertEqual(earnings_period_start("all"), datetime.min)


if __name__ == '__main__':
    unittest.main()
