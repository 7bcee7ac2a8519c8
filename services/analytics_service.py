"""
Analytics service - single-pass reductions over the order list
"""
from datetime import datetime, timedelta, date
from typing import Dict, List, Any, Optional

from models.order import Order, OrderStatus, OPEN_STATUSES
from .order_service import OrderService
from .periods import analytics_period_start, months_ago

PERIODS = ("day", "week", "month", "year")


class AnalyticsService:
    # Admin and vendor dashboards

    def __init__(self, order_service: OrderService):
        self.order_service = order_service

    def admin_analytics(self, period: str = "week", now: Optional[datetime] = None,
                        orders: Optional[List[Order]] = None) -> Dict[str, Any]:
        now = now or datetime.now()
        start = analytics_period_start(period, now)
        if orders is None:
            orders = self.order_service.get_all_orders()
        filtered = [o for o in orders if start <= o.created_at <= now]

        total_revenue = sum(o.total or 0 for o in filtered)
        completed = [o for o in filtered if o.status == OrderStatus.DELIVERED.value]
        completed_revenue = sum(o.total or 0 for o in completed)

        orders_by_status = {status: 0 for status in OrderStatus.values()}
        for order in filtered:
            if order.status in orders_by_status:
                orders_by_status[order.status] += 1

        orders_by_service: Dict[str, Dict[str, float]] = {}
        for order in filtered:
            for item in order.items:
                bucket = orders_by_service.setdefault(item.name, {"count": 0, "revenue": 0})
                bucket["count"] += item.quantity
                bucket["revenue"] += item.price * item.quantity

        # One bucket per calendar day from the period start through today
        series: Dict[date, Dict[str, float]] = {}
        day = start.date()
        while day <= now.date():
            series[day] = {"orders": 0, "revenue": 0}
            day += timedelta(days=1)
        for order in filtered:
            bucket = series.get(order.created_at.date())
            if bucket is not None:
                bucket["orders"] += 1
                bucket["revenue"] += order.total or 0

        count = len(filtered)
        return {
            "period": period if period in PERIODS else "week",
            "start": start,
            "total_orders": count,
            "total_revenue": total_revenue,
            "average_order_value": total_revenue / count if count else 0,
            "unique_customers": len({o.customer_id for o in filtered}),
            "orders_by_status": orders_by_status,
            "orders_by_service": orders_by_service,
            "completed_orders_count": len(completed),
            "completed_revenue": completed_revenue,
            "conversion_rate": len(completed) / count * 100 if count else 0,
            "time_series": [
                {"date": d.isoformat(), "orders": v["orders"], "revenue": v["revenue"]}
                for d, v in series.items()
            ]
        }

    def vendor_stats(self, vendor_id: int, now: Optional[datetime] = None) -> Dict[str, Any]:
        now = now or datetime.now()
        today = datetime.combine(now.date(), datetime.min.time())
        one_week_ago = today - timedelta(days=7)
        one_month_ago = months_ago(today, 1)

        orders = self.order_service.get_vendor_orders(vendor_id)
        delivered = [o for o in orders if o.status == OrderStatus.DELIVERED.value]

        def revenue_since(moment: datetime) -> float:
            return sum(o.total for o in delivered if o.created_at >= moment)

        return {
            "total_orders": len(orders),
            "pending_orders": len([o for o in orders if o.status in OPEN_STATUSES]),
            "completed_orders": len(delivered),
            "cancelled_orders": len([o for o in orders if o.status == OrderStatus.CANCELLED.value]),
            "total_revenue": sum(o.total for o in delivered),
            "daily_revenue": revenue_since(today),
            "weekly_revenue": revenue_since(one_week_ago),
            "monthly_revenue": revenue_since(one_month_ago)
        }

    @staticmethod
    def customer_summary(orders: List[Order]) -> Dict[str, Any]:
        # Profile page totals, including loyalty progress towards the next 500-point reward
        points = sum(o.loyalty_points or 0 for o in orders)
        return {
            "total_orders": len(orders),
            "active_orders": len([o for o in orders if o.status in OPEN_STATUSES]),
            "total_spent": sum(o.total for o in orders),
            "loyalty_points": points,
            "points_to_next_reward": 500 - (points % 500)
        }
