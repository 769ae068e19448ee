"""Tests for order statistics scans."""

from datetime import date, timedelta

from storefront.order.order import Order
from storefront.order.stats import (
    customer_summary,
    order_stats_overview,
    vendor_analytics,
    vendor_dashboard,
)


def _order(status="new"):
    order = Order.place(
        customer_name="Ada",
        customer_phone="123",
        customer_email="ada@example.com",
        customer_address="1 Lane",
        delivery_time="2026-10-20T09:30:00Z",
        items_data=[{"id": "bread", "name": "Bread", "price": 1.0, "quantity": 1}],
    )
    if status != "new":
        order.change_status(status)
    return order


def _today_of(order):
    return order.created_at.astimezone().date()


class TestOverview:
    def test_empty(self):
        assert order_stats_overview([]) == {
            "totalOrders": 0,
            "statusCounts": {"new": 0, "preparing": 0, "ready": 0, "completed": 0, "cancelled": 0},
        }

    def test_histogram_covers_all_statuses(self):
        orders = [_order("new"), _order("new"), _order("completed")]
        assert order_stats_overview(orders) == {
            "totalOrders": 3,
            "statusCounts": {"new": 2, "preparing": 0, "ready": 0, "completed": 1, "cancelled": 0},
        }


class TestVendorDashboard:
    def test_pending_is_everything_not_completed(self):
        orders = [_order(s) for s in ("new", "preparing", "ready", "completed", "cancelled")]
        summary = vendor_dashboard(orders, today=_today_of(orders[0]))
        assert summary["totalOrders"] == 5
        assert summary["pendingOrders"] == 4
        assert summary["todayOrders"] == 5

    def test_orders_from_other_days_not_counted_today(self):
        order = _order()
        tomorrow = _today_of(order) + timedelta(days=1)
        assert vendor_dashboard([order], today=tomorrow)["todayOrders"] == 0

    def test_defaults_to_current_date(self):
        orders = [_order()]
        assert vendor_dashboard(orders) == vendor_dashboard(orders, today=date.today())


class TestCustomerSummary:
    def test_pending_is_new_or_preparing(self):
        orders = [_order(s) for s in ("new", "preparing", "ready", "completed", "cancelled")]
        summary = customer_summary(orders, today=_today_of(orders[0]))
        assert summary == {"totalOrders": 5, "todayOrders": 5, "pendingOrders": 2}


class TestVendorAnalytics:
    def test_counts_completed(self):
        orders = [_order("completed"), _order("completed"), _order("cancelled")]
        assert vendor_analytics(orders) == {"totalOrders": 3, "completedOrders": 2}
