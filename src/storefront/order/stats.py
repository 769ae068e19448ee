"""Order statistics, computed by scanning the full order list on demand.

Two definitions of "pending" exist side by side: the vendor dashboard counts
every order that is not completed, while the customer storefront counts only
orders that are new or preparing.
"""

from datetime import date

from storefront.order.order import OrderStatus

_VENDOR_DONE = {OrderStatus.COMPLETED.value}
_CUSTOMER_PENDING = {OrderStatus.NEW.value, OrderStatus.PREPARING.value}


def _local_date(moment):
    if moment is None:
        return None
    # Naive timestamps are read as local time by astimezone()
    return moment.astimezone().date()


def _count_today(orders, today):
    today = today or date.today()
    return sum(1 for order in orders if _local_date(order.created_at) == today)


def order_stats_overview(orders):
    """Total orders and a histogram over the five known statuses."""
    status_counts = {status.value: 0 for status in OrderStatus}
    for order in orders:
        if order.status in status_counts:
            status_counts[order.status] += 1

    return {
        "totalOrders": len(orders),
        "statusCounts": status_counts,
    }


def vendor_dashboard(orders, today: date | None = None):
    return {
        "totalOrders": len(orders),
        "todayOrders": _count_today(orders, today),
        "pendingOrders": sum(1 for order in orders if order.status not in _VENDOR_DONE),
    }


def customer_summary(orders, today: date | None = None):
    return {
        "totalOrders": len(orders),
        "todayOrders": _count_today(orders, today),
        "pendingOrders": sum(1 for order in orders if order.status in _CUSTOMER_PENDING),
    }


def vendor_analytics(orders):
    return {
        "totalOrders": len(orders),
        "completedOrders": sum(1 for order in orders if order.status == OrderStatus.COMPLETED.value),
    }
