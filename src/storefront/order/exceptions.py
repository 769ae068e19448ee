"""Errors raised by the order store and lifecycle.

Input validation failures use ``protean.exceptions.ValidationError`` with a
field-keyed ``messages`` dict; the classes here cover lookups and statuses.
"""


class OrderingError(Exception):
    """Base class for storefront ordering errors."""


class OrderNotFoundError(OrderingError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")


class DuplicateOrderError(OrderingError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order already exists: {order_id}")


class InvalidStatusError(OrderingError):
    def __init__(self, status):
        self.status = status
        super().__init__(f"Invalid status value: {status!r}")
