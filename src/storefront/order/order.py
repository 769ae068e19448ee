"""Order aggregate — a customer's bakery order and its communication log.

An order is created in full, never deleted, and mutated in place by status
updates and message appends. Status moves are unrestricted: any status may
follow any other, including itself.

Statuses:
    new, preparing, ready, completed, cancelled
"""

import math
import threading
import time
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String, Text

from storefront.domain import storefront
from storefront.order.exceptions import InvalidStatusError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    NEW = "new"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value):
        """Return the status named by ``value`` or raise InvalidStatusError."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidStatusError(value)


class MessageType(Enum):
    """Message types the service acts on. Callers may tag messages with any other type."""

    STATUS_UPDATE = "status_update"
    EMAIL = "email"


ORDER_ID_PREFIX = "AD"


class OrderIdGenerator:
    """Time-based order identifiers that strictly increase within the process.

    Identifiers are ``AD`` followed by epoch milliseconds. Two orders created
    in the same millisecond get consecutive values.
    """

    def __init__(self, clock=time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            candidate = int(self._clock() * 1000)
            self._last = max(candidate, self._last + 1)
            return f"{ORDER_ID_PREFIX}{self._last}"


next_order_id = OrderIdGenerator()


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """A product line on an order.

    ``product_id`` is the caller's item id (``"bread"``); the entity keeps its
    own identity so that many orders can carry the same product.
    """

    product_id = String(required=True, max_length=100)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and not (math.isfinite(self.price) and self.price > 0):
            raise ValidationError({"price": ["Price must be a number greater than 0"]})

    @property
    def line_total(self):
        return self.price * self.quantity


@storefront.entity(part_of="Order")
class OrderMessage:
    """A timestamped note in the order's communication log."""

    type = String(required=True, max_length=50)
    content = Text(required=True)
    timestamp = DateTime()


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    customer_name = String(required=True, max_length=255)
    customer_phone = String(required=True, max_length=50)
    customer_email = String(required=True, max_length=254)
    customer_address = Text(required=True)
    delivery_time = String(required=True, max_length=64)  # ISO-8601, as submitted
    special_instructions = Text(default="")
    items = HasMany(OrderItem)
    total = Float(default=0.0)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.NEW.value,
    )
    messages = HasMany(OrderMessage)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_must_be_finite(self):
        if self.total is not None and not math.isfinite(self.total):
            raise ValidationError({"total": ["Order total is out of range"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        customer_name,
        customer_phone,
        customer_email,
        customer_address,
        delivery_time,
        items_data,
        special_instructions="",
        order_id=None,
    ):
        """Build a new order from already validated input.

        Args:
            items_data: List of dicts with id, name, price, quantity.
        """
        now = datetime.now(UTC)
        order = cls(
            id=order_id or next_order_id(),
            customer_name=customer_name,
            customer_phone=customer_phone,
            customer_email=customer_email,
            customer_address=customer_address,
            delivery_time=delivery_time,
            special_instructions=special_instructions or "",
            status=OrderStatus.NEW.value,
            created_at=now,
        )
        for data in items_data:
            order.add_items(
                OrderItem(
                    product_id=str(data["id"]),
                    name=data["name"],
                    price=float(data["price"]),
                    quantity=int(data["quantity"]),
                )
            )
        order.total = calculate_total(items_data)
        return order

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def change_status(self, new_status, message=None):
        """Move to ``new_status`` and log ``message`` as a status update.

        Returns the appended OrderMessage, or None when no message was given.
        """
        status = OrderStatus.parse(new_status)
        self.status = status.value
        self.updated_at = datetime.now(UTC)

        if isinstance(message, str) and message:
            return self.add_message(MessageType.STATUS_UPDATE.value, message)
        return None

    def add_message(self, message_type, content):
        message = OrderMessage(
            type=message_type,
            content=content,
            timestamp=datetime.now(UTC),
        )
        self.add_messages(message)
        return message

    @property
    def order_status(self):
        return OrderStatus(self.status)


def calculate_total(items_data):
    """Sum of price * quantity over raw item dicts."""
    return sum(float(item["price"]) * int(item["quantity"]) for item in items_data)
