"""Order lifecycle: placing orders, changing status and logging messages.

The lifecycle validates input before touching the store, so a rejected call
leaves no partial state behind. Notifications are handed to the notifier and
never awaited; their outcome does not change what is stored or returned.
"""

import structlog
from protean.exceptions import ValidationError

from storefront.order.order import MessageType, Order, OrderStatus
from storefront.order.validation import message_input_errors, validate_order_input

logger = structlog.get_logger(__name__)


class OrderLifecycle:
    """Application service over an OrderStore and a Notifier."""

    def __init__(self, store, notifier):
        self.store = store
        self.notifier = notifier

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def list_orders(self):
        return self.store.list()

    def get_order(self, order_id):
        return self.store.require(order_id)

    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------
    def create_order(
        self,
        customer_name=None,
        customer_phone=None,
        customer_email=None,
        customer_address=None,
        delivery_time=None,
        items=None,
        special_instructions=None,
    ):
        """Validate, store and confirm a new order. Returns the stored Order."""
        data = validate_order_input(
            {
                "customer_name": customer_name,
                "customer_phone": customer_phone,
                "customer_email": customer_email,
                "customer_address": customer_address,
                "delivery_time": delivery_time,
                "items": items,
                "special_instructions": special_instructions,
            }
        )

        order = Order.place(**data)
        self.store.insert(order)
        logger.info("Order placed", order_id=str(order.id), total=order.total, items=len(order.items))

        self.notifier.send_order_confirmation(order)
        return order

    def update_status(self, order_id, status, message=None):
        """Set the order's status, logging ``message`` as a status update.

        Raises OrderNotFoundError before InvalidStatusError, so an unknown order
        is reported even when the status is also bad.
        """
        order = self.store.require(order_id)
        new_status = OrderStatus.parse(status)

        previous = order.status
        status_message = order.change_status(new_status, message)
        self.store.replace(order)
        logger.info(
            "Order status changed",
            order_id=str(order.id),
            from_status=previous,
            to_status=new_status.value,
        )

        if status_message is not None:
            self.notifier.send_status_update(order, status_message.content)
        return order

    def append_message(self, order_id, message_type, content):
        """Log a caller-tagged message on the order. Returns the OrderMessage."""
        errors = message_input_errors(message_type, content)
        if errors:
            raise ValidationError(errors)

        order = self.store.require(order_id)
        message = order.add_message(message_type, content)
        self.store.replace(order)
        logger.info("Order message added", order_id=str(order.id), message_type=message_type)
        return message

    def send_message(self, order_id, message_type, content):
        """Log a vendor message and email it to the customer when it is an email.

        Returns ``(message, sent)`` where ``sent`` says whether a delivery was
        dispatched. Delivery itself is not awaited.
        """
        message = self.append_message(order_id, message_type, content)

        sent = False
        if message_type == MessageType.EMAIL.value:
            order = self.store.require(order_id)
            sent = self.notifier.send_status_update(order, content) is not None

        return message, sent
