"""Order confirmation template — sent when an order is placed."""

from storefront.notifications.templates.kinds import NotificationKind


class OrderConfirmationTemplate:
    kind = NotificationKind.ORDER_CONFIRMATION.value

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        customer_name = context.get("customer_name", "there")
        bakery_name = context.get("bakery_name", "")
        return {
            "subject": f"Order Confirmation - {order_id}",
            "body": (
                f"Hello {customer_name},\n\n"
                f"Thank you for your order. Your order ID is {order_id}. "
                "We will notify you when it is ready.\n\n"
                f"Best regards,\n{bakery_name}"
            ),
        }
