"""Status update template — carries the vendor's note to the customer."""

from storefront.notifications.templates.kinds import NotificationKind


class StatusUpdateTemplate:
    kind = NotificationKind.STATUS_UPDATE.value

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        customer_name = context.get("customer_name", "there")
        message = context.get("message", "")
        bakery_name = context.get("bakery_name", "")
        return {
            "subject": f"Order Status Update - {order_id}",
            "body": f"Hello {customer_name},\n\n{message}\n\nBest regards,\n{bakery_name}",
        }
