"""Template registry — maps NotificationKind to template classes."""

from storefront.notifications.templates.kinds import NotificationKind
from storefront.notifications.templates.order_confirmation import OrderConfirmationTemplate
from storefront.notifications.templates.status_update import StatusUpdateTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationKind.ORDER_CONFIRMATION.value: OrderConfirmationTemplate,
    NotificationKind.STATUS_UPDATE.value: StatusUpdateTemplate,
}


def get_template(kind: str):
    """Look up a template class by notification kind string."""
    template_cls = TEMPLATE_REGISTRY.get(kind)
    if template_cls is None:
        raise ValueError(f"No template registered for notification kind: {kind}")
    return template_cls
