from enum import Enum


class NotificationKind(Enum):
    ORDER_CONFIRMATION = "OrderConfirmation"
    STATUS_UPDATE = "StatusUpdate"
