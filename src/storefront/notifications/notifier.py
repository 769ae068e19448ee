"""Fire-and-forget customer notifications.

The notifier renders an email on the caller's thread and hands delivery to a
background pool. Callers never wait on delivery and never see its failures:
a done-callback logs them. Nothing is retried.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor

import structlog

from storefront.config import DEFAULT_BAKERY_NAME, EmailSettings, notifier_workers
from storefront.notifications.channel import get_email_channel
from storefront.notifications.templates import get_template
from storefront.notifications.templates.kinds import NotificationKind

logger = structlog.get_logger(__name__)


class Notifier:
    """Dispatches order emails through an email channel adapter."""

    def __init__(self, channel=None, bakery_name=None, executor=None, max_workers=None):
        self.channel = channel if channel is not None else get_email_channel()
        self.bakery_name = bakery_name or DEFAULT_BAKERY_NAME
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers or notifier_workers(),
            thread_name_prefix="notifier",
        )
        self._pending: set[Future] = set()
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)

    @property
    def is_configured(self) -> bool:
        return self.channel.is_configured

    def send_order_confirmation(self, order) -> Future | None:
        return self._submit(
            NotificationKind.ORDER_CONFIRMATION.value,
            order,
            {},
        )

    def send_status_update(self, order, message) -> Future | None:
        return self._submit(
            NotificationKind.STATUS_UPDATE.value,
            order,
            {"message": message},
        )

    def _submit(self, kind, order, extra):
        if not self.is_configured:
            logger.debug(
                "Email transport not configured, skipping notification",
                kind=kind,
                order_id=str(order.id),
            )
            return None

        context = {
            "order_id": str(order.id),
            "customer_name": order.customer_name,
            "bakery_name": self.bakery_name,
            **extra,
        }
        rendered = get_template(kind).render(context)
        recipient = order.customer_email

        future = self._executor.submit(
            self.channel.send,
            to=recipient,
            subject=rendered["subject"],
            body=rendered["body"],
        )
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(lambda f: self._observe(f, kind, context["order_id"]))
        return future

    def _observe(self, future: Future, kind: str, order_id: str) -> None:
        try:
            self._log_outcome(future, kind, order_id)
        finally:
            with self._idle:
                self._pending.discard(future)
                if not self._pending:
                    self._idle.notify_all()

    def _log_outcome(self, future: Future, kind: str, order_id: str) -> None:
        if future.cancelled():
            logger.warning("Notification cancelled", kind=kind, order_id=order_id)
            return

        error = future.exception()
        if error is not None:
            logger.error(
                "Notification dispatch failed",
                kind=kind,
                order_id=order_id,
                error=str(error),
            )
            return

        result = future.result() or {}
        if result.get("status") == "sent":
            logger.info(
                "Notification sent",
                kind=kind,
                order_id=order_id,
                message_id=result.get("message_id"),
            )
        else:
            logger.error(
                "Notification dispatch failed",
                kind=kind,
                order_id=order_id,
                error=result.get("error", "Unknown dispatch error"),
            )

    def drain(self, timeout: float | None = None) -> None:
        """Block until every in-flight delivery has finished and been logged."""
        with self._idle:
            self._idle.wait_for(lambda: not self._pending, timeout=timeout)

    def shutdown(self, wait: bool = True) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=wait)


_notifier_instance = None


def get_notifier():
    """Return the process-wide notifier (singleton)."""
    global _notifier_instance
    if _notifier_instance is None:
        _notifier_instance = Notifier(bakery_name=EmailSettings.from_env().bakery_name)
    return _notifier_instance


def reset_notifier():
    """Shut down and forget the notifier singleton (useful for testing)."""
    global _notifier_instance
    if _notifier_instance is not None:
        _notifier_instance.shutdown(wait=True)
    _notifier_instance = None
