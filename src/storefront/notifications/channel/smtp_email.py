"""SMTP email adapter — delivers through the configured mail server."""

import smtplib
from email.message import EmailMessage
from email.utils import make_msgid

import structlog

from storefront.config import EmailSettings
from storefront.notifications.channel.email_port import EmailPort

logger = structlog.get_logger(__name__)


class SMTPEmailAdapter(EmailPort):
    """Sends plain-text mail over SMTP, with implicit TLS when ``secure`` is set."""

    def __init__(self, settings: EmailSettings):
        self.settings = settings

    @property
    def is_configured(self) -> bool:
        return self.settings.is_configured

    def _connect(self):
        settings = self.settings
        if settings.secure:
            return smtplib.SMTP_SSL(settings.host, settings.port, timeout=settings.timeout)

        connection = smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout)
        connection.ehlo()
        if connection.has_extn("starttls"):
            connection.starttls()
            connection.ehlo()
        return connection

    def send(self, to: str, subject: str, body: str) -> dict:
        if not self.is_configured:
            return {"message_id": None, "status": "failed", "error": "SMTP transport is not configured"}

        message = EmailMessage()
        message["From"] = self.settings.from_address
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(body)

        with self._connect() as connection:
            connection.login(self.settings.user, self.settings.password)
            connection.send_message(message)

        logger.debug("Email handed to SMTP server", to=to, subject=subject)
        return {"message_id": message["Message-ID"], "status": "sent"}
