"""Email channel registry.

Provides singleton access to the email adapter. ``EMAIL_ADAPTER`` selects
``smtp`` (the default, configured from ``SMTP_*`` variables) or ``fake``.
"""

import os

from storefront.config import EmailSettings

_email_channel = None


def get_email_channel():
    """Return the configured email adapter (singleton)."""
    global _email_channel
    if _email_channel is None:
        adapter = os.environ.get("EMAIL_ADAPTER", "smtp").lower()
        if adapter == "smtp":
            from storefront.notifications.channel.smtp_email import SMTPEmailAdapter

            _email_channel = SMTPEmailAdapter(EmailSettings.from_env())
        elif adapter == "fake":
            from storefront.notifications.channel.fake_email import FakeEmailAdapter

            _email_channel = FakeEmailAdapter()
        else:
            raise ValueError(f"Unknown email adapter: {adapter}")
    return _email_channel


def reset_channels():
    """Reset the channel singleton (useful for testing)."""
    global _email_channel
    _email_channel = None
