"""Environment-driven settings for the storefront."""

import os
from dataclasses import dataclass

DEFAULT_BAKERY_NAME = "Abba's Delight Bakery"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EmailSettings:
    """SMTP transport settings.

    Email is considered configured only when host, port, user and password are
    all present. Anything less turns every notification into a no-op.
    """

    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    secure: bool = False
    sender: str | None = None
    bakery_name: str = DEFAULT_BAKERY_NAME
    timeout: float = 10.0

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.port and self.user and self.password)

    @property
    def from_address(self) -> str | None:
        return self.sender or self.user

    @classmethod
    def from_env(cls) -> "EmailSettings":
        port = os.environ.get("SMTP_PORT")
        return cls(
            host=os.environ.get("SMTP_HOST") or None,
            port=int(port) if port else None,
            user=os.environ.get("SMTP_USER") or None,
            password=os.environ.get("SMTP_PASS") or None,
            secure=_env_flag("SMTP_SECURE"),
            sender=os.environ.get("SMTP_FROM") or None,
            bakery_name=os.environ.get("BAKERY_NAME", DEFAULT_BAKERY_NAME),
            timeout=float(os.environ.get("SMTP_TIMEOUT", "10")),
        )


def notifier_workers() -> int:
    """Size of the background pool that delivers notifications."""
    return int(os.environ.get("NOTIFIER_WORKERS", "2"))
