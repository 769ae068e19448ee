"""Email channel port — abstract interface for email dispatch."""

from abc import ABC, abstractmethod


class EmailPort(ABC):
    """Abstract interface for email dispatch adapters."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the adapter can deliver at all; unconfigured adapters are skipped."""
        ...

    @abstractmethod
    def send(
        self,
        to: str,
        subject: str,
        body: str,
    ) -> dict:
        """Send a plain-text email message.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
