"""Storefront bounded context for bakery orders and their customer messages.

Orders live in memory for the lifetime of the process. The Protean domain is
the composition root for the Order aggregate; the order store, lifecycle
service and notifier are built around it by the application factory.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
