"""
No-op event publisher, the default when no message bus is configured.
"""
import structlog

from tradehub.application.interfaces.event_publisher import EventPublisher
from tradehub.domain.events.domain_events import DomainEvent

logger = structlog.get_logger(__name__)


class NoOpEventPublisher(EventPublisher):
    """Discards all events. Useful for testing and local development."""

    async def publish(self, event: DomainEvent) -> None:
        logger.debug("noop_event_discarded", event_type=type(event).__name__)
