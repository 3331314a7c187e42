"""
RabbitMQ event publisher.

New listings are announced on the `tradehub.events` topic exchange so other
marketplace services (alerting buyers whose trade suggestions match a new
product category, search indexing) can react without polling the database.

pika is blocking, so each batch of events is sent from the thread-pool
executor over a single connection with publisher confirms enabled.
"""
import asyncio
import json
from dataclasses import dataclass
from functools import partial

import pika
import structlog

from tradehub.application.interfaces.event_publisher import EventPublisher
from tradehub.config import settings
from tradehub.domain.events.domain_events import (
    DomainEvent,
    ProductCreatedEvent,
    TradeSuggestionCreatedEvent,
)

logger = structlog.get_logger(__name__)

EXCHANGE_NAME = "tradehub.events"


def event_routing_key(event: DomainEvent) -> str:
    if isinstance(event, ProductCreatedEvent):
        return "product.created"
    if isinstance(event, TradeSuggestionCreatedEvent):
        return f"trade_suggestion.created.{event.type.value.lower()}"
    return "event.unknown"


def serialise_event(event: DomainEvent) -> str:
    payload: dict = {  # type: ignore[type-arg]
        "event_type": event_routing_key(event),
        "event_id": str(event.event_id),
        "occurred_at": event.occurred_at.isoformat(),
    }

    if isinstance(event, ProductCreatedEvent):
        payload.update(
            {
                "product_id": str(event.product_id),
                "owner_id": str(event.owner_id),
                "category_id": str(event.category_id),
                "title": event.title,
                "country": event.country,
                "price": event.price,
            }
        )
    elif isinstance(event, TradeSuggestionCreatedEvent):
        payload.update(
            {
                "suggestion_id": str(event.suggestion_id),
                "owner_id": str(event.owner_id),
                "type": event.type.value,
                "category": event.category,
                "country": event.country,
            }
        )

    return json.dumps(payload, default=str)


@dataclass(frozen=True)
class OutboundMessage:
    routing_key: str
    body: str
    message_id: str
    type: str


def to_message(event: DomainEvent) -> OutboundMessage:
    return OutboundMessage(
        routing_key=event_routing_key(event),
        body=serialise_event(event),
        message_id=str(event.event_id),
        type=type(event).__name__,
    )


def _send_batch(rabbitmq_url: str, messages: list[OutboundMessage]) -> None:
    connection = pika.BlockingConnection(pika.URLParameters(rabbitmq_url))
    try:
        channel = connection.channel()
        # basic_publish raises on a nack instead of losing the message silently.
        channel.confirm_delivery()
        channel.exchange_declare(exchange=EXCHANGE_NAME, exchange_type="topic", durable=True)
        for message in messages:
            channel.basic_publish(
                exchange=EXCHANGE_NAME,
                routing_key=message.routing_key,
                body=message.body.encode(),
                properties=pika.BasicProperties(
                    content_type="application/json",
                    delivery_mode=pika.DeliveryMode.Persistent,
                    message_id=message.message_id,
                    type=message.type,
                ),
            )
    finally:
        connection.close()


class RabbitMQPublisher(EventPublisher):
    """Publishes listing events to a RabbitMQ topic exchange."""

    def __init__(self, rabbitmq_url: str = settings.rabbitmq_url) -> None:
        self._url = rabbitmq_url

    async def publish(self, event: DomainEvent) -> None:
        await self.publish_many([event])

    async def publish_many(self, events: list[DomainEvent]) -> None:
        if not events:
            return
        messages = [to_message(event) for event in events]
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, partial(_send_batch, self._url, messages))
        except Exception as exc:
            # The listing is already stored; a lost announcement is only logged.
            logger.error(
                "failed_to_publish_events",
                routing_keys=[m.routing_key for m in messages],
                event_ids=[m.message_id for m in messages],
                error=str(exc),
            )
            return
        logger.debug("events_published", count=len(messages))
