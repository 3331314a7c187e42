"""Unit tests for event serialisation and the publishers."""
import json
from unittest.mock import patch
from uuid import uuid4

import pytest

from tradehub.domain.enums.trade_type import TradeType
from tradehub.domain.events.domain_events import ProductCreatedEvent, TradeSuggestionCreatedEvent
from tradehub.infrastructure.messaging.noop_publisher import NoOpEventPublisher
from tradehub.infrastructure.messaging.rabbitmq_publisher import (
    RabbitMQPublisher,
    event_routing_key,
    serialise_event,
)


class TestSerialisation:
    def test_product_created(self) -> None:
        event = ProductCreatedEvent(product_id=uuid4(), title="Rice", country="India", price=12.5)
        payload = json.loads(serialise_event(event))
        assert payload["event_type"] == "product.created"
        assert payload["product_id"] == str(event.product_id)
        assert payload["price"] == 12.5

    def test_trade_suggestion_routing_key_includes_type(self) -> None:
        event = TradeSuggestionCreatedEvent(type=TradeType.PARTNERSHIP, category="Textiles")
        assert event_routing_key(event) == "trade_suggestion.created.partnership"
        payload = json.loads(serialise_event(event))
        assert payload["type"] == "PARTNERSHIP"
        assert payload["category"] == "Textiles"


class TestRabbitMQPublisher:
    @pytest.mark.asyncio
    async def test_sends_events_in_one_batch(self) -> None:
        product_event = ProductCreatedEvent(title="Rice")
        suggestion_event = TradeSuggestionCreatedEvent(type=TradeType.SELLING)
        with patch("tradehub.infrastructure.messaging.rabbitmq_publisher._send_batch") as send:
            await RabbitMQPublisher("amqp://test").publish_many([product_event, suggestion_event])

        send.assert_called_once()
        url, messages = send.call_args[0]
        assert url == "amqp://test"
        assert [m.routing_key for m in messages] == [
            "product.created",
            "trade_suggestion.created.selling",
        ]
        assert messages[0].message_id == str(product_event.event_id)
        assert messages[0].type == "ProductCreatedEvent"
        assert json.loads(messages[0].body)["title"] == "Rice"

    @pytest.mark.asyncio
    async def test_single_publish_is_a_batch_of_one(self) -> None:
        with patch("tradehub.infrastructure.messaging.rabbitmq_publisher._send_batch") as send:
            await RabbitMQPublisher("amqp://test").publish(ProductCreatedEvent())
        _, messages = send.call_args[0]
        assert len(messages) == 1

    @pytest.mark.asyncio
    async def test_no_events_opens_no_connection(self) -> None:
        with patch("tradehub.infrastructure.messaging.rabbitmq_publisher._send_batch") as send:
            await RabbitMQPublisher("amqp://test").publish_many([])
        send.assert_not_called()

    @pytest.mark.asyncio
    async def test_broker_failure_is_logged_not_raised(self) -> None:
        with patch(
            "tradehub.infrastructure.messaging.rabbitmq_publisher._send_batch",
            side_effect=ConnectionError("broker down"),
        ):
            await RabbitMQPublisher("amqp://test").publish(ProductCreatedEvent())


class TestNoOpPublisher:
    @pytest.mark.asyncio
    async def test_discards_events(self) -> None:
        await NoOpEventPublisher().publish_many([ProductCreatedEvent(), ProductCreatedEvent()])
