from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any
from uuid import UUID

import structlog

from tradehub.application.errors import UnknownUserError
from tradehub.application.interfaces.catalog_repository import UserDirectory
from tradehub.application.interfaces.event_publisher import EventPublisher
from tradehub.application.interfaces.listing_repository import TradeSuggestionRepository
from tradehub.domain.entities.trade_suggestion import DEFAULT_TTL, TradeSuggestion
from tradehub.domain.enums.trade_type import TradeType

logger = structlog.get_logger(__name__)


@dataclass
class CreateTradeSuggestionInput:
    owner_id: UUID
    title: str
    description: str
    type: TradeType
    category: str
    country: str
    timeline: str
    budget: str | None = None
    quantity: str | None = None
    specifications: dict[str, Any] = field(default_factory=dict)
    contact_info: dict[str, Any] = field(default_factory=dict)


class CreateTradeSuggestion:
    """Use case: post a trade suggestion that stays open until its expiry date."""

    def __init__(
        self,
        suggestion_repo: TradeSuggestionRepository,
        user_directory: UserDirectory,
        event_publisher: EventPublisher,
        ttl: timedelta = DEFAULT_TTL,
    ) -> None:
        self._suggestion_repo = suggestion_repo
        self._user_directory = user_directory
        self._event_publisher = event_publisher
        self._ttl = ttl

    async def execute(self, input_data: CreateTradeSuggestionInput) -> TradeSuggestion:
        owner = await self._user_directory.get_owner(input_data.owner_id)
        if owner is None:
            raise UnknownUserError(input_data.owner_id)

        suggestion = TradeSuggestion.create(
            owner=owner,
            title=input_data.title,
            description=input_data.description,
            type=input_data.type,
            category=input_data.category,
            country=input_data.country,
            timeline=input_data.timeline,
            ttl=self._ttl,
            budget=input_data.budget,
            quantity=input_data.quantity,
            specifications=input_data.specifications,
            contact_info=input_data.contact_info,
        )

        await self._suggestion_repo.add(suggestion)
        # Sent before the request session commits; see CreateProduct.
        await self._event_publisher.publish_many(suggestion.collect_events())

        logger.info(
            "trade_suggestion_created",
            suggestion_id=str(suggestion.id),
            owner_id=str(owner.id),
            type=suggestion.type.value,
        )
        return suggestion
