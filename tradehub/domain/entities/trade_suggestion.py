from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID, uuid4

from tradehub.domain.entities.owner import OwnerSummary
from tradehub.domain.enums.listing_status import SuggestionStatus
from tradehub.domain.enums.trade_type import TradeType
from tradehub.domain.events.domain_events import DomainEvent, TradeSuggestionCreatedEvent

DEFAULT_TTL = timedelta(days=90)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TradeSuggestion:
    """A posted trade requirement: someone buying, selling, or looking for a partner or investor."""

    id: UUID = field(default_factory=uuid4)
    owner: OwnerSummary = field(default_factory=lambda: OwnerSummary(id=uuid4()))

    title: str = ""
    description: str = ""
    type: TradeType = TradeType.BUYING
    category: str = ""
    country: str = ""
    budget: str | None = None
    quantity: str | None = None
    timeline: str | None = None
    specifications: dict[str, Any] = field(default_factory=dict)
    contact_info: dict[str, Any] = field(default_factory=dict)

    status: SuggestionStatus = SuggestionStatus.ACTIVE
    priority: int = 0
    views: int = 0
    expires_at: datetime | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    _events: list[DomainEvent] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def create(
        cls,
        *,
        owner: OwnerSummary,
        title: str,
        description: str,
        type: TradeType,
        category: str,
        country: str,
        timeline: str,
        ttl: timedelta = DEFAULT_TTL,
        **details: Any,
    ) -> "TradeSuggestion":
        now = _utcnow()
        suggestion = cls(
            owner=owner,
            title=title,
            description=description,
            type=type,
            category=category,
            country=country,
            timeline=timeline,
            expires_at=now + ttl,
            created_at=now,
            updated_at=now,
            **details,
        )
        suggestion._events.append(
            TradeSuggestionCreatedEvent(
                suggestion_id=suggestion.id,
                owner_id=owner.id,
                type=type,
                category=category,
                country=country,
            )
        )
        return suggestion

    def collect_events(self) -> list[DomainEvent]:
        events = list(self._events)
        self._events.clear()
        return events
