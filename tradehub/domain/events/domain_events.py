from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from tradehub.domain.enums.trade_type import TradeType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class ProductCreatedEvent(DomainEvent):
    """Published when a user lists a new product."""

    product_id: UUID = field(default_factory=uuid4)
    owner_id: UUID = field(default_factory=uuid4)
    category_id: UUID = field(default_factory=uuid4)
    title: str = ""
    country: str = ""
    price: float | None = None


@dataclass(frozen=True)
class TradeSuggestionCreatedEvent(DomainEvent):
    """Published when a user posts a new trade suggestion."""

    suggestion_id: UUID = field(default_factory=uuid4)
    owner_id: UUID = field(default_factory=uuid4)
    type: TradeType = TradeType.BUYING
    category: str = ""
    country: str = ""
