import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any
from uuid import UUID, uuid4

from tradehub.domain.entities.category import CategorySummary
from tradehub.domain.entities.owner import OwnerSummary
from tradehub.domain.enums.listing_status import ProductStatus
from tradehub.domain.enums.product_availability import ProductAvailability
from tradehub.domain.enums.product_condition import ProductCondition
from tradehub.domain.events.domain_events import DomainEvent, ProductCreatedEvent

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def slugify_title(title: str, now: datetime | None = None) -> str:
    """URL slug for a product title, suffixed with a millisecond timestamp."""
    base = _SLUG_SEPARATORS.sub("-", title.lower()).strip("-")
    stamp = int((now or _utcnow()).timestamp() * 1000)
    return f"{base}-{stamp}"


@dataclass
class Product:
    """
    A product listed by an exporter, importer or trade agent.

    The browse/search path only ever reads products; views is the one field
    that moves after creation.
    """

    # Identity
    id: UUID = field(default_factory=uuid4)
    owner: OwnerSummary = field(default_factory=lambda: OwnerSummary(id=uuid4()))
    category: CategorySummary = field(
        default_factory=lambda: CategorySummary(id=uuid4(), name="", slug="")
    )

    # Listing content
    title: str = ""
    slug: str = ""
    description: str = ""
    short_desc: str | None = None
    brand: str | None = None
    model: str | None = None
    hs_code: str | None = None
    origin: str | None = None
    images: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    specifications: dict[str, Any] = field(default_factory=dict)

    # Commercial terms
    price: Decimal | None = None
    currency: str = "USD"
    min_order: str | None = None
    unit: str | None = None
    condition: ProductCondition = ProductCondition.NEW
    availability: ProductAvailability = ProductAvailability.AVAILABLE

    # Location
    country: str = ""
    state: str | None = None
    city: str | None = None

    # Lifecycle
    status: ProductStatus = ProductStatus.ACTIVE
    views: int = 0
    is_promoted: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    _events: list[DomainEvent] = field(default_factory=list, repr=False, compare=False)

    @property
    def owner_company(self) -> str | None:
        return self.owner.company

    @property
    def category_name(self) -> str:
        return self.category.name

    # -------------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        *,
        owner: OwnerSummary,
        category: CategorySummary,
        title: str,
        description: str,
        country: str,
        price: Decimal | None = None,
        condition: ProductCondition = ProductCondition.NEW,
        availability: ProductAvailability = ProductAvailability.AVAILABLE,
        **details: Any,
    ) -> "Product":
        now = _utcnow()
        product = cls(
            owner=owner,
            category=category,
            title=title,
            slug=slugify_title(title, now),
            description=description,
            country=country,
            price=price,
            condition=condition,
            availability=availability,
            created_at=now,
            updated_at=now,
            **details,
        )
        product._events.append(
            ProductCreatedEvent(
                product_id=product.id,
                owner_id=owner.id,
                category_id=category.id,
                title=title,
                country=country,
                price=float(price) if price is not None else None,
            )
        )
        return product

    def record_view(self) -> None:
        self.views += 1

    def collect_events(self) -> list[DomainEvent]:
        """Return pending events and clear the internal buffer."""
        events = list(self._events)
        self._events.clear()
        return events
