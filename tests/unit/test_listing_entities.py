"""Unit tests for the Product and TradeSuggestion entities."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

from tradehub.domain.entities.category import CategorySummary
from tradehub.domain.entities.owner import OwnerSummary
from tradehub.domain.entities.product import Product, slugify_title
from tradehub.domain.entities.trade_suggestion import TradeSuggestion
from tradehub.domain.enums.listing_status import ProductStatus, SuggestionStatus
from tradehub.domain.enums.trade_type import TradeType
from tradehub.domain.events.domain_events import ProductCreatedEvent, TradeSuggestionCreatedEvent


def _owner() -> OwnerSummary:
    return OwnerSummary(id=uuid4(), name="Asha", company="Spice Route Exports")


def _category() -> CategorySummary:
    return CategorySummary(id=uuid4(), name="Agriculture & Food", slug="agriculture-food")


class TestSlugifyTitle:
    def test_collapses_separators_and_appends_timestamp(self) -> None:
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert slugify_title("  Basmati Rice -- 1121 (Premium)! ", now) == (
            "basmati-rice-1121-premium-1704067200000"
        )


class TestProduct:
    def test_create_sets_active_status_and_slug(self) -> None:
        product = Product.create(
            owner=_owner(),
            category=_category(),
            title="Basmati Rice",
            description="Long grain",
            country="India",
            price=Decimal("1200"),
        )
        assert product.status is ProductStatus.ACTIVE
        assert product.slug.startswith("basmati-rice-")
        assert product.views == 0
        assert product.created_at == product.updated_at

    def test_create_emits_product_created_event(self) -> None:
        owner = _owner()
        category = _category()
        product = Product.create(
            owner=owner,
            category=category,
            title="Basmati Rice",
            description="Long grain",
            country="India",
            price=Decimal("1200.50"),
        )
        events = product.collect_events()
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, ProductCreatedEvent)
        assert event.product_id == product.id
        assert event.owner_id == owner.id
        assert event.category_id == category.id
        assert event.price == 1200.5
        assert product.collect_events() == []

    def test_create_passes_optional_details(self) -> None:
        product = Product.create(
            owner=_owner(),
            category=_category(),
            title="Cotton Yarn",
            description="30s combed",
            country="Egypt",
            brand="NileSpin",
            images=["https://cdn.example.com/yarn.jpg"],
        )
        assert product.brand == "NileSpin"
        assert product.images == ["https://cdn.example.com/yarn.jpg"]
        assert product.price is None

    def test_search_attributes_resolve_through_relations(self) -> None:
        product = Product(owner=_owner(), category=_category())
        assert product.owner_company == "Spice Route Exports"
        assert product.category_name == "Agriculture & Food"

    def test_record_view(self) -> None:
        product = Product(views=4)
        product.record_view()
        assert product.views == 5

    def test_only_active_is_public(self) -> None:
        assert ProductStatus.ACTIVE.is_public
        assert not ProductStatus.PENDING.is_public
        assert not SuggestionStatus.CLOSED.is_public


class TestTradeSuggestion:
    def test_create_sets_expiry_and_emits_event(self) -> None:
        owner = _owner()
        suggestion = TradeSuggestion.create(
            owner=owner,
            title="Buying 20t cashews",
            description="W320 grade",
            type=TradeType.BUYING,
            category="Agriculture & Food",
            country="Vietnam",
            timeline="Q3",
            ttl=timedelta(days=30),
        )
        assert suggestion.status is SuggestionStatus.ACTIVE
        assert suggestion.expires_at == suggestion.created_at + timedelta(days=30)

        events = suggestion.collect_events()
        assert len(events) == 1
        assert isinstance(events[0], TradeSuggestionCreatedEvent)
        assert events[0].type is TradeType.BUYING
        assert events[0].owner_id == owner.id

    def test_default_ttl_is_ninety_days(self) -> None:
        suggestion = TradeSuggestion.create(
            owner=_owner(),
            title="Selling jute bags",
            description="Custom print",
            type=TradeType.SELLING,
            category="Textiles",
            country="Bangladesh",
            timeline="Immediate",
        )
        assert suggestion.expires_at - suggestion.created_at == timedelta(days=90)  # type: ignore[operator]
