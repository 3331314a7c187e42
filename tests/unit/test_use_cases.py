"""Unit tests for application use cases; all dependencies are mocked."""
from datetime import timedelta
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from tradehub.application.errors import (
    CategoryNotFoundError,
    ListingNotFoundError,
    UnknownUserError,
)
from tradehub.application.query.filter_parser import FilterValidationError
from tradehub.application.use_cases.create_product import CreateProduct, CreateProductInput
from tradehub.application.use_cases.create_trade_suggestion import (
    CreateTradeSuggestion,
    CreateTradeSuggestionInput,
)
from tradehub.application.use_cases.get_product import GetProduct, GetProductInput
from tradehub.application.use_cases.list_categories import ListCategories
from tradehub.application.use_cases.search_products import SearchProducts, SearchProductsInput
from tradehub.domain.entities.category import Category
from tradehub.domain.entities.owner import OwnerSummary
from tradehub.domain.entities.product import Product
from tradehub.domain.enums.listing_status import ProductStatus
from tradehub.domain.enums.trade_type import TradeType
from tradehub.domain.events.domain_events import ProductCreatedEvent, TradeSuggestionCreatedEvent


def _make_product_repo(product: Product | None = None) -> MagicMock:
    repo = MagicMock()
    repo.add = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=product)
    repo.increment_views = AsyncMock()
    repo.find = AsyncMock(return_value=[])
    repo.count = AsyncMock(return_value=0)
    return repo


def _make_directory(owner: OwnerSummary | None) -> MagicMock:
    directory = MagicMock()
    directory.get_owner = AsyncMock(return_value=owner)
    return directory


def _make_category_repo(category: Category | None) -> MagicMock:
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=category)
    repo.list_active = AsyncMock(return_value=[category] if category else [])
    return repo


def _make_publisher() -> MagicMock:
    pub = MagicMock()
    pub.publish_many = AsyncMock()
    return pub


def _owner() -> OwnerSummary:
    return OwnerSummary(id=uuid4(), name="Asha", company="Spice Route Exports", is_verified=True)


def _category(is_active: bool = True) -> Category:
    return Category(id=uuid4(), name="Agriculture & Food", slug="agriculture-food", is_active=is_active)


class TestSearchProducts:
    @pytest.mark.asyncio
    async def test_reads_page_and_total(self) -> None:
        repo = _make_product_repo()
        repo.count = AsyncMock(return_value=25)
        use_case = SearchProducts(repo)

        result = await use_case.execute(
            SearchProductsInput(query_params={"page": "3", "limit": "10"})
        )

        repo.find.assert_awaited_once()
        _, kwargs = repo.find.call_args
        assert kwargs == {"skip": 20, "take": 5}
        assert result.pagination.total_pages == 3
        assert result.pagination.has_next_page is False

    @pytest.mark.asyncio
    async def test_uses_configured_default_limit(self) -> None:
        repo = _make_product_repo()
        repo.count = AsyncMock(return_value=100)
        use_case = SearchProducts(repo, default_limit=24)

        result = await use_case.execute(SearchProductsInput(query_params={}))

        assert repo.find.call_args.kwargs["take"] == 24
        assert result.pagination.limit == 24

    @pytest.mark.asyncio
    async def test_page_beyond_any_total_returns_empty_page(self) -> None:
        repo = _make_product_repo()
        repo.count = AsyncMock(return_value=25)
        use_case = SearchProducts(repo)

        result = await use_case.execute(
            SearchProductsInput(query_params={"page": "10000000000000000000"})
        )

        repo.find.assert_not_called()
        assert result.items == []
        assert result.pagination.total_count == 25
        assert result.pagination.has_previous_page is True

    @pytest.mark.asyncio
    async def test_validation_error_skips_store(self) -> None:
        repo = _make_product_repo()
        use_case = SearchProducts(repo)

        with pytest.raises(FilterValidationError):
            await use_case.execute(SearchProductsInput(query_params={"availability": "SOON"}))

        repo.find.assert_not_called()
        repo.count.assert_not_called()


class TestGetProduct:
    @pytest.mark.asyncio
    async def test_counts_view(self) -> None:
        product = Product(views=2)
        repo = _make_product_repo(product)

        result = await GetProduct(repo).execute(GetProductInput(product_id=product.id))

        repo.increment_views.assert_awaited_once_with(product.id)
        assert result.views == 3

    @pytest.mark.asyncio
    async def test_raises_when_missing(self) -> None:
        repo = _make_product_repo(None)
        with pytest.raises(ListingNotFoundError):
            await GetProduct(repo).execute(GetProductInput(product_id=uuid4()))

    @pytest.mark.asyncio
    async def test_hides_non_public_products(self) -> None:
        repo = _make_product_repo(Product(status=ProductStatus.PENDING))
        with pytest.raises(ListingNotFoundError):
            await GetProduct(repo).execute(GetProductInput(product_id=uuid4()))
        repo.increment_views.assert_not_called()


class TestCreateProduct:
    def _input(self, **overrides) -> CreateProductInput:  # type: ignore[no-untyped-def]
        values = dict(
            owner_id=uuid4(),
            category_id=uuid4(),
            title="Basmati Rice",
            description="Long grain",
            country="India",
            price=Decimal("1200"),
            details={"brand": "Tilda", "keywords": ["rice"]},
        )
        values.update(overrides)
        return CreateProductInput(**values)

    @pytest.mark.asyncio
    async def test_saves_and_publishes(self) -> None:
        owner = _owner()
        category = _category()
        repo = _make_product_repo()
        publisher = _make_publisher()
        use_case = CreateProduct(
            repo, _make_category_repo(category), _make_directory(owner), publisher
        )

        product = await use_case.execute(self._input(owner_id=owner.id, category_id=category.id))

        repo.add.assert_awaited_once_with(product)
        assert product.owner == owner
        assert product.category == category.summary()
        assert product.brand == "Tilda"
        assert product.status is ProductStatus.ACTIVE

        published = publisher.publish_many.call_args[0][0]
        assert len(published) == 1
        assert isinstance(published[0], ProductCreatedEvent)

    @pytest.mark.asyncio
    async def test_publishes_only_after_add(self) -> None:
        owner = _owner()
        category = _category()
        calls: list[str] = []
        repo = _make_product_repo()
        repo.add = AsyncMock(side_effect=lambda product: calls.append("add"))
        publisher = _make_publisher()
        publisher.publish_many = AsyncMock(side_effect=lambda events: calls.append("publish"))
        use_case = CreateProduct(
            repo, _make_category_repo(category), _make_directory(owner), publisher
        )

        await use_case.execute(self._input(owner_id=owner.id, category_id=category.id))

        assert calls == ["add", "publish"]

    @pytest.mark.asyncio
    async def test_failed_add_publishes_nothing(self) -> None:
        owner = _owner()
        category = _category()
        repo = _make_product_repo()
        repo.add = AsyncMock(side_effect=RuntimeError("flush failed"))
        publisher = _make_publisher()
        use_case = CreateProduct(
            repo, _make_category_repo(category), _make_directory(owner), publisher
        )

        with pytest.raises(RuntimeError):
            await use_case.execute(self._input(owner_id=owner.id, category_id=category.id))

        publisher.publish_many.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user(self) -> None:
        repo = _make_product_repo()
        use_case = CreateProduct(
            repo, _make_category_repo(_category()), _make_directory(None), _make_publisher()
        )
        with pytest.raises(UnknownUserError):
            await use_case.execute(self._input())
        repo.add.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("category", [None, _category(is_active=False)])
    async def test_missing_or_inactive_category(self, category: Category | None) -> None:
        repo = _make_product_repo()
        use_case = CreateProduct(
            repo, _make_category_repo(category), _make_directory(_owner()), _make_publisher()
        )
        with pytest.raises(CategoryNotFoundError):
            await use_case.execute(self._input())
        repo.add.assert_not_called()


class TestCreateTradeSuggestion:
    @pytest.mark.asyncio
    async def test_saves_with_ttl_and_publishes(self) -> None:
        owner = _owner()
        repo = MagicMock()
        repo.add = AsyncMock()
        publisher = _make_publisher()
        use_case = CreateTradeSuggestion(
            repo, _make_directory(owner), publisher, ttl=timedelta(days=14)
        )

        suggestion = await use_case.execute(
            CreateTradeSuggestionInput(
                owner_id=owner.id,
                title="Buying 20t cashews",
                description="W320 grade",
                type=TradeType.BUYING,
                category="Agriculture & Food",
                country="Vietnam",
                timeline="Q3",
                contact_info={"preferredContact": "email"},
            )
        )

        repo.add.assert_awaited_once_with(suggestion)
        assert suggestion.expires_at == suggestion.created_at + timedelta(days=14)
        assert suggestion.contact_info == {"preferredContact": "email"}
        published = publisher.publish_many.call_args[0][0]
        assert isinstance(published[0], TradeSuggestionCreatedEvent)

    @pytest.mark.asyncio
    async def test_unknown_user(self) -> None:
        repo = MagicMock()
        repo.add = AsyncMock()
        use_case = CreateTradeSuggestion(repo, _make_directory(None), _make_publisher())
        with pytest.raises(UnknownUserError):
            await use_case.execute(
                CreateTradeSuggestionInput(
                    owner_id=uuid4(),
                    title="t",
                    description="d",
                    type=TradeType.SELLING,
                    category="Textiles",
                    country="Egypt",
                    timeline="Now",
                )
            )
        repo.add.assert_not_called()


class TestListCategories:
    @pytest.mark.asyncio
    async def test_returns_active_categories(self) -> None:
        category = _category()
        result = await ListCategories(_make_category_repo(category)).execute()
        assert result == [category]
