"""
Dict-backed listing stores.

Used by the test suite. They evaluate exactly the same ListingQuery objects
the SQL repositories compile.
"""
from dataclasses import replace
from uuid import UUID

from tradehub.application.interfaces.catalog_repository import CategoryRepository, UserDirectory
from tradehub.application.interfaces.listing_repository import (
    ProductRepository,
    TradeSuggestionRepository,
)
from tradehub.domain.entities.category import Category
from tradehub.domain.entities.owner import OwnerSummary
from tradehub.domain.entities.product import Product
from tradehub.domain.entities.trade_suggestion import TradeSuggestion
from tradehub.domain.enums.listing_status import ProductStatus
from tradehub.domain.query.criteria import ListingQuery
from tradehub.infrastructure.memory.criteria_evaluator import filter_records, sort_records


class InMemoryProductRepository(ProductRepository):
    def __init__(self, products: list[Product] | None = None) -> None:
        self.products: dict[UUID, Product] = {p.id: p for p in products or []}

    async def add(self, product: Product) -> None:
        self.products[product.id] = product

    async def get_by_id(self, product_id: UUID) -> Product | None:
        # Detached copy, as a database read would return.
        product = self.products.get(product_id)
        return replace(product) if product is not None else None

    async def increment_views(self, product_id: UUID) -> None:
        if product_id in self.products:
            self.products[product_id].views += 1

    async def find(self, query: ListingQuery, *, skip: int, take: int) -> list[Product]:
        matching = sort_records(filter_records(self.products.values(), query), query.ordering)
        return matching[skip : skip + take]

    async def count(self, query: ListingQuery) -> int:
        return len(filter_records(self.products.values(), query))


class InMemoryTradeSuggestionRepository(TradeSuggestionRepository):
    def __init__(self, suggestions: list[TradeSuggestion] | None = None) -> None:
        self.suggestions: dict[UUID, TradeSuggestion] = {s.id: s for s in suggestions or []}

    async def add(self, suggestion: TradeSuggestion) -> None:
        self.suggestions[suggestion.id] = suggestion

    async def find(
        self, query: ListingQuery, *, skip: int, take: int
    ) -> list[TradeSuggestion]:
        matching = sort_records(filter_records(self.suggestions.values(), query), query.ordering)
        return matching[skip : skip + take]

    async def count(self, query: ListingQuery) -> int:
        return len(filter_records(self.suggestions.values(), query))


class InMemoryCatalog(CategoryRepository, UserDirectory):
    """Categories and owner profiles; active product counts come from a product store."""

    def __init__(
        self,
        *,
        categories: list[Category] | None = None,
        owners: list[OwnerSummary] | None = None,
        products: InMemoryProductRepository | None = None,
    ) -> None:
        self.categories: dict[UUID, Category] = {c.id: c for c in categories or []}
        self.owners: dict[UUID, OwnerSummary] = {o.id: o for o in owners or []}
        self._products = products

    async def get_by_id(self, category_id: UUID) -> Category | None:
        return self.categories.get(category_id)

    async def list_active(self) -> list[Category]:
        active = sorted(
            (c for c in self.categories.values() if c.is_active), key=lambda c: c.name
        )
        return [
            Category(
                id=c.id,
                name=c.name,
                slug=c.slug,
                description=c.description,
                image=c.image,
                is_active=c.is_active,
                active_product_count=self._active_products_in(c.id),
            )
            for c in active
        ]

    async def get_owner(self, user_id: UUID) -> OwnerSummary | None:
        return self.owners.get(user_id)

    def _active_products_in(self, category_id: UUID) -> int:
        if self._products is None:
            return 0
        return sum(
            1
            for p in self._products.products.values()
            if p.category.id == category_id and p.status is ProductStatus.ACTIVE
        )
