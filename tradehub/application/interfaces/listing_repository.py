from abc import ABC, abstractmethod
from uuid import UUID

from tradehub.domain.entities.product import Product
from tradehub.domain.entities.trade_suggestion import TradeSuggestion
from tradehub.domain.query.criteria import ListingQuery


class ProductRepository(ABC):
    """Port for persisting and querying Product listings."""

    @abstractmethod
    async def add(self, product: Product) -> None:
        ...

    @abstractmethod
    async def get_by_id(self, product_id: UUID) -> Product | None:
        ...

    @abstractmethod
    async def increment_views(self, product_id: UUID) -> None:
        ...

    @abstractmethod
    async def find(self, query: ListingQuery, *, skip: int, take: int) -> list[Product]:
        """Return at most ``take`` matching products in query order, after skipping ``skip``."""
        ...

    @abstractmethod
    async def count(self, query: ListingQuery) -> int:
        """Return the number of products matching the query's criteria."""
        ...


class TradeSuggestionRepository(ABC):
    """Port for persisting and querying TradeSuggestion listings."""

    @abstractmethod
    async def add(self, suggestion: TradeSuggestion) -> None:
        ...

    @abstractmethod
    async def find(
        self, query: ListingQuery, *, skip: int, take: int
    ) -> list[TradeSuggestion]:
        ...

    @abstractmethod
    async def count(self, query: ListingQuery) -> int:
        ...
