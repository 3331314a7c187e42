"""
FastAPI dependency injection wiring.

Each dependency function returns a fully-constructed object with its
collaborators injected, keeping the route handlers thin.
"""
from collections.abc import AsyncGenerator
from datetime import timedelta
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.application.interfaces.catalog_repository import CategoryRepository, UserDirectory
from tradehub.application.interfaces.event_publisher import EventPublisher
from tradehub.application.interfaces.listing_repository import (
    ProductRepository,
    TradeSuggestionRepository,
)
from tradehub.application.use_cases.create_product import CreateProduct
from tradehub.application.use_cases.create_trade_suggestion import CreateTradeSuggestion
from tradehub.application.use_cases.get_product import GetProduct
from tradehub.application.use_cases.list_categories import ListCategories
from tradehub.application.use_cases.search_products import SearchProducts
from tradehub.application.use_cases.search_trade_suggestions import SearchTradeSuggestions
from tradehub.config import settings
from tradehub.infrastructure.database.connection import get_db_session
from tradehub.infrastructure.database.repositories.catalog_repository import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyUserDirectory,
)
from tradehub.infrastructure.database.repositories.product_repository import (
    SqlAlchemyProductRepository,
)
from tradehub.infrastructure.database.repositories.trade_suggestion_repository import (
    SqlAlchemyTradeSuggestionRepository,
)
from tradehub.infrastructure.messaging.noop_publisher import NoOpEventPublisher
from tradehub.infrastructure.messaging.rabbitmq_publisher import RabbitMQPublisher


# ---- Low-level dependencies ------------------------------------------------

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_db_session():
        yield session


def get_product_repo(session: AsyncSession = Depends(get_session)) -> ProductRepository:
    return SqlAlchemyProductRepository(session)


def get_trade_suggestion_repo(
    session: AsyncSession = Depends(get_session),
) -> TradeSuggestionRepository:
    return SqlAlchemyTradeSuggestionRepository(session)


def get_category_repo(session: AsyncSession = Depends(get_session)) -> CategoryRepository:
    return SqlAlchemyCategoryRepository(session)


def get_user_directory(session: AsyncSession = Depends(get_session)) -> UserDirectory:
    return SqlAlchemyUserDirectory(session)


def get_event_publisher() -> EventPublisher:
    if settings.event_publisher == "rabbitmq":
        return RabbitMQPublisher()
    return NoOpEventPublisher()


# ---- Identity ---------------------------------------------------------------

def get_current_user_id(x_user_id: str | None = Header(default=None)) -> UUID:
    """Acting user for write paths, as forwarded by the session layer."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required"
        ) from None


# ---- Use-case dependencies -------------------------------------------------

def get_search_products_use_case(
    product_repo: ProductRepository = Depends(get_product_repo),
) -> SearchProducts:
    return SearchProducts(product_repo, default_limit=settings.product_page_size)


def get_search_trade_suggestions_use_case(
    suggestion_repo: TradeSuggestionRepository = Depends(get_trade_suggestion_repo),
) -> SearchTradeSuggestions:
    return SearchTradeSuggestions(
        suggestion_repo, default_limit=settings.trade_suggestion_page_size
    )


def get_get_product_use_case(
    product_repo: ProductRepository = Depends(get_product_repo),
) -> GetProduct:
    return GetProduct(product_repo)


def get_create_product_use_case(
    product_repo: ProductRepository = Depends(get_product_repo),
    category_repo: CategoryRepository = Depends(get_category_repo),
    user_directory: UserDirectory = Depends(get_user_directory),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> CreateProduct:
    return CreateProduct(product_repo, category_repo, user_directory, event_publisher)


def get_create_trade_suggestion_use_case(
    suggestion_repo: TradeSuggestionRepository = Depends(get_trade_suggestion_repo),
    user_directory: UserDirectory = Depends(get_user_directory),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> CreateTradeSuggestion:
    return CreateTradeSuggestion(
        suggestion_repo,
        user_directory,
        event_publisher,
        ttl=timedelta(days=settings.trade_suggestion_ttl_days),
    )


def get_list_categories_use_case(
    category_repo: CategoryRepository = Depends(get_category_repo),
) -> ListCategories:
    return ListCategories(category_repo)
