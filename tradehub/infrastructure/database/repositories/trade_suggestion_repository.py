from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tradehub.application.interfaces.listing_repository import TradeSuggestionRepository
from tradehub.domain.entities.trade_suggestion import TradeSuggestion
from tradehub.domain.query.criteria import ListingQuery
from tradehub.infrastructure.database.criteria_compiler import CriteriaCompiler
from tradehub.infrastructure.database.models import TradeSuggestionModel
from tradehub.infrastructure.database.repositories.catalog_repository import owner_to_domain

_compiler = CriteriaCompiler(
    {
        "id": TradeSuggestionModel.id,
        "status": TradeSuggestionModel.status,
        "title": TradeSuggestionModel.title,
        "description": TradeSuggestionModel.description,
        "category": TradeSuggestionModel.category,
        "country": TradeSuggestionModel.country,
        "type": TradeSuggestionModel.type,
        "created_at": TradeSuggestionModel.created_at,
        "views": TradeSuggestionModel.views,
    }
)


def _to_domain(model: TradeSuggestionModel) -> TradeSuggestion:
    return TradeSuggestion(
        id=model.id,
        owner=owner_to_domain(model.owner),
        title=model.title,
        description=model.description,
        type=model.type,
        category=model.category,
        country=model.country,
        budget=model.budget,
        quantity=model.quantity,
        timeline=model.timeline,
        specifications=dict(model.specifications or {}),
        contact_info=dict(model.contact_info or {}),
        status=model.status,
        priority=model.priority,
        views=model.views,
        expires_at=model.expires_at,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _to_model(suggestion: TradeSuggestion) -> TradeSuggestionModel:
    return TradeSuggestionModel(
        id=suggestion.id,
        user_id=suggestion.owner.id,
        title=suggestion.title,
        description=suggestion.description,
        type=suggestion.type,
        category=suggestion.category,
        country=suggestion.country,
        budget=suggestion.budget,
        quantity=suggestion.quantity,
        timeline=suggestion.timeline,
        specifications=dict(suggestion.specifications),
        contact_info=dict(suggestion.contact_info),
        status=suggestion.status,
        priority=suggestion.priority,
        views=suggestion.views,
        expires_at=suggestion.expires_at,
        created_at=suggestion.created_at,
        updated_at=suggestion.updated_at,
    )


class SqlAlchemyTradeSuggestionRepository(TradeSuggestionRepository):
    """SQLAlchemy implementation for trade suggestion persistence and browse queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, suggestion: TradeSuggestion) -> None:
        self._session.add(_to_model(suggestion))
        await self._session.flush()

    async def find(
        self, query: ListingQuery, *, skip: int, take: int
    ) -> list[TradeSuggestion]:
        stmt = (
            select(TradeSuggestionModel)
            .options(selectinload(TradeSuggestionModel.owner))
            .where(*_compiler.where(query.criteria))
            .order_by(*_compiler.order_by(query.ordering))
            .offset(skip)
            .limit(take)
        )
        result = await self._session.execute(stmt)
        return [_to_domain(m) for m in result.scalars().all()]

    async def count(self, query: ListingQuery) -> int:
        stmt = (
            select(func.count())
            .select_from(TradeSuggestionModel)
            .where(*_compiler.where(query.criteria))
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()
