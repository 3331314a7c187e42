from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tradehub.application.interfaces.listing_repository import ProductRepository
from tradehub.domain.entities.category import CategorySummary
from tradehub.domain.entities.product import Product
from tradehub.domain.query.criteria import ListingQuery
from tradehub.infrastructure.database.criteria_compiler import CriteriaCompiler, RelatedColumn
from tradehub.infrastructure.database.models import CategoryModel, ProductModel, UserModel
from tradehub.infrastructure.database.repositories.catalog_repository import owner_to_domain

_compiler = CriteriaCompiler(
    {
        "id": ProductModel.id,
        "status": ProductModel.status,
        "title": ProductModel.title,
        "description": ProductModel.description,
        "brand": ProductModel.brand,
        "owner_company": RelatedColumn(ProductModel.owner, UserModel.company),
        "category_name": RelatedColumn(ProductModel.category, CategoryModel.name),
        "country": ProductModel.country,
        "price": ProductModel.price,
        "condition": ProductModel.condition,
        "availability": ProductModel.availability,
        "created_at": ProductModel.created_at,
        "views": ProductModel.views,
    }
)


def _to_domain(model: ProductModel) -> Product:
    return Product(
        id=model.id,
        owner=owner_to_domain(model.owner),
        category=CategorySummary(
            id=model.category.id, name=model.category.name, slug=model.category.slug
        ),
        title=model.title,
        slug=model.slug,
        description=model.description,
        short_desc=model.short_desc,
        brand=model.brand,
        model=model.model,
        hs_code=model.hs_code,
        origin=model.origin,
        images=list(model.images or []),
        keywords=list(model.keywords or []),
        specifications=dict(model.specifications or {}),
        price=Decimal(str(model.price)) if model.price is not None else None,
        currency=model.currency,
        min_order=model.min_order,
        unit=model.unit,
        condition=model.condition,
        availability=model.availability,
        country=model.country,
        state=model.state,
        city=model.city,
        status=model.status,
        views=model.views,
        is_promoted=model.is_promoted,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _to_model(product: Product) -> ProductModel:
    return ProductModel(
        id=product.id,
        user_id=product.owner.id,
        category_id=product.category.id,
        title=product.title,
        slug=product.slug,
        description=product.description,
        short_desc=product.short_desc,
        brand=product.brand,
        model=product.model,
        hs_code=product.hs_code,
        origin=product.origin,
        images=list(product.images),
        keywords=list(product.keywords),
        specifications=dict(product.specifications),
        price=product.price,
        currency=product.currency,
        min_order=product.min_order,
        unit=product.unit,
        condition=product.condition,
        availability=product.availability,
        country=product.country,
        state=product.state,
        city=product.city,
        status=product.status,
        views=product.views,
        is_promoted=product.is_promoted,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


class SqlAlchemyProductRepository(ProductRepository):
    """SQLAlchemy implementation for product persistence and browse queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, product: Product) -> None:
        self._session.add(_to_model(product))
        await self._session.flush()

    async def get_by_id(self, product_id: UUID) -> Product | None:
        result = await self._session.execute(
            select(ProductModel)
            .options(selectinload(ProductModel.owner), selectinload(ProductModel.category))
            .where(ProductModel.id == product_id)
        )
        model = result.scalar_one_or_none()
        return _to_domain(model) if model is not None else None

    async def increment_views(self, product_id: UUID) -> None:
        await self._session.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(views=ProductModel.views + 1)
        )

    async def find(self, query: ListingQuery, *, skip: int, take: int) -> list[Product]:
        stmt = (
            select(ProductModel)
            .options(selectinload(ProductModel.owner), selectinload(ProductModel.category))
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
            .select_from(ProductModel)
            .where(*_compiler.where(query.criteria))
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()
