from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.application.interfaces.catalog_repository import CategoryRepository, UserDirectory
from tradehub.domain.entities.category import Category
from tradehub.domain.entities.owner import OwnerSummary
from tradehub.domain.enums.listing_status import ProductStatus
from tradehub.infrastructure.database.models import CategoryModel, ProductModel, UserModel


def owner_to_domain(model: UserModel) -> OwnerSummary:
    return OwnerSummary(
        id=model.id,
        name=model.name,
        company=model.company,
        country=model.country,
        city=model.city,
        is_verified=model.is_verified,
    )


def _category_to_domain(model: CategoryModel, active_product_count: int = 0) -> Category:
    return Category(
        id=model.id,
        name=model.name,
        slug=model.slug,
        description=model.description,
        image=model.image,
        is_active=model.is_active,
        active_product_count=active_product_count,
    )


class SqlAlchemyCategoryRepository(CategoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, category_id: UUID) -> Category | None:
        model = await self._session.get(CategoryModel, category_id)
        return _category_to_domain(model) if model is not None else None

    async def list_active(self) -> list[Category]:
        active_products = (
            select(func.count(ProductModel.id))
            .where(
                ProductModel.category_id == CategoryModel.id,
                ProductModel.status == ProductStatus.ACTIVE,
            )
            .correlate(CategoryModel)
            .scalar_subquery()
        )
        result = await self._session.execute(
            select(CategoryModel, active_products.label("active_product_count"))
            .where(CategoryModel.is_active.is_(True))
            .order_by(CategoryModel.name.asc())
        )
        return [_category_to_domain(model, count) for model, count in result.all()]


class SqlAlchemyUserDirectory(UserDirectory):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_owner(self, user_id: UUID) -> OwnerSummary | None:
        model = await self._session.get(UserModel, user_id)
        return owner_to_domain(model) if model is not None else None
