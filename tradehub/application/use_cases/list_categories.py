from tradehub.application.interfaces.catalog_repository import CategoryRepository
from tradehub.domain.entities.category import Category


class ListCategories:
    """Use case: active categories for the browse sidebar."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def execute(self) -> list[Category]:
        return await self._category_repo.list_active()
