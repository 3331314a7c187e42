from abc import ABC, abstractmethod
from uuid import UUID

from tradehub.domain.entities.category import Category
from tradehub.domain.entities.owner import OwnerSummary


class CategoryRepository(ABC):
    """Port for the product category catalog."""

    @abstractmethod
    async def get_by_id(self, category_id: UUID) -> Category | None:
        ...

    @abstractmethod
    async def list_active(self) -> list[Category]:
        """Active categories ordered by name, with their ACTIVE product counts."""
        ...


class UserDirectory(ABC):
    """Port for looking up the public profile of a listing owner."""

    @abstractmethod
    async def get_owner(self, user_id: UUID) -> OwnerSummary | None:
        ...
