from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CategorySummary:
    id: UUID
    name: str
    slug: str


@dataclass(frozen=True)
class Category:
    """Product category as shown on the browse page, with its live product count."""

    id: UUID
    name: str
    slug: str
    description: str | None = None
    image: str | None = None
    is_active: bool = True
    active_product_count: int = 0

    def summary(self) -> CategorySummary:
        return CategorySummary(id=self.id, name=self.name, slug=self.slug)
