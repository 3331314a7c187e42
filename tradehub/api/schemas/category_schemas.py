from uuid import UUID

from tradehub.api.schemas.common import CamelModel


class CategoryResponse(CamelModel):
    id: UUID
    name: str
    slug: str
    description: str | None = None
    image: str | None = None
    product_count: int


class CategoryListResponse(CamelModel):
    success: bool = True
    data: list[CategoryResponse]
