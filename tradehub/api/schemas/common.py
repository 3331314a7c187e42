from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tradehub.domain.query.page_result import PaginationMeta


class CamelModel(BaseModel):
    """Serialises with camelCase keys; accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginationResponse(CamelModel):
    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationResponse":
        return cls(
            page=meta.page,
            limit=meta.limit,
            total_count=meta.total_count,
            total_pages=meta.total_pages,
            has_next_page=meta.has_next_page,
            has_previous_page=meta.has_previous_page,
        )


class OwnerResponse(CamelModel):
    id: UUID
    name: str | None = None
    company: str | None = None
    country: str | None = None
    city: str | None = None
    is_verified: bool = False


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Any = None
