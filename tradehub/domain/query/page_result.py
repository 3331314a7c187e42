import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageWindow:
    skip: int
    take: int


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(cls, *, page: int, limit: int, total_count: int) -> "PaginationMeta":
        total_pages = math.ceil(total_count / limit)
        return cls(
            page=page,
            limit=limit,
            total_count=total_count,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )


@dataclass(frozen=True)
class PageResult(Generic[T]):
    items: list[T]
    pagination: PaginationMeta
