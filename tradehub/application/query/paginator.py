from typing import Awaitable, Callable, TypeVar

from tradehub.domain.query.page_result import PageResult, PageWindow, PaginationMeta

T = TypeVar("T")


def page_window(page: int, limit: int) -> PageWindow:
    return PageWindow(skip=(page - 1) * limit, take=limit)


async def fetch_page(
    *,
    page: int,
    limit: int,
    find: Callable[[int, int], Awaitable[list[T]]],
    count: Callable[[], Awaitable[int]],
) -> PageResult[T]:
    """
    Run the count read and, when the page overlaps the results, the slice read.

    The two reads are independent and share no snapshot, so under concurrent
    writes total_count may not agree exactly with the returned slice. A page
    past the end yields an empty list with the true totals and never reaches
    the store, whatever the requested page and limit. The window handed to
    ``find`` is bounded by total_count.
    """
    total_count = await count()
    window = page_window(page, limit)

    items: list[T] = []
    if window.skip < total_count:
        items = await find(window.skip, min(window.take, total_count - window.skip))

    return PageResult(
        items=items,
        pagination=PaginationMeta.build(page=page, limit=limit, total_count=total_count),
    )
