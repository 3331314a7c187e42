"""Unit tests for page windows and pagination metadata."""
from unittest.mock import AsyncMock

import pytest

from tradehub.application.query.paginator import fetch_page, page_window
from tradehub.domain.query.page_result import PageWindow, PaginationMeta


class TestPageWindow:
    def test_first_page(self) -> None:
        assert page_window(1, 12) == PageWindow(skip=0, take=12)

    def test_third_page(self) -> None:
        assert page_window(3, 10) == PageWindow(skip=20, take=10)


class TestPaginationMeta:
    def test_no_results(self) -> None:
        meta = PaginationMeta.build(page=1, limit=12, total_count=0)
        assert meta.total_pages == 0
        assert meta.has_next_page is False
        assert meta.has_previous_page is False

    def test_partial_last_page(self) -> None:
        meta = PaginationMeta.build(page=3, limit=10, total_count=25)
        assert meta.total_pages == 3
        assert meta.has_next_page is False
        assert meta.has_previous_page is True

    def test_middle_page(self) -> None:
        meta = PaginationMeta.build(page=2, limit=10, total_count=25)
        assert meta.has_next_page is True
        assert meta.has_previous_page is True

    def test_page_past_the_end(self) -> None:
        meta = PaginationMeta.build(page=9, limit=10, total_count=25)
        assert meta.total_pages == 3
        assert meta.has_next_page is False
        assert meta.has_previous_page is True


class TestFetchPage:
    @pytest.mark.asyncio
    async def test_passes_window_to_find(self) -> None:
        find = AsyncMock(return_value=["a", "b"])
        count = AsyncMock(return_value=12)

        result = await fetch_page(page=2, limit=10, find=find, count=count)

        find.assert_awaited_once_with(10, 2)
        count.assert_awaited_once()
        assert result.items == ["a", "b"]
        assert result.pagination.total_count == 12
        assert result.pagination.total_pages == 2

    @pytest.mark.asyncio
    async def test_full_page_takes_limit(self) -> None:
        find = AsyncMock(return_value=[])
        await fetch_page(page=1, limit=10, find=find, count=AsyncMock(return_value=40))
        find.assert_awaited_once_with(0, 10)

    @pytest.mark.asyncio
    async def test_page_past_the_end_skips_find(self) -> None:
        find = AsyncMock(return_value=[])

        result = await fetch_page(
            page=10**19, limit=12, find=find, count=AsyncMock(return_value=25)
        )

        find.assert_not_called()
        assert result.items == []
        assert result.pagination.total_count == 25
        assert result.pagination.total_pages == 3
        assert result.pagination.has_next_page is False

    @pytest.mark.asyncio
    async def test_huge_limit_is_bounded_by_total(self) -> None:
        find = AsyncMock(return_value=["a"])

        result = await fetch_page(
            page=1, limit=10**19, find=find, count=AsyncMock(return_value=3)
        )

        find.assert_awaited_once_with(0, 3)
        assert result.pagination.limit == 10**19
        assert result.pagination.total_pages == 1

    @pytest.mark.asyncio
    async def test_empty_result_skips_find(self) -> None:
        find = AsyncMock(return_value=[])
        result = await fetch_page(page=1, limit=12, find=find, count=AsyncMock(return_value=0))
        find.assert_not_called()
        assert result.pagination.total_pages == 0
