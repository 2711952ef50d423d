"""
Unit Tests: CatalogService

Snapshot replacement on refresh, keeping the previous snapshot on failure,
and the read accessors used by the cart and the replenishment advisor.
"""

from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

from enums.message_entity import MessageEntity
from exceptions.api import ApiRequestException
from services.catalog import CatalogService

GET_ALL = 'services.catalog.CatalogRepository.get_all'


def fetch_error() -> ApiRequestException:
    return ApiRequestException("GET", "http://bookstore.test/api/book/all", reason="Connection refused")


class TestRefresh:

    @pytest.mark.asyncio
    async def test_refresh_replaces_snapshot(self, make_book):
        catalog = CatalogService()

        with patch(GET_ALL, new=AsyncMock(return_value=[make_book("1"), make_book("2")])):
            assert await catalog.refresh() is True

        assert [item.id for item in catalog.items] == ["1", "2"]
        assert catalog.fetched_at is not None
        assert catalog.last_error is None

    @pytest.mark.asyncio
    async def test_failed_first_refresh_leaves_empty_snapshot(self):
        catalog = CatalogService()

        with patch(GET_ALL, new=AsyncMock(side_effect=fetch_error())):
            assert await catalog.refresh() is False

        assert catalog.items == ()
        assert catalog.last_error == "Failed to fetch books. Please try again later."

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_previous_snapshot(self, make_book):
        catalog = CatalogService(entity=MessageEntity.ADMIN)

        with patch(GET_ALL, new=AsyncMock(return_value=[make_book("1")])):
            await catalog.refresh()
        with patch(GET_ALL, new=AsyncMock(side_effect=fetch_error())) as mock_get_all:
            assert await catalog.refresh() is False

        mock_get_all.assert_awaited_once()
        assert [item.id for item in catalog.items] == ["1"]
        assert catalog.last_error == "Failed to fetch books. Showing the last loaded catalog."

    @pytest.mark.asyncio
    async def test_successful_refresh_clears_error(self, make_book):
        catalog = CatalogService()

        with patch(GET_ALL, new=AsyncMock(side_effect=fetch_error())):
            await catalog.refresh()
        with patch(GET_ALL, new=AsyncMock(return_value=[make_book("1")])):
            await catalog.refresh()

        assert catalog.last_error is None

    @pytest.mark.asyncio
    async def test_refresh_drops_items_missing_from_new_snapshot(self, make_book):
        catalog = CatalogService()

        with patch(GET_ALL, new=AsyncMock(return_value=[make_book("1"), make_book("2")])):
            await catalog.refresh()
        with patch(GET_ALL, new=AsyncMock(return_value=[make_book("2", stock=9)])):
            await catalog.refresh()

        assert catalog.get("1") is None
        assert catalog.stock_of("2") == 9


class TestReadAccessors:

    @pytest_asyncio.fixture
    async def catalog(self, make_book):
        service = CatalogService()
        books = [
            make_book("1", title="Nineteen Eighty-Four", author="George Orwell", stock=4),
            make_book("2", title="Animal Farm", author="George Orwell", stock=0),
            make_book("3", title="Emma", author="Jane Austen", stock=2),
        ]
        with patch(GET_ALL, new=AsyncMock(return_value=books)):
            await service.refresh()
        return service

    @pytest.mark.asyncio
    async def test_stock_of(self, catalog):
        assert catalog.stock_of("1") == 4
        assert catalog.stock_of("2") == 0
        assert catalog.stock_of("unknown") == 0

    @pytest.mark.asyncio
    async def test_search_matches_title_or_author(self, catalog):
        assert [item.id for item in catalog.search("orwell")] == ["1", "2"]
        assert [item.id for item in catalog.search("EMMA")] == ["3"]

    @pytest.mark.asyncio
    async def test_blank_search_returns_everything(self, catalog):
        assert len(catalog.search("  ")) == 3
