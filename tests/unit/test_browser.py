"""Unit tests for CatalogBrowser."""

import pytest

from shop_catalog.browser import CatalogBrowser
from shop_catalog.catalog_source import InMemoryCatalogSource
from shop_catalog.models.criteria import CATALOG_PAGE_SIZE, FilterCriteria, SortKey
from shop_catalog.state import CatalogStateStore
from shop_catalog.storage import InMemoryFilterStateStore


@pytest.fixture
def browser(shoe_catalog) -> CatalogBrowser:
    return CatalogBrowser(
        source=InMemoryCatalogSource(shoe_catalog),
        state=CatalogStateStore(InMemoryFilterStateStore()),
        page_size=5,
    )


class TestCatalogBrowser:
    """Tests for CatalogBrowser."""

    @pytest.mark.asyncio
    async def test_current_page_uses_stored_criteria(self, browser):
        await browser.state.update_categories(["Shoes"])
        await browser.state.update_sort(SortKey.PRICE_DESC)

        result = await browser.current_page()

        assert result.total_matched == 10
        assert result.total_pages == 2
        assert result.page_size == 5
        prices = [item.price for item in result.items]
        assert prices == sorted(prices, reverse=True)

    @pytest.mark.asyncio
    async def test_view_page_size_overrides_stored(self, browser):
        await browser.state.replace(FilterCriteria(page_size=100))

        result = await browser.current_page()

        assert result.page_size == 5
        assert (await browser.state.get_current()).page_size == 100

    @pytest.mark.asyncio
    async def test_out_of_range_page_clamped(self, browser):
        await browser.state.update_search_text("nike")
        await browser.state.update_page(7)

        result = await browser.current_page()

        assert result.current_page == 1
        assert result.total_matched == 3

    @pytest.mark.asyncio
    async def test_results_follow_catalog_changes(self, browser, make_item):
        await browser.state.update_search_text("limited")
        assert (await browser.current_page()).total_matched == 0

        browser.source.replace_items([make_item("new", name="Limited Edition")])

        assert (await browser.current_page()).total_matched == 1

    @pytest.mark.asyncio
    async def test_run_query_ignores_stored_state(self, browser):
        await browser.state.update_categories(["Clothing"])

        result = await browser.run_query(FilterCriteria(categories={"Shoes"}, page_size=CATALOG_PAGE_SIZE))

        assert result.total_matched == 10
        assert result.page_size == CATALOG_PAGE_SIZE

    @pytest.mark.asyncio
    async def test_facets(self, browser):
        facets = await browser.facets()

        assert facets.categories == ("Clothing", "Shoes")
        assert facets.brands == ("Adidas", "NIKE", "Nike", "nike air")
        assert facets.min_price == 1000
        assert facets.max_price == 2700
