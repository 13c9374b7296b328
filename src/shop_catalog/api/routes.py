"""API routes for catalog browsing and filter state."""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from shop_catalog.browser import CatalogBrowser
from shop_catalog.exceptions import CatalogNotReadyError
from shop_catalog.models.catalog import CatalogFacets
from shop_catalog.models.criteria import FilterCriteria
from shop_catalog.models.result import QueryResult

router = APIRouter(prefix="/v1/catalog", tags=["catalog"])


def get_browser(request: Request) -> CatalogBrowser:
    """Get the catalog browser attached to the application in lifespan."""
    browser = getattr(request.app.state, "browser", None)
    if browser is None:
        raise CatalogNotReadyError()
    return browser


class FilterStateResponse(BaseModel):
    """Current filter criteria for the shared catalog view."""

    criteria: FilterCriteria
    has_active_filters: bool


class SearchUpdate(BaseModel):
    text: str = ""


class CategoriesUpdate(BaseModel):
    categories: list[str] = Field(default_factory=list)


class BrandsUpdate(BaseModel):
    brands: list[str] = Field(default_factory=list)


class SortUpdate(BaseModel):
    sort_key: str = Field(default="default", description="Sort key or storefront sort token")


class PriceRangeUpdate(BaseModel):
    min_price: float = 0.0
    max_price: float | None = None


class PageUpdate(BaseModel):
    page: int = 1


async def _filter_state(browser: CatalogBrowser) -> FilterStateResponse:
    criteria = await browser.state.get_current()
    return FilterStateResponse(criteria=criteria, has_active_filters=not criteria.is_empty())


@router.post(
    "/query",
    response_model=QueryResult,
    summary="Query the catalog",
    description="Filter, sort and paginate the catalog with explicit criteria. Does not touch stored filters.",
)
async def query_catalog(
    criteria: FilterCriteria,
    browser: CatalogBrowser = Depends(get_browser),
) -> QueryResult:
    return await browser.run_query(criteria)


@router.get(
    "/results",
    response_model=QueryResult,
    summary="Results for stored filters",
)
async def current_results(browser: CatalogBrowser = Depends(get_browser)) -> QueryResult:
    """Query the catalog with the shared filter criteria and this view's page size."""
    return await browser.current_page()


@router.get("/facets", response_model=CatalogFacets, summary="Available filter options")
async def catalog_facets(browser: CatalogBrowser = Depends(get_browser)) -> CatalogFacets:
    return await browser.facets()


@router.get("/filters", response_model=FilterStateResponse, summary="Get stored filters")
async def get_filters(browser: CatalogBrowser = Depends(get_browser)) -> FilterStateResponse:
    return await _filter_state(browser)


@router.put("/filters", response_model=FilterStateResponse, summary="Replace stored filters")
async def replace_filters(
    criteria: FilterCriteria,
    browser: CatalogBrowser = Depends(get_browser),
) -> FilterStateResponse:
    await browser.state.replace(criteria)
    return await _filter_state(browser)


@router.delete("/filters", response_model=FilterStateResponse, summary="Reset stored filters")
async def reset_filters(browser: CatalogBrowser = Depends(get_browser)) -> FilterStateResponse:
    await browser.state.reset()
    return await _filter_state(browser)


@router.patch("/filters/search", response_model=FilterStateResponse)
async def update_search(
    body: SearchUpdate,
    browser: CatalogBrowser = Depends(get_browser),
) -> FilterStateResponse:
    await browser.state.update_search_text(body.text)
    return await _filter_state(browser)


@router.patch("/filters/categories", response_model=FilterStateResponse)
async def update_categories(
    body: CategoriesUpdate,
    browser: CatalogBrowser = Depends(get_browser),
) -> FilterStateResponse:
    await browser.state.update_categories(body.categories)
    return await _filter_state(browser)


@router.patch("/filters/brands", response_model=FilterStateResponse)
async def update_brands(
    body: BrandsUpdate,
    browser: CatalogBrowser = Depends(get_browser),
) -> FilterStateResponse:
    await browser.state.update_brands(body.brands)
    return await _filter_state(browser)


@router.patch("/filters/sort", response_model=FilterStateResponse)
async def update_sort(
    body: SortUpdate,
    browser: CatalogBrowser = Depends(get_browser),
) -> FilterStateResponse:
    await browser.state.update_sort(body.sort_key)
    return await _filter_state(browser)


@router.patch("/filters/price", response_model=FilterStateResponse)
async def update_price_range(
    body: PriceRangeUpdate,
    browser: CatalogBrowser = Depends(get_browser),
) -> FilterStateResponse:
    await browser.state.update_price_range(body.min_price, body.max_price)
    return await _filter_state(browser)


@router.patch("/filters/page", response_model=FilterStateResponse)
async def update_page(
    body: PageUpdate,
    browser: CatalogBrowser = Depends(get_browser),
) -> FilterStateResponse:
    await browser.state.update_page(body.page)
    return await _filter_state(browser)
