"""Catalog view facade combining data source, filter state and query engine."""

import logging

from shop_catalog.catalog_source import CatalogSource
from shop_catalog.engine import CatalogQueryEngine, collect_facets
from shop_catalog.models.catalog import CatalogFacets
from shop_catalog.models.criteria import DEFAULT_PAGE_SIZE, FilterCriteria
from shop_catalog.models.result import QueryResult
from shop_catalog.state import CatalogStateStore

logger = logging.getLogger(__name__)


class CatalogBrowser:
    """
    One catalog view: fresh snapshot + shared criteria -> page of results.

    Results are recomputed on every call; nothing is cached. The page size
    belongs to the call site (storefront grid vs. catalog-wide listing) and
    overrides the page size carried by the stored criteria.
    """

    def __init__(
        self,
        source: CatalogSource,
        state: CatalogStateStore,
        engine: CatalogQueryEngine | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """
        Initialize the browser.

        Args:
            source: Where catalog snapshots come from.
            state: Shared filter state for this view.
            engine: Query engine (default configuration if not provided).
            page_size: Items per page for this view.
        """
        self.source = source
        self.state = state
        self.engine = engine or CatalogQueryEngine()
        self.page_size = page_size

    async def run_query(self, criteria: FilterCriteria) -> QueryResult:
        """Query a fresh snapshot with explicit criteria, as given."""
        items = await self.source.fetch_all()
        return self.engine.query(items, criteria)

    async def current_page(self) -> QueryResult:
        """Query a fresh snapshot with the stored criteria and this view's page size."""
        criteria = await self.state.get_current()
        items = await self.source.fetch_all()
        result = self.engine.query(items, criteria.with_updates(page_size=self.page_size))
        logger.debug(
            f"Catalog view page {result.current_page}/{result.total_pages}: "
            f"{len(result.items)} of {result.total_matched} items"
        )
        return result

    async def facets(self) -> CatalogFacets:
        """Filter options available in the current catalog snapshot."""
        items = await self.source.fetch_all()
        return collect_facets(items)
