"""Filter, sort and paginate pipeline for catalog snapshots."""

import logging
import math
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from shop_catalog.models.catalog import CatalogFacets, CatalogItem
from shop_catalog.models.criteria import DEFAULT_PAGE_SIZE, FilterCriteria, SortKey
from shop_catalog.models.result import QueryResult

logger = logging.getLogger(__name__)

# Items at or above this price ship for free
FREE_SHIPPING_THRESHOLD = 50_000

ItemPredicate = Callable[[CatalogItem], bool]

# key function and descending flag per sort order; absent = keep input order
_SORT_KEYS: dict[SortKey, tuple[Callable[[CatalogItem], Any], bool]] = {
    SortKey.PRICE_ASC: (lambda item: item.price, False),
    SortKey.PRICE_DESC: (lambda item: item.price, True),
    SortKey.RATING_DESC: (lambda item: (item.rating, item.review_count), True),
    SortKey.NAME_ASC: (lambda item: item.name, False),
    SortKey.NAME_DESC: (lambda item: item.name, True),
    SortKey.NEWEST: (lambda item: item.created_at, True),
}


def _matches_text(item: CatalogItem, needle: str) -> bool:
    """Substring match against the searchable fields of an item."""
    fields = (item.name, item.description, item.brand, item.category)
    if any(needle in value.lower() for value in fields):
        return True
    return any(needle in tag.lower() for tag in item.tags)


class CatalogQueryEngine:
    """
    Deterministic query pipeline over an in-memory catalog snapshot.

    Stages, in order:
    1. Active items only
    2. Text search
    3. Category / brand restriction
    4. Rating and price bounds
    5. On-sale, free-shipping and in-stock flags
    6. Stable sort
    7. Pagination with page clamping

    Never raises for malformed criteria: an inverted price range matches
    nothing, a non-positive page size falls back to the default and the
    requested page is clamped into range.
    """

    def __init__(
        self,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        free_shipping_threshold: float = FREE_SHIPPING_THRESHOLD,
    ) -> None:
        """
        Initialize the engine.

        Args:
            default_page_size: Page size used when criteria carry a non-positive one.
            free_shipping_threshold: Minimum price that qualifies for free shipping.
        """
        self.default_page_size = default_page_size if default_page_size > 0 else DEFAULT_PAGE_SIZE
        self.free_shipping_threshold = free_shipping_threshold

    def build_predicates(self, criteria: FilterCriteria) -> list[ItemPredicate]:
        """
        Build the filter stages for the given criteria, in application order.

        Args:
            criteria: The filter criteria.

        Returns:
            Predicates an item must all satisfy to be listed.
        """
        predicates: list[ItemPredicate] = [lambda item: item.is_active]

        if criteria.search_text.strip():
            needle = criteria.search_text.lower()
            predicates.append(lambda item: _matches_text(item, needle))

        if criteria.categories:
            categories = {c.lower() for c in criteria.categories}
            predicates.append(lambda item: item.category.lower() in categories)

        if criteria.brands:
            brands = {b.lower() for b in criteria.brands}
            predicates.append(lambda item: item.brand.lower() in brands)

        min_rating = criteria.min_rating
        predicates.append(lambda item: item.rating >= min_rating)

        min_price, max_price = criteria.min_price, criteria.max_price
        if max_price is None:
            predicates.append(lambda item: item.price >= min_price)
        else:
            predicates.append(lambda item: min_price <= item.price <= max_price)

        if criteria.on_sale_only:
            predicates.append(lambda item: item.is_on_sale)

        if criteria.free_shipping_only:
            threshold = self.free_shipping_threshold
            predicates.append(lambda item: item.price >= threshold)

        if criteria.in_stock_only:
            predicates.append(lambda item: item.is_in_stock)

        return predicates

    def filter(self, items: Iterable[CatalogItem], criteria: FilterCriteria) -> list[CatalogItem]:
        """Apply every filter stage, preserving input order."""
        matched = list(items)
        for predicate in self.build_predicates(criteria):
            matched = [item for item in matched if predicate(item)]
        return matched

    def sort(self, items: list[CatalogItem], sort_key: SortKey) -> list[CatalogItem]:
        """Stable sort; equal keys keep their input order."""
        entry = _SORT_KEYS.get(sort_key)
        if entry is None:
            return list(items)
        key, descending = entry
        return sorted(items, key=key, reverse=descending)

    def resolve_page_size(self, criteria: FilterCriteria) -> int:
        """Page size from criteria, or the engine default when non-positive."""
        return criteria.page_size if criteria.page_size > 0 else self.default_page_size

    def query(self, items: Sequence[CatalogItem], criteria: FilterCriteria) -> QueryResult:
        """
        Filter, sort and paginate a catalog snapshot.

        Args:
            items: Catalog snapshot.
            criteria: What to match, how to order and which page to return.

        Returns:
            QueryResult for the clamped page.
        """
        matched = self.sort(self.filter(items, criteria), criteria.sort_key)

        page_size = self.resolve_page_size(criteria)
        total_matched = len(matched)
        total_pages = max(1, math.ceil(total_matched / page_size))
        current_page = min(max(criteria.page, 1), total_pages)

        start = (current_page - 1) * page_size
        page_items = tuple(matched[start : start + page_size])

        logger.debug(
            f"Catalog query: {total_matched}/{len(items)} matched, "
            f"page {current_page}/{total_pages}, sort={criteria.sort_key.value}"
        )

        return QueryResult(
            items=page_items,
            total_matched=total_matched,
            total_pages=total_pages,
            current_page=current_page,
            page_size=page_size,
        )


def collect_facets(items: Iterable[CatalogItem]) -> CatalogFacets:
    """
    Collect filter options from the active items of a snapshot.

    Args:
        items: Catalog snapshot.

    Returns:
        Sorted distinct categories and brands, and the price span.
    """
    active = [item for item in items if item.is_active]
    if not active:
        return CatalogFacets()

    prices = [item.price for item in active]
    return CatalogFacets(
        categories=tuple(sorted({item.category for item in active if item.category})),
        brands=tuple(sorted({item.brand for item in active if item.brand})),
        min_price=min(prices),
        max_price=max(prices),
    )


_default_engine = CatalogQueryEngine()


def query(items: Sequence[CatalogItem], criteria: FilterCriteria) -> QueryResult:
    """Run a query with the default engine configuration."""
    return _default_engine.query(items, criteria)
