"""Data models for the shop catalog."""

from shop_catalog.models.catalog import CatalogFacets, CatalogItem
from shop_catalog.models.criteria import (
    CATALOG_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
    FilterCriteria,
    SortKey,
)
from shop_catalog.models.result import QueryResult

__all__ = [
    "CATALOG_PAGE_SIZE",
    "CatalogFacets",
    "CatalogItem",
    "DEFAULT_PAGE_SIZE",
    "FilterCriteria",
    "QueryResult",
    "SortKey",
]
