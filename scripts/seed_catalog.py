#!/usr/bin/env python
"""Load a catalog JSON file and preview a query against it."""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from shop_catalog.catalog_source import JsonFileCatalogSource
from shop_catalog.config import get_settings
from shop_catalog.engine import CatalogQueryEngine, collect_facets
from shop_catalog.exceptions import CatalogSourceError
from shop_catalog.models.criteria import FilterCriteria, SortKey


async def main() -> None:
    """Validate catalog data and print a results preview."""
    parser = argparse.ArgumentParser(description="Validate catalog data and preview a query")
    parser.add_argument(
        "--catalog",
        type=str,
        default="data/sample_catalog.json",
        help="Path to catalog JSON file",
    )
    parser.add_argument("--search", type=str, default="", help="Search text")
    parser.add_argument("--category", action="append", default=[], help="Category (repeatable)")
    parser.add_argument("--sort", type=str, default="default", help="Sort key")
    parser.add_argument("--page", type=int, default=1, help="Page number")
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent
    catalog_path = project_root / args.catalog

    if not catalog_path.exists():
        print(f"Catalog file not found: {catalog_path}")
        sys.exit(1)

    settings = get_settings()

    try:
        items = await JsonFileCatalogSource(catalog_path).fetch_all()
    except CatalogSourceError as e:
        print(f"Invalid catalog: {e.detail}")
        sys.exit(1)

    facets = collect_facets(items)
    print(f"\nCatalog: {len(items)} items")
    print(f"  Categories: {', '.join(facets.categories) or '-'}")
    print(f"  Brands: {', '.join(facets.brands) or '-'}")
    print(f"  Price span: {facets.min_price} - {facets.max_price}")

    engine = CatalogQueryEngine(
        default_page_size=settings.default_page_size,
        free_shipping_threshold=settings.free_shipping_threshold,
    )
    criteria = FilterCriteria(
        search_text=args.search,
        categories=set(args.category),
        sort_key=SortKey.parse(args.sort),
        page=args.page,
        page_size=settings.default_page_size,
    )
    result = engine.query(items, criteria)

    print(
        f"\nMatched {result.total_matched} items, "
        f"page {result.current_page}/{result.total_pages}:"
    )
    for item in result.items:
        print(f"  {item.item_id}: {item.name} ({item.brand}, {item.category}) {item.price:,.2f}")

    print("\nDone!")


if __name__ == "__main__":
    asyncio.run(main())
