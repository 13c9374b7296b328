"""Pytest configuration and fixtures."""

import sys
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from shop_catalog.models.catalog import CatalogItem  # noqa: E402

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


def build_item(item_id: str, **overrides) -> CatalogItem:
    """Build a catalog item with sensible defaults."""
    fields = {
        "item_id": item_id,
        "name": f"Item {item_id}",
        "description": "",
        "brand": "Generic",
        "category": "Misc",
        "price": 1000.0,
        "rating": 3.0,
        "created_at": BASE_TIME,
    }
    fields.update(overrides)
    return CatalogItem(**fields)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def make_item() -> Callable[..., CatalogItem]:
    """Factory for catalog items."""
    return build_item


@pytest.fixture
def shoe_catalog() -> list[CatalogItem]:
    """
    30 items: 18 active, 12 inactive.

    Of the active items, 10 are Shoes and 3 carry a Nike brand variant
    ("Nike", "NIKE", "nike air"). Inactive items include Shoes and Nike too.
    """
    items: list[CatalogItem] = []
    brands = ["Nike", "NIKE", "nike air"]
    for i in range(18):
        items.append(
            build_item(
                f"a{i:02d}",
                category="Shoes" if i < 10 else "Clothing",
                brand=brands[i] if i < 3 else "Adidas",
                price=1000.0 + i * 100,
                created_at=BASE_TIME + timedelta(days=i),
            )
        )
    for i in range(12):
        items.append(
            build_item(
                f"x{i:02d}",
                category="Shoes",
                brand="Nike",
                is_active=False,
            )
        )
    return items
