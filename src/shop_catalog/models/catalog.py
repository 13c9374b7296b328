"""Catalog models for product browsing data."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CatalogItem(BaseModel):
    """
    Read-only projection of a product for filtering and sorting.

    Built by the catalog data source; never mutated by the query engine
    or the state store.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "item_id": "prod-001",
                    "name": "Air Zoom Pegasus",
                    "brand": "Nike",
                    "category": "Shoes",
                    "price": 65000,
                    "rating": 4.6,
                    "review_count": 132,
                    "is_on_sale": True,
                    "created_at": "2025-03-01T09:00:00Z",
                    "tags": ["running", "men"],
                }
            ]
        },
    )

    item_id: str = Field(description="Product identifier")
    name: str = Field(description="Product title")
    description: str = Field(default="", description="Plain-text description")
    brand: str = Field(default="")
    category: str = Field(default="", description="Primary category name")

    price: float = Field(description="Selling price in currency units")
    rating: float = Field(default=0.0, ge=0, le=5, description="Average review rating (0-5)")
    review_count: int = Field(default=0, ge=0, description="Number of reviews behind the rating")

    # Flags
    is_active: bool = Field(default=True, description="Inactive or deleted items are never listed")
    is_on_sale: bool = Field(default=False)
    is_in_stock: bool = Field(default=True)

    created_at: datetime
    tags: frozenset[str] = Field(default_factory=frozenset, description="Free-text tags")


class CatalogFacets(BaseModel):
    """Filter options available in a catalog snapshot (active items only)."""

    model_config = ConfigDict(frozen=True)

    categories: tuple[str, ...] = ()
    brands: tuple[str, ...] = ()
    min_price: float | None = None
    max_price: float | None = None
