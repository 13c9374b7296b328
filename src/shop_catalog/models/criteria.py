"""Filter criteria models for catalog queries."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_PAGE_SIZE = 12
CATALOG_PAGE_SIZE = 24


class SortKey(str, Enum):
    """Catalog sort orders."""

    DEFAULT = "default"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    RATING_DESC = "rating_desc"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    NEWEST = "newest"
    POPULARITY = "popularity"

    @classmethod
    def parse(cls, value: Any) -> "SortKey":
        """
        Resolve a sort key from a member, value or storefront token.

        Accepts camelCase names ("priceAsc") and the storefront's dropdown
        tokens ("price-low", "popular", "relevance"). Unknown values fall
        back to DEFAULT.

        Args:
            value: Anything a caller or a persisted payload may carry.

        Returns:
            The matching SortKey.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.DEFAULT
        token = value.strip().lower().replace("-", "").replace("_", "")
        return _SORT_ALIASES.get(token, cls.DEFAULT)


_SORT_ALIASES: dict[str, SortKey] = {
    "default": SortKey.DEFAULT,
    "relevance": SortKey.DEFAULT,
    "priceasc": SortKey.PRICE_ASC,
    "pricelow": SortKey.PRICE_ASC,
    "pricedesc": SortKey.PRICE_DESC,
    "pricehigh": SortKey.PRICE_DESC,
    "ratingdesc": SortKey.RATING_DESC,
    "rating": SortKey.RATING_DESC,
    "nameasc": SortKey.NAME_ASC,
    "namedesc": SortKey.NAME_DESC,
    "newest": SortKey.NEWEST,
    "popularity": SortKey.POPULARITY,
    "popular": SortKey.POPULARITY,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FilterCriteria(BaseModel):
    """
    What the shopper currently wants to see: search, restrictions, sort and page.

    Malformed values (inverted price range, non-positive page or page size)
    are accepted as-is; the query engine normalizes them.
    """

    search_text: str = Field(default="", description="Case-insensitive substring query")
    categories: set[str] = Field(default_factory=set, description="Empty = no restriction")
    brands: set[str] = Field(default_factory=set, description="Empty = no restriction")

    min_rating: float = Field(default=0.0)
    min_price: float = Field(default=0.0)
    max_price: float | None = Field(default=None, description="None = no upper bound")

    on_sale_only: bool = False
    free_shipping_only: bool = False
    in_stock_only: bool = False

    sort_key: SortKey = SortKey.DEFAULT
    page: int = Field(default=1, description="1-indexed page")
    page_size: int = Field(default=DEFAULT_PAGE_SIZE)

    last_updated: datetime = Field(default_factory=_utcnow)

    model_config = {
        # keeps infinite bounds intact through JSON storage
        "ser_json_inf_nan": "constants",
        "json_schema_extra": {
            "examples": [
                {
                    "search_text": "nike",
                    "categories": ["Shoes"],
                    "min_price": 5000,
                    "max_price": 100000,
                    "sort_key": "price_asc",
                    "page": 1,
                    "page_size": 12,
                }
            ]
        }
    }

    @field_validator("sort_key", mode="before")
    @classmethod
    def _parse_sort_key(cls, value: Any) -> SortKey:
        return SortKey.parse(value)

    @classmethod
    def create_default(cls) -> "FilterCriteria":
        """Create criteria with no restrictions, first page, default sort."""
        return cls()

    def clone(self) -> "FilterCriteria":
        """Deep copy; the category and brand sets are independent of this instance."""
        return self.model_copy(deep=True)

    def with_updates(self, **fields: Any) -> "FilterCriteria":
        """Return a validated copy with the given fields replaced."""
        return type(self).model_validate({**self.model_dump(), **fields})

    def is_empty(self) -> bool:
        """
        True when no restrictive field is set.

        Sort order and page are not filters, so they are ignored here.
        """
        return (
            not self.search_text.strip()
            and not self.categories
            and not self.brands
            and self.min_rating == 0
            and self.min_price == 0
            and self.max_price is None
            and not self.on_sale_only
            and not self.free_shipping_only
            and not self.in_stock_only
        )

    def __eq__(self, other: object) -> bool:
        # last_updated is mutation metadata, not part of the criteria value
        if not isinstance(other, FilterCriteria):
            return NotImplemented
        return self.model_dump(exclude={"last_updated"}) == other.model_dump(
            exclude={"last_updated"}
        )
