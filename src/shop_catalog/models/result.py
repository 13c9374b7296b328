"""Query result model."""

from pydantic import BaseModel, ConfigDict, computed_field

from shop_catalog.models.catalog import CatalogItem


class QueryResult(BaseModel):
    """One page of filtered and sorted catalog items."""

    model_config = ConfigDict(frozen=True)

    items: tuple[CatalogItem, ...] = ()
    total_matched: int = 0
    total_pages: int = 1
    current_page: int = 1
    page_size: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1
