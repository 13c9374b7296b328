"""Catalog data sources that hand snapshots to the query engine."""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from shop_catalog.exceptions import CatalogSourceError
from shop_catalog.models.catalog import CatalogItem

logger = logging.getLogger(__name__)

_items_adapter = TypeAdapter(list[CatalogItem])


class CatalogSource(ABC):
    """
    Abstract source of catalog items.

    Each call returns a point-in-time snapshot; callers own caching
    and refresh.
    """

    @abstractmethod
    async def fetch_all(self) -> Sequence[CatalogItem]:
        """
        Fetch every known catalog item.

        Returns:
            Snapshot of the catalog (possibly empty).
        """
        ...


class InMemoryCatalogSource(CatalogSource):
    """Catalog held in process memory."""

    def __init__(self, items: Iterable[CatalogItem] = ()) -> None:
        self._items = tuple(items)

    async def fetch_all(self) -> Sequence[CatalogItem]:
        return self._items

    def replace_items(self, items: Iterable[CatalogItem]) -> None:
        """Swap in a new catalog; later snapshots see the new items."""
        self._items = tuple(items)


class JsonFileCatalogSource(CatalogSource):
    """
    Catalog loaded from a JSON array of items.

    Expected JSON format:
    [
        {"item_id": "p1", "name": "...", "price": 1200, "created_at": "2025-01-01T00:00:00Z"},
        ...
    ]
    """

    def __init__(self, filepath: str | Path) -> None:
        """
        Initialize the source.

        Args:
            filepath: Path to the JSON file. Read on every fetch.
        """
        self.filepath = Path(filepath)

    async def fetch_all(self) -> Sequence[CatalogItem]:
        try:
            with open(self.filepath) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogSourceError(f"Cannot read catalog file {self.filepath}", detail=str(e)) from e

        try:
            items = _items_adapter.validate_python(data)
        except ValidationError as e:
            raise CatalogSourceError(f"Invalid catalog data in {self.filepath}", detail=str(e)) from e

        logger.info(f"Loaded {len(items)} catalog items from {self.filepath}")
        return tuple(items)
