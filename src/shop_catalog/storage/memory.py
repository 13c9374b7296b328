"""In-memory filter state store."""

from pydantic import ValidationError

from shop_catalog.exceptions import FilterStorageError
from shop_catalog.models.criteria import FilterCriteria
from shop_catalog.storage.base import FilterStateStore


class InMemoryFilterStateStore(FilterStateStore):
    """
    Process-local store for development and tests.

    Values are kept as JSON, the same representation the Redis store
    writes, so a round-trip here exercises the real serialization path.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> FilterCriteria | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return FilterCriteria.model_validate_json(raw)
        except ValidationError as e:
            raise FilterStorageError(f"Stored filter state under {key!r} is unreadable", detail=str(e)) from e

    async def set(self, key: str, criteria: FilterCriteria) -> None:
        self._data[key] = criteria.model_dump_json()

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data
