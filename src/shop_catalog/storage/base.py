"""Key-value persistence interface for filter criteria."""

from abc import ABC, abstractmethod

from shop_catalog.models.criteria import FilterCriteria

FILTER_STATE_KEY = "catalog_filter_state"


class FilterStateStore(ABC):
    """
    Abstract key-value store for filter criteria.

    Implementations must round-trip every FilterCriteria field, and raise
    FilterStorageError when the backend fails or a stored value cannot be
    decoded.
    """

    @abstractmethod
    async def get(self, key: str) -> FilterCriteria | None:
        """
        Load criteria stored under a key.

        Args:
            key: Storage key.

        Returns:
            The stored criteria, or None if nothing is stored.
        """
        ...

    @abstractmethod
    async def set(self, key: str, criteria: FilterCriteria) -> None:
        """Store criteria under a key, replacing any previous value."""
        ...

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete the value under a key. Missing keys are not an error."""
        ...
