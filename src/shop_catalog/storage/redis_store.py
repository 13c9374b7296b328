"""Redis-backed filter state store."""

import logging

import redis.asyncio as redis
from pydantic import ValidationError

from shop_catalog.exceptions import FilterStorageError
from shop_catalog.models.criteria import FilterCriteria
from shop_catalog.storage.base import FilterStateStore

logger = logging.getLogger(__name__)


class RedisFilterStateStore(FilterStateStore):
    """
    Filter criteria persisted as JSON strings in Redis.

    Keys:
    - catalog:filters:{key} - Serialized FilterCriteria
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        ttl_seconds: int = 0,
    ) -> None:
        """
        Initialize the store.

        Args:
            redis_client: Async Redis client.
            ttl_seconds: Expiry for stored criteria (0 = never expire).
        """
        self.redis = redis_client
        self.ttl_seconds = ttl_seconds

    def _key(self, key: str) -> str:
        """Get Redis key for a filter state entry."""
        return f"catalog:filters:{key}"

    async def get(self, key: str) -> FilterCriteria | None:
        try:
            data = await self.redis.get(self._key(key))
        except (redis.RedisError, OSError) as e:
            raise FilterStorageError(f"Failed to read filter state {key!r}", detail=str(e)) from e

        if not data:
            return None

        if isinstance(data, bytes):
            data = data.decode()

        try:
            return FilterCriteria.model_validate_json(data)
        except ValidationError as e:
            raise FilterStorageError(f"Stored filter state under {key!r} is unreadable", detail=str(e)) from e

    async def set(self, key: str, criteria: FilterCriteria) -> None:
        try:
            await self.redis.set(
                self._key(key),
                criteria.model_dump_json(),
                ex=self.ttl_seconds or None,
            )
            logger.debug(f"Saved filter state {key}")
        except (redis.RedisError, OSError) as e:
            raise FilterStorageError(f"Failed to write filter state {key!r}", detail=str(e)) from e

    async def remove(self, key: str) -> None:
        try:
            await self.redis.delete(self._key(key))
        except (redis.RedisError, OSError) as e:
            raise FilterStorageError(f"Failed to delete filter state {key!r}", detail=str(e)) from e
