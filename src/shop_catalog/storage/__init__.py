"""Persistence for filter criteria."""

from shop_catalog.storage.base import FILTER_STATE_KEY, FilterStateStore
from shop_catalog.storage.memory import InMemoryFilterStateStore
from shop_catalog.storage.redis_store import RedisFilterStateStore

__all__ = [
    "FILTER_STATE_KEY",
    "FilterStateStore",
    "InMemoryFilterStateStore",
    "RedisFilterStateStore",
]
