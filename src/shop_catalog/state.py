"""Shared, persisted filter state for catalog views."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from shop_catalog.models.criteria import FilterCriteria, SortKey
from shop_catalog.storage.base import FILTER_STATE_KEY, FilterStateStore

logger = logging.getLogger(__name__)

FilterListener = Callable[[FilterCriteria], Awaitable[None] | None]


class StoreState(str, Enum):
    """Lifecycle of a CatalogStateStore."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CatalogStateStore:
    """
    Single source of truth for the current catalog filter criteria.

    Several UI surfaces (header search box, sidebar filter panel, sort
    dropdown) mutate the same criteria through one store and subscribe to
    its change notifications to stay in sync.

    Every public operation runs under one asyncio.Lock per store, so a
    read-modify-persist-notify sequence can never interleave with another.
    The first operation loads persisted criteria (or defaults) inside the
    same lock. The lock is not re-entrant: listeners must not await a
    mutator of the store that is notifying them; schedule it as a task.

    Persistence failures are logged and the in-memory criteria stay
    canonical; listener failures are logged and do not stop delivery to
    the remaining listeners. Nothing is raised to callers.
    """

    def __init__(
        self,
        storage: FilterStateStore,
        key: str = FILTER_STATE_KEY,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            storage: Key-value store used to persist criteria across sessions.
            key: Storage key for this store's criteria.
            clock: Source of last_updated timestamps (UTC now by default).
        """
        self.storage = storage
        self.key = key
        self._clock = clock or _utcnow
        self._lock = asyncio.Lock()
        self._current: FilterCriteria | None = None
        self._listeners: list[FilterListener] = []

    @property
    def state(self) -> StoreState:
        """Current lifecycle state."""
        return StoreState.UNINITIALIZED if self._current is None else StoreState.READY

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe(self, listener: FilterListener) -> Callable[[], None]:
        """
        Register a change listener.

        Listeners may be plain or async callables. Each receives its own
        copy of the new criteria after every successful mutation, in
        registration order.

        Args:
            listener: Callback taking the new FilterCriteria.

        Returns:
            A callable that unregisters the listener.
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: FilterListener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_current(self) -> FilterCriteria:
        """Get a copy of the current criteria."""
        async with self._lock:
            current = await self._ensure_ready()
            return current.clone()

    async def has_active_filters(self) -> bool:
        """True when any restrictive filter is set (sort and page excluded)."""
        async with self._lock:
            current = await self._ensure_ready()
            return not current.is_empty()

    # =========================================================================
    # Mutators
    # =========================================================================

    async def replace(self, criteria: FilterCriteria) -> None:
        """Replace the criteria wholesale."""
        async with self._lock:
            await self._ensure_ready()
            await self._commit(criteria)
        logger.info("Filter criteria replaced")

    async def update_search_text(self, text: str | None) -> None:
        """Set the free-text search query."""
        await self._update(search_text=text or "")
        logger.info(f"Updated search text: {text or ''!r}")

    async def update_categories(self, categories: Iterable[str] | None) -> None:
        """Set the category restriction (empty = all categories)."""
        selected = set(categories or ())
        await self._update(categories=selected)
        logger.info(f"Updated categories: {sorted(selected)}")

    async def update_brands(self, brands: Iterable[str] | None) -> None:
        """Set the brand restriction (empty = all brands)."""
        selected = set(brands or ())
        await self._update(brands=selected)
        logger.info(f"Updated brands: {sorted(selected)}")

    async def update_sort(self, sort_key: SortKey | str | None) -> None:
        """Set the sort order; unknown values fall back to the default order."""
        key = SortKey.parse(sort_key)
        await self._update(sort_key=key)
        logger.info(f"Updated sort: {key.value}")

    async def update_price_range(self, min_price: float = 0.0, max_price: float | None = None) -> None:
        """Set the inclusive price bounds (max_price None = no upper bound)."""
        await self._update(min_price=min_price, max_price=max_price)
        logger.info(f"Updated price range: {min_price} - {max_price if max_price is not None else 'any'}")

    async def update_min_rating(self, min_rating: float) -> None:
        """Set the minimum rating."""
        await self._update(min_rating=min_rating)
        logger.info(f"Updated minimum rating: {min_rating}")

    async def update_page(self, page: int) -> None:
        """Set the requested page; the query engine clamps it to the result."""
        await self._update(page=page)
        logger.debug(f"Updated page: {page}")

    async def reset(self) -> None:
        """Return to default criteria and drop the persisted entry."""
        async with self._lock:
            self._current = FilterCriteria.create_default().with_updates(last_updated=self._clock())
            try:
                await self.storage.remove(self.key)
            except Exception as e:
                logger.warning("Failed to clear persisted filter state: %s", e, exc_info=True)
            await self._notify(self._current)
        logger.info("Filters reset to default")

    async def clear_storage(self) -> None:
        """
        Drop the persisted entry and forget the in-memory criteria.

        The store returns to UNINITIALIZED; the next operation reloads.
        Listeners are not notified.
        """
        async with self._lock:
            try:
                await self.storage.remove(self.key)
            except Exception as e:
                logger.warning("Failed to clear persisted filter state: %s", e, exc_info=True)
            self._current = None
        logger.info("Filter storage cleared")

    # =========================================================================
    # Internals (lock held)
    # =========================================================================

    async def _ensure_ready(self) -> FilterCriteria:
        """Load persisted criteria on first use."""
        if self._current is not None:
            return self._current

        stored: FilterCriteria | None = None
        try:
            stored = await self.storage.get(self.key)
        except Exception as e:
            logger.warning("Failed to load persisted filter state, using defaults: %s", e, exc_info=True)

        if stored is None:
            self._current = FilterCriteria.create_default()
            logger.debug("No stored filters found, using defaults")
        else:
            self._current = stored
            logger.info(
                f"Loaded filters from storage: {len(stored.categories)} categories, "
                f"{len(stored.brands)} brands"
            )
        return self._current

    async def _update(self, **fields: Any) -> None:
        """Read current, change the given fields, persist, notify."""
        async with self._lock:
            current = await self._ensure_ready()
            await self._commit(current.with_updates(**fields))

    async def _commit(self, criteria: FilterCriteria) -> None:
        """Stamp, persist and publish new criteria."""
        committed = criteria.with_updates(last_updated=self._clock())
        self._current = committed

        try:
            await self.storage.set(self.key, committed)
        except Exception as e:
            logger.warning("Failed to persist filter state, keeping in-memory value: %s", e, exc_info=True)

        await self._notify(committed)

    async def _notify(self, criteria: FilterCriteria) -> None:
        """Deliver criteria to every listener, isolating failures."""
        for listener in list(self._listeners):
            try:
                result = listener(criteria.clone())
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.warning("Filter listener %r failed: %s", listener, e, exc_info=True)
