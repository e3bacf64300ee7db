"""
FSFT (finite-space, finite-time) buffer.

Bounded object cache with two independent ways out:
- Capacity: when full, the least recently used entry is replaced
- Timeout: entries not refreshed within the timeout are swept lazily
  at the start of every operation

Uses OrderedDict for O(1) recency updates and LRU victim selection.
"""

import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, List, Optional, OrderedDict as OrderedDictType

from ..config import BufferSettings
from ..interfaces.cache import ICache, CacheStats, T
from ..interfaces.identifiable import Identifiable
from ..models.entry import BufferEntry
from .exceptions import ItemNotFoundError, BufferRejectedError

logger = logging.getLogger(__name__)

# the default buffer size is 32 objects
DEFAULT_CAPACITY = 32

# the default timeout value is 3600s
DEFAULT_TIMEOUT = 3600


class FSFTBuffer(ICache[T]):
    """
    Thread-safe LRU buffer with per-entry timeout.

    Every public operation runs under a single lock and starts with a
    staleness sweep, so no caller ever sees an entry past its deadline
    once any operation has run after that deadline.

    Reads (get) only update recency. Writes and touches (put, update,
    touch) update recency and also restart the timeout.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        timeout: float = DEFAULT_TIMEOUT,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize buffer.

        Args:
            capacity: Maximum number of live entries (0 rejects every put)
            timeout: Seconds an entry may go unrefreshed before it is swept
            clock: Zero-argument callable returning the current time in seconds
        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        if not timeout >= 0:
            raise ValueError(f"timeout must be non-negative, got {timeout}")

        self._capacity = int(capacity)
        self._timeout = float(timeout)
        self._clock = clock

        # Insertion order is recency order: first key is the LRU victim
        self._entries: OrderedDictType[str, BufferEntry] = OrderedDict()
        self._lock = threading.RLock()

        self._stats = CacheStats()

    @classmethod
    def from_settings(
        cls,
        settings: Optional[BufferSettings] = None,
        clock: Callable[[], float] = time.monotonic
    ) -> "FSFTBuffer":
        """
        Build a buffer from configuration.

        Args:
            settings: Buffer settings (read from the environment if omitted)
            clock: Time source passed through to the buffer
        """
        settings = settings or BufferSettings()
        return cls(capacity=settings.capacity, timeout=settings.timeout, clock=clock)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def timeout(self) -> float:
        return self._timeout

    def put(self, item: T) -> bool:
        """
        Add an object to the buffer.

        An entry with the same id is replaced. Otherwise, if the buffer
        is full, the least recently used entry is evicted first.

        Args:
            item: Identifiable object to cache

        Returns:
            True once the object is stored

        Raises:
            BufferRejectedError: if the buffer capacity is zero
            TypeError: if item does not provide id()
        """
        item_id = self._item_id(item)

        with self._lock:
            now = self._sweep(self._clock())

            if self._capacity == 0:
                logger.warning("Rejected %r: buffer capacity is zero", item_id)
                raise BufferRejectedError(item_id, self._capacity)

            if item_id in self._entries:
                del self._entries[item_id]
            elif len(self._entries) >= self._capacity:
                self._evict_lru()

            self._entries[item_id] = BufferEntry(
                value=item,
                last_touched=now,
                last_used=now
            )
            return True

    def get(self, item_id: str) -> T:
        """
        Retrieve an object by id.

        Marks the entry as most recently used but does not delay its
        timeout.

        Args:
            item_id: Identifier of the object to retrieve

        Returns:
            The cached object

        Raises:
            ItemNotFoundError: if no live entry has this id
        """
        with self._lock:
            now = self._sweep(self._clock())

            entry = self._entries.get(item_id)
            if entry is None:
                self._stats.misses += 1
                raise ItemNotFoundError(item_id)

            self._entries.move_to_end(item_id)
            entry.mark_used(now)
            self._stats.hits += 1
            return entry.value

    def touch(self, item_id: str) -> bool:
        """
        Update the last refresh time for the object with the given id.

        Args:
            item_id: Identifier of the object to touch

        Returns:
            True if the object was cached, False otherwise
        """
        with self._lock:
            now = self._sweep(self._clock())

            entry = self._entries.get(item_id)
            if entry is None:
                return False

            self._entries.move_to_end(item_id)
            entry.refresh(now)
            return True

    def update(self, item: T) -> bool:
        """
        Replace a cached object; acts like a touch for its entry.

        Never inserts: an absent id is reported as False.

        Args:
            item: New version of a cached object

        Returns:
            True if an entry was replaced, False otherwise
        """
        item_id = self._item_id(item)

        with self._lock:
            now = self._sweep(self._clock())

            entry = self._entries.get(item_id)
            if entry is None:
                return False

            self._entries.move_to_end(item_id)
            entry.value = item
            entry.refresh(now)
            return True

    def evict(self, item_id: str) -> bool:
        with self._lock:
            self._sweep(self._clock())
            if self._entries.pop(item_id, None) is None:
                return False
            self._stats.removals += 1
            logger.debug("Evicted %r on request", item_id)
            return True

    def contains(self, item_id: str) -> bool:
        """Check membership without changing recency."""
        with self._lock:
            self._sweep(self._clock())
            return item_id in self._entries

    def __contains__(self, item_id: object) -> bool:
        return isinstance(item_id, str) and self.contains(item_id)

    def size(self) -> int:
        """Number of live entries."""
        with self._lock:
            self._sweep(self._clock())
            return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def sweep(self) -> int:
        """
        Remove every stale entry now.

        Returns:
            Number of entries removed
        """
        with self._lock:
            before = len(self._entries)
            self._sweep(self._clock())
            return before - len(self._entries)

    def clear(self) -> None:
        """Clear all entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._stats = CacheStats()

    def get_lru_order(self) -> List[str]:
        """
        Get ids in LRU order (least recently used first).

        Useful for debugging and monitoring.
        """
        with self._lock:
            self._sweep(self._clock())
            return list(self._entries.keys())

    def get_stats(self) -> CacheStats:
        with self._lock:
            self._sweep(self._clock())
            self._stats.size = len(self._entries)
            return self._stats.model_copy()

    def _sweep(self, now: float) -> float:
        """Drop stale entries; returns now so callers can reuse it."""
        stale = [
            key for key, entry in self._entries.items()
            if entry.is_stale(now, self._timeout)
        ]
        for key in stale:
            del self._entries[key]

        if stale:
            self._stats.expirations += len(stale)
            logger.debug("Swept %d stale entries: %s", len(stale), stale)
        return now

    def _evict_lru(self) -> None:
        """
        Evict least recently used entry.

        Accessed entries are moved to the end, so the first item is
        always the LRU.
        """
        if self._entries:
            evicted_key, _ = self._entries.popitem(last=False)
            self._stats.evictions += 1
            logger.debug("Evicted LRU entry: %r", evicted_key)

    @staticmethod
    def _item_id(item: T) -> str:
        if not isinstance(item, Identifiable):
            raise TypeError(
                f"{type(item).__name__} does not provide id(); cannot be cached"
            )
        item_id = item.id()
        if not isinstance(item_id, str):
            raise TypeError(
                f"{type(item).__name__}.id() returned {type(item_id).__name__}, expected str"
            )
        return item_id
