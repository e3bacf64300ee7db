"""
Cache interface - unified contract for identifier-keyed buffers.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from pydantic import BaseModel

from .identifiable import Identifiable

T = TypeVar("T", bound=Identifiable)


class CacheStats(BaseModel):
    """Statistics about cache performance"""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0
    removals: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ICache(ABC, Generic[T]):
    """
    Unified cache interface for buffers of Identifiable objects.

    Values are stored under the id they report, so writes take the
    object itself and reads take the id.
    """

    @abstractmethod
    def put(self, item: T) -> bool:
        """
        Store an object, replacing any entry with the same id.

        Args:
            item: Object to cache

        Returns:
            True once the object is stored
        """
        pass

    @abstractmethod
    def get(self, item_id: str) -> T:
        """
        Retrieve an object by id.

        Args:
            item_id: Identifier of the cached object

        Returns:
            The cached object

        Raises:
            ItemNotFoundError: if no live entry has this id
        """
        pass

    @abstractmethod
    def touch(self, item_id: str) -> bool:
        """
        Mark an object as fresh so its timeout is delayed.

        Args:
            item_id: Identifier of the cached object

        Returns:
            True if the object was cached, False otherwise
        """
        pass

    @abstractmethod
    def update(self, item: T) -> bool:
        """
        Replace a cached object and refresh it.

        Args:
            item: New version of an already cached object

        Returns:
            True if an entry was replaced, False if the id was absent
        """
        pass

    @abstractmethod
    def evict(self, item_id: str) -> bool:
        """
        Remove specific object from cache.

        Args:
            item_id: Identifier to evict

        Returns:
            True if an entry was removed
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all entries from cache."""
        pass

    @abstractmethod
    def get_lru_order(self) -> List[str]:
        """Ids currently cached, least recently used first."""
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, evictions, expirations, removals and size
        """
        pass
