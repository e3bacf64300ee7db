"""
FSFT Buffer - a bounded in-memory object cache.

Entries leave the buffer in two ways: least-recently-used replacement
when the buffer is full, and a lazy time-to-live sweep for entries that
have not been refreshed within the timeout.
"""

from .caching import (
    FSFTBuffer,
    CacheError,
    ItemNotFoundError,
    BufferRejectedError,
    DEFAULT_CAPACITY,
    DEFAULT_TIMEOUT,
)
from .config import BufferSettings
from .interfaces import ICache, CacheStats, Identifiable
from .models import BufferEntry

__all__ = [
    "FSFTBuffer",
    "CacheError",
    "ItemNotFoundError",
    "BufferRejectedError",
    "DEFAULT_CAPACITY",
    "DEFAULT_TIMEOUT",
    "BufferSettings",
    "ICache",
    "CacheStats",
    "Identifiable",
    "BufferEntry",
]
