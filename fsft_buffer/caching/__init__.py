"""
Buffer implementations.

FSFTBuffer implements the ICache interface with LRU replacement and a
lazy timeout sweep.
"""

from .exceptions import CacheError, ItemNotFoundError, BufferRejectedError
from .fsft_buffer import FSFTBuffer, DEFAULT_CAPACITY, DEFAULT_TIMEOUT

__all__ = [
    "FSFTBuffer",
    "CacheError",
    "ItemNotFoundError",
    "BufferRejectedError",
    "DEFAULT_CAPACITY",
    "DEFAULT_TIMEOUT",
]
