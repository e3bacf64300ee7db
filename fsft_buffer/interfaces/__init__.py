"""
Contracts shared by buffer implementations and cached values.
"""

from .cache import ICache, CacheStats
from .identifiable import Identifiable

__all__ = [
    "ICache",
    "CacheStats",
    "Identifiable",
]
