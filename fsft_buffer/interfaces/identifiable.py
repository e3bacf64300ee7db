"""
Identifiable - capability required of every cached value.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """
    Anything that can report a stable string identifier.

    The identifier is used as the cache key, so it must not change while
    the object is cached and equal objects must report equal ids.
    """

    def id(self) -> str:
        ...
