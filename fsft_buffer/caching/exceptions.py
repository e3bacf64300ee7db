"""
Errors raised by buffer operations.
"""


class CacheError(Exception):
    """Base class for buffer errors"""


class ItemNotFoundError(CacheError, LookupError):
    """No live entry matches the requested id"""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"No cached object with id {item_id!r}")


class BufferRejectedError(CacheError):
    """The buffer can never hold an object (capacity is zero)"""

    def __init__(self, item_id: str, capacity: int):
        self.item_id = item_id
        self.capacity = capacity
        super().__init__(
            f"Cannot cache {item_id!r}: buffer capacity is {capacity}"
        )
