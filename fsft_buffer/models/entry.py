"""
Buffer entry model.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class BufferEntry(BaseModel):
    """
    Single cached object with its two timestamps.

    last_touched drives the timeout and is only reset by writes and
    touches. last_used records the latest access of any kind; the
    buffer's ordering mirrors it for LRU replacement.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: Any
    last_touched: float
    last_used: float

    def is_stale(self, now: float, timeout: float) -> bool:
        """Check if the entry has gone unrefreshed for longer than timeout."""
        return now - self.last_touched > timeout

    def mark_used(self, now: float) -> None:
        self.last_used = now

    def refresh(self, now: float) -> None:
        """Reset both timestamps, as a write or touch does."""
        self.last_touched = now
        self.last_used = now
