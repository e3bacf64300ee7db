from .entry import BufferEntry

__all__ = ["BufferEntry"]
