"""Election services."""

from app.services.elections.allocator import SeatAllocator

__all__ = [
    "SeatAllocator",
]
