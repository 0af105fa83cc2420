"""Services package - service class exports."""

from app.services.coalitions import (
    CoalitionEnumerator,
    HistoricalValidator,
    PartyCompatibilityScorer,
    RedLineValidator,
    ScenarioCatalog,
)
from app.services.elections import SeatAllocator

__all__ = [
    "CoalitionEnumerator",
    "HistoricalValidator",
    "PartyCompatibilityScorer",
    "RedLineValidator",
    "ScenarioCatalog",
    "SeatAllocator",
]
