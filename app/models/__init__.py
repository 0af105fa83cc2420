"""Models package - entities for all domains."""

from app.models.coalitions import (
    Coalition,
    CoalitionAnalysis,
    HistoricalCoalition,
    Scenario,
)
from app.models.common import BaseEntity
from app.models.elections import ElectionResult, PartyResult
from app.models.parties import AXES, Party, PartyRegistry, PartySchema

__all__ = [
    # Common
    "BaseEntity",
    # Parties
    "AXES",
    "Party",
    "PartyRegistry",
    "PartySchema",
    # Elections
    "ElectionResult",
    "PartyResult",
    # Coalitions
    "Coalition",
    "CoalitionAnalysis",
    "HistoricalCoalition",
    "Scenario",
]
