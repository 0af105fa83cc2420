"""Coalition models - coalitions, analyses, scenarios and historical records."""

from app.models.coalitions.entities import (
    Coalition,
    CoalitionAnalysis,
    HistoricalCoalition,
    Scenario,
    orientation,
)

__all__ = [
    "Coalition",
    "CoalitionAnalysis",
    "HistoricalCoalition",
    "Scenario",
    "orientation",
]
