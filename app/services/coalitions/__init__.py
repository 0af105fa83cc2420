"""Coalition services."""

from app.services.coalitions.enumerator import CoalitionEnumerator
from app.services.coalitions.history import HistoricalValidator
from app.services.coalitions.red_lines import RedLineValidator
from app.services.coalitions.scenarios import SCENARIOS, ScenarioCatalog
from app.services.coalitions.scorer import PartyCompatibilityScorer

__all__ = [
    "CoalitionEnumerator",
    "HistoricalValidator",
    "PartyCompatibilityScorer",
    "RedLineValidator",
    "SCENARIOS",
    "ScenarioCatalog",
]
