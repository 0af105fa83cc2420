"""Coalition API."""

from web.api.coalitions.views import (
    get_allocation,
    get_analysis,
    get_history_score,
    get_scenarios,
)

__all__ = [
    "get_allocation",
    "get_analysis",
    "get_scenarios",
    "get_history_score",
]
