"""Election models - allocation results."""

from app.models.elections.entities import ElectionResult, PartyResult

__all__ = [
    "ElectionResult",
    "PartyResult",
]
