"""Party reference data repositories."""

from app.repositories.parties.dutch import DutchPoliticalRepository

__all__ = [
    "DutchPoliticalRepository",
]
