"""Repositories package - access to reference election data."""

from app.repositories.base import BaseRepository
from app.repositories.parties import DutchPoliticalRepository

__all__ = [
    # Base
    "BaseRepository",
    # Parties
    "DutchPoliticalRepository",
]
