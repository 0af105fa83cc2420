"""Party models - party entity, registry and input schema."""

from app.models.parties.entities import AXES, Party, PartyRegistry
from app.models.parties.schemas import PartySchema, parse_parties

__all__ = [
    "AXES",
    "Party",
    "PartyRegistry",
    "PartySchema",
    "parse_parties",
]
