"""Party entities - ideological profile and coalition red lines."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from app.errors import InvalidInputError
from app.models.common import BaseEntity

AXES = ("economic", "social", "european", "immigration")
AXIS_LIMIT = 10.0


@dataclass(frozen=True)
class Party(BaseEntity):
    """Political party for a single election cycle.

    Axes run from -10 to 10: economic left/right, social conservative/progressive,
    european eurosceptic/pro-EU, immigration restrictive/open.
    """

    name: str
    abbreviation: str
    economic: float = 0.0
    social: float = 0.0
    european: float = 0.0
    immigration: float = 0.0
    flexibility: float = 50.0
    expertise: float = 50.0
    preferred: frozenset[str] = frozenset()
    excluded: frozenset[str] = frozenset()
    seats: int = 0
    votes: int = 0
    leader: str | None = None

    def __post_init__(self):
        if not self.abbreviation:
            raise InvalidInputError(f"Party {self.name!r} has no abbreviation")

        for axis in AXES:
            value = getattr(self, axis)
            if not -AXIS_LIMIT <= value <= AXIS_LIMIT:
                raise InvalidInputError(f"{self.abbreviation}: {axis} position {value} outside [-10, 10]")

        if not 0 <= self.flexibility <= 100:
            raise InvalidInputError(f"{self.abbreviation}: flexibility {self.flexibility} outside [0, 100]")

        if not 0 <= self.expertise <= 100:
            raise InvalidInputError(f"{self.abbreviation}: expertise {self.expertise} outside [0, 100]")

        if self.seats < 0 or self.votes < 0:
            raise InvalidInputError(f"{self.abbreviation}: seats and votes must be non-negative")

        object.__setattr__(self, "preferred", frozenset(self.preferred))
        object.__setattr__(self, "excluded", frozenset(self.excluded))

    @property
    def position(self) -> tuple[float, ...]:
        return tuple(getattr(self, axis) for axis in AXES)

    def prefers(self, other: "Party") -> bool:
        return other.abbreviation in self.preferred

    def excludes(self, other: "Party") -> bool:
        return other.abbreviation in self.excluded

    def position_description(self) -> str:
        """Short label, e.g. 'Right, Conservative, Eurosceptic'."""
        economic = "Left" if self.economic < -3 else "Right" if self.economic > 3 else "Center"
        social = "Conservative" if self.social < -3 else "Progressive" if self.social > 3 else "Moderate"
        european = "Eurosceptic" if self.european < -3 else "Pro-EU" if self.european > 3 else "EU-Neutral"
        return f"{economic}, {social}, {european}"


class PartyRegistry:
    """Read-only lookup of parties by abbreviation."""

    def __init__(self, parties: Iterable[Party]):
        self._parties: dict[str, Party] = {}
        for party in parties:
            if party.abbreviation in self._parties:
                raise InvalidInputError(f"Duplicate party abbreviation: {party.abbreviation}")
            self._parties[party.abbreviation] = party

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "PartyRegistry":
        """Build a registry from raw party dicts (validated)."""
        from app.models.parties.schemas import parse_parties

        return cls(parse_parties(records))

    def get(self, abbreviation: str) -> Party | None:
        return self._parties.get(abbreviation)

    def select(self, abbreviations: Iterable[str]) -> list[Party]:
        """Known parties in the given order; unknown abbreviations are dropped."""
        return [self._parties[a] for a in abbreviations if a in self._parties]

    def abbreviations(self) -> list[str]:
        return list(self._parties)

    def __getitem__(self, abbreviation: str) -> Party:
        return self._parties[abbreviation]

    def __contains__(self, abbreviation: object) -> bool:
        return abbreviation in self._parties

    def __iter__(self) -> Iterator[Party]:
        return iter(self._parties.values())

    def __len__(self) -> int:
        return len(self._parties)

    def __repr__(self) -> str:
        return f"PartyRegistry({', '.join(self._parties)})"
