"""Coalition domain entities - derived analysis values."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from app.models.common import BaseEntity
from app.models.parties import Party
from helpers import formulas
from settings import MAJORITY_THRESHOLD

KINDS = {0: "empty", 1: "single_party", 2: "two_party", 3: "three_party", 4: "four_party"}


def orientation(parties: Sequence[Party]) -> str:
    """Left / right / center from the mean economic and social positions."""
    if not parties:
        return "center"

    economic = sum(p.economic for p in parties) / len(parties)
    social = sum(p.social for p in parties) / len(parties)

    if economic < -3 and social > 3:
        return "left"
    if economic > 3 and social < -3:
        return "right"
    return "center"


@dataclass(frozen=True)
class Coalition(BaseEntity):
    """Set of parties with seat total, compatibility and red-line violations."""

    parties: tuple[str, ...]
    member_seats: tuple[int, ...]
    compatibility: float
    violations: tuple[str, ...] = ()
    orientation: str = "center"
    stability: float = 0.0
    historical_bonus: float = 0.0

    @classmethod
    def of(
        cls,
        parties: Sequence[Party],
        seats: dict[str, int],
        compatibility: float,
        violations: Iterable[str] = (),
        historical_bonus: float = 0.0,
    ) -> "Coalition":
        """Build a coalition; members are stored in abbreviation order.

        Stability is derived from the members; the historical bonus depends on
        partnership data the caller holds.
        """
        members = sorted(parties, key=lambda p: p.abbreviation)
        return cls(
            parties=tuple(p.abbreviation for p in members),
            member_seats=tuple(seats.get(p.abbreviation, 0) for p in members),
            compatibility=compatibility,
            violations=tuple(violations),
            orientation=orientation(members),
            stability=formulas.stability([p.flexibility for p in members], [p.expertise for p in members]),
            historical_bonus=historical_bonus,
        )

    @property
    def total_seats(self) -> int:
        return sum(self.member_seats)

    @property
    def party_set(self) -> frozenset[str]:
        return frozenset(self.parties)

    @property
    def size(self) -> int:
        return len(self.parties)

    @property
    def kind(self) -> str:
        return KINDS.get(self.size, "grand")

    @property
    def is_blocked(self) -> bool:
        return bool(self.violations)

    def is_viable(self, threshold: int = MAJORITY_THRESHOLD) -> bool:
        return not self.violations and self.total_seats >= threshold

    def is_minimal_winning(self, threshold: int = MAJORITY_THRESHOLD) -> bool:
        return formulas.is_minimal_winning(self.member_seats, threshold)

    def label(self) -> str:
        return "-".join(self.parties)

    def sort_key(self) -> tuple:
        return (-self.total_seats, -self.compatibility, self.parties)

    def __str__(self) -> str:
        return f"{self.label()} ({self.total_seats} seats, {self.compatibility:.2f} compatibility)"


@dataclass(frozen=True)
class CoalitionAnalysis(BaseEntity):
    """Every evaluated coalition, partitioned into viable / minority / blocked."""

    viable: list[Coalition] = field(default_factory=list)
    minority: list[Coalition] = field(default_factory=list)
    blocked: list[Coalition] = field(default_factory=list)
    combinations_analyzed: int = 0
    analysis_time_ms: float = 0.0
    majority_threshold: int = MAJORITY_THRESHOLD

    @property
    def most_compatible(self) -> Coalition | None:
        if not self.viable:
            return None
        return min(self.viable, key=lambda c: (-c.compatibility, -c.total_seats, c.parties))

    @property
    def most_stable(self) -> Coalition | None:
        if not self.viable:
            return None
        return min(self.viable, key=lambda c: (-c.stability, -c.total_seats, c.parties))

    @property
    def historically_likely(self) -> Coalition | None:
        """Viable coalition with the strongest partnership record."""
        if not self.viable:
            return None
        return min(self.viable, key=lambda c: (-c.historical_bonus, -c.total_seats, c.parties))

    def minimal_winning(self) -> list[Coalition]:
        """Viable coalitions in which every party is pivotal."""
        return [c for c in self.viable if c.is_minimal_winning(self.majority_threshold)]

    def all_coalitions(self) -> list[Coalition]:
        return [*self.viable, *self.minority, *self.blocked]


@dataclass(frozen=True)
class Scenario(BaseEntity):
    """Named coalition with an explanatory note."""

    name: str
    coalition: Coalition
    note: str
    defining: tuple[str, ...]
    missing: tuple[str, ...] = ()

    @property
    def is_partial(self) -> bool:
        return bool(self.missing)

    def has_majority(self, threshold: int = MAJORITY_THRESHOLD) -> bool:
        return self.coalition.total_seats >= threshold


@dataclass(frozen=True)
class HistoricalCoalition(BaseEntity):
    """A party set known to have governed."""

    name: str
    year: int
    parties: frozenset[str]

    def __post_init__(self):
        object.__setattr__(self, "parties", frozenset(self.parties))
