"""Election entities - per-party outcome of a seat allocation."""

from dataclasses import dataclass

from app.errors import InvalidInputError
from app.models.common import BaseEntity
from helpers import formulas
from settings import TOTAL_SEATS, VOTE_PCT_TOLERANCE


@dataclass(frozen=True)
class PartyResult(BaseEntity):
    """Votes and seats won by one party."""

    abbreviation: str
    votes: int
    seats: int
    vote_pct: float
    seat_pct: float


@dataclass(frozen=True)
class ElectionResult(BaseEntity):
    """Outcome of one election: abbreviation -> PartyResult."""

    parties: dict[str, PartyResult]
    total_seats: int = TOTAL_SEATS

    def __post_init__(self):
        allocated = sum(r.seats for r in self.parties.values())
        if allocated != self.total_seats:
            raise InvalidInputError(f"Allocated {allocated} seats, expected {self.total_seats}")

        pct = sum(r.vote_pct for r in self.parties.values())
        if abs(pct - 100) > VOTE_PCT_TOLERANCE:
            raise InvalidInputError(f"Vote percentages sum to {pct:.3f}, expected 100")

    @classmethod
    def from_counts(cls, votes: dict[str, int], seats: dict[str, int], total_seats: int | None = None) -> "ElectionResult":
        """Build a result from raw votes and allocated seats."""
        total_seats = sum(seats.values()) if total_seats is None else total_seats
        vote_pct = formulas.shares(votes)
        seat_pct = formulas.shares(seats, total_seats)

        parties = {
            p: PartyResult(
                abbreviation=p,
                votes=v,
                seats=seats.get(p, 0),
                vote_pct=vote_pct[p],
                seat_pct=seat_pct.get(p, 0.0),
            )
            for p, v in votes.items()
        }
        return cls(parties=parties, total_seats=total_seats)

    @property
    def total_votes(self) -> int:
        return sum(r.votes for r in self.parties.values())

    def seats_of(self, abbreviation: str) -> int:
        result = self.parties.get(abbreviation)
        return result.seats if result else 0

    def seat_map(self) -> dict[str, int]:
        return {p: r.seats for p, r in self.parties.items()}

    def seated(self) -> list[str]:
        """Parties with seats, largest first (ties: votes, then name)."""
        seated = [r for r in self.parties.values() if r.seats > 0]
        return [r.abbreviation for r in sorted(seated, key=lambda r: (-r.seats, -r.votes, r.abbreviation))]

    def __contains__(self, abbreviation: object) -> bool:
        return abbreviation in self.parties

    def __getitem__(self, abbreviation: str) -> PartyResult:
        return self.parties[abbreviation]
