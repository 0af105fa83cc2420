"""Seat allocation service - D'Hondt divisor method."""

import time

from loguru import logger

from app.errors import InvalidInputError
from app.models.elections import ElectionResult
from helpers import formulas
from settings import DEFAULT_TOTAL_VOTERS, TOTAL_SEATS


class SeatAllocator:
    """Converts a vote tally into an integer seat distribution."""

    def __init__(self, total_seats: int = TOTAL_SEATS):
        self._total_seats = total_seats
        logger.debug("SeatAllocator initialized: total_seats={}", total_seats)

    @staticmethod
    def _validate(votes: dict[str, int] | None, total_seats: int) -> None:
        if not votes:
            raise InvalidInputError("Party votes cannot be empty")

        if isinstance(total_seats, bool) or not isinstance(total_seats, int) or total_seats <= 0:
            raise InvalidInputError(f"Total seats must be a positive integer, got {total_seats!r}")

        for party, count in votes.items():
            if isinstance(count, bool) or not isinstance(count, int):
                raise InvalidInputError(f"Votes for {party} must be an integer, got {count!r}")
            if count < 0:
                raise InvalidInputError(f"Votes for {party} cannot be negative: {count}")

        if not sum(votes.values()):
            raise InvalidInputError("At least one party must have votes")

    def allocate(self, votes: dict[str, int], total_seats: int | None = None) -> dict[str, int]:
        """Seats per party. Sum always equals total_seats."""
        total_seats = self._total_seats if total_seats is None else total_seats
        self._validate(votes, total_seats)

        start = time.perf_counter()
        seats = formulas.dhondt(votes, total_seats)
        elapsed = (time.perf_counter() - start) * 1000

        logger.info("Allocated {} seats to {} parties in {:.2f}ms", total_seats, len(votes), elapsed)
        return seats

    def build_result(self, votes: dict[str, int], total_seats: int | None = None) -> ElectionResult:
        """Allocate and wrap into an ElectionResult with percentages."""
        total_seats = self._total_seats if total_seats is None else total_seats
        seats = self.allocate(votes, total_seats)
        return ElectionResult.from_counts(votes, seats, total_seats)

    def votes_from_percentages(
        self,
        percentages: dict[str, float],
        total_voters: int = DEFAULT_TOTAL_VOTERS,
    ) -> dict[str, int]:
        """Turn poll percentages into a vote tally."""
        if total_voters <= 0:
            raise InvalidInputError(f"Total voters must be positive, got {total_voters}")
        if any(p < 0 for p in percentages.values()):
            raise InvalidInputError("Percentages cannot be negative")
        return formulas.votes_from_percentages(percentages, total_voters)

    @staticmethod
    def validate_results(result: ElectionResult, expected: dict[str, int]) -> bool:
        """Check allocated seats against a reference table."""
        valid = True
        for party, seats in expected.items():
            actual = result.seats_of(party)
            if actual != seats:
                logger.error("Validation failed: {} expected {} seats, got {}", party, seats, actual)
                valid = False

        if sum(expected.values()) != result.total_seats:
            logger.error("Reference table has {} seats, result has {}", sum(expected.values()), result.total_seats)
            valid = False

        return valid
