"""API errors and validation helpers."""

from settings import TOTAL_SEATS


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Largest chamber we are willing to allocate for
MAX_SEATS = 1000


def validate_total_seats(total_seats: int) -> None:
    """Validate total_seats is a positive chamber size."""
    if not 1 <= total_seats <= MAX_SEATS:
        raise ValidationError(f"Invalid total_seats: {total_seats}. Must be between 1 and {MAX_SEATS}")


def validate_threshold(threshold: int, total_seats: int = TOTAL_SEATS) -> None:
    """Validate a majority threshold against the chamber size."""
    if not 1 <= threshold <= total_seats:
        raise ValidationError(f"Invalid threshold: {threshold}. Must be between 1 and {total_seats}")


def validate_limit(limit: int) -> None:
    if limit < 0:
        raise ValidationError(f"Invalid limit: {limit}. Must not be negative")


def validate_year(year: int, years: list[int]) -> None:
    """Validate that reference data exists for an election year."""
    if year not in years:
        raise NotFoundError(f"No election data for {year}. Available: {', '.join(map(str, years))}")
