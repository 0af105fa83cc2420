"""Coalition API response schemas."""

from pydantic import BaseModel


class SeatItem(BaseModel):
    """Allocation outcome for a party."""

    party: str
    votes: int
    seats: int
    vote_pct: float
    seat_pct: float


class AllocationResponse(BaseModel):
    """Seat allocation response."""

    year: int | None
    items: list[SeatItem]
    total_seats: int
    total_votes: int
    matches_reference: bool | None = None


class CoalitionItem(BaseModel):
    """Coalition summary."""

    parties: list[str]
    seats: int
    compatibility: float
    stability: float
    historical_bonus: float
    violations: list[str]
    kind: str
    orientation: str
    minimal_winning: bool


class AnalysisResponse(BaseModel):
    """Coalition analysis response."""

    year: int
    majority_threshold: int
    viable: list[CoalitionItem]
    minority: list[CoalitionItem]
    blocked: list[CoalitionItem]
    viable_count: int
    minority_count: int
    blocked_count: int
    combinations_analyzed: int
    analysis_time_ms: float
    most_compatible: CoalitionItem | None
    most_stable: CoalitionItem | None
    historically_likely: CoalitionItem | None


class ScenarioItem(BaseModel):
    """Named scenario."""

    name: str
    note: str
    coalition: CoalitionItem
    has_majority: bool
    missing: list[str]


class ScenariosResponse(BaseModel):
    """Scenarios response."""

    year: int
    items: list[ScenarioItem]


class CabinetItem(BaseModel):
    """Historical cabinet and whether the analysis found it."""

    name: str
    year: int
    parties: list[str]
    matched: bool


class HistoryResponse(BaseModel):
    """Historical validation response."""

    year: int
    accuracy: float
    items: list[CabinetItem]
