"""Coalition API views - thin layer over services."""

from app.container import container
from app.models.coalitions import Coalition, CoalitionAnalysis
from app.models.elections import ElectionResult
from settings import MAJORITY_THRESHOLD, TOTAL_SEATS
from web.api.errors import NotFoundError, validate_limit, validate_threshold, validate_total_seats, validate_year

from .schemas import (
    AllocationResponse,
    AnalysisResponse,
    CabinetItem,
    CoalitionItem,
    HistoryResponse,
    ScenarioItem,
    ScenariosResponse,
    SeatItem,
)


def _result(year: int) -> ElectionResult:
    container.init()
    validate_year(year, container.repo.get_years())
    return container.allocator.build_result(container.repo.get_votes(year))


def _analysis(year: int, majority_threshold: int) -> CoalitionAnalysis:
    result = _result(year)
    return container.enumerator.analyze(result, container.repo.get_registry(), majority_threshold)


def _coalition_item(coalition: Coalition | None, threshold: int) -> CoalitionItem | None:
    if coalition is None:
        return None
    return CoalitionItem(
        parties=list(coalition.parties),
        seats=coalition.total_seats,
        compatibility=coalition.compatibility,
        stability=coalition.stability,
        historical_bonus=coalition.historical_bonus,
        violations=list(coalition.violations),
        kind=coalition.kind,
        orientation=coalition.orientation,
        minimal_winning=coalition.is_minimal_winning(threshold),
    )


def get_allocation(
    votes: dict[str, int] | None = None,
    total_seats: int = TOTAL_SEATS,
    year: int = 2023,
) -> AllocationResponse:
    """Allocate seats for a tally, or for the stored tally of a year."""
    validate_total_seats(total_seats)
    container.init()

    expected = None
    if votes is None:
        validate_year(year, container.repo.get_years())
        votes = container.repo.get_votes(year)
        expected = container.repo.get_expected_seats(year)
    else:
        year = None

    result = container.allocator.build_result(votes, total_seats)

    items = [
        SeatItem(
            party=r.abbreviation,
            votes=r.votes,
            seats=r.seats,
            vote_pct=r.vote_pct,
            seat_pct=r.seat_pct,
        )
        for r in sorted(result.parties.values(), key=lambda r: (-r.seats, -r.votes, r.abbreviation))
    ]

    matches = None
    if expected and total_seats == sum(expected.values()):
        matches = container.allocator.validate_results(result, expected)

    return AllocationResponse(
        year=year,
        items=items,
        total_seats=result.total_seats,
        total_votes=result.total_votes,
        matches_reference=matches,
    )


def get_analysis(year: int = 2023, majority_threshold: int = MAJORITY_THRESHOLD, limit: int = 20) -> AnalysisResponse:
    """Get viable / minority / blocked coalitions, each capped at limit."""
    validate_threshold(majority_threshold)
    validate_limit(limit)
    analysis = _analysis(year, majority_threshold)

    def items(coalitions: list[Coalition]) -> list[CoalitionItem]:
        return [_coalition_item(c, majority_threshold) for c in coalitions[:limit]]

    return AnalysisResponse(
        year=year,
        majority_threshold=majority_threshold,
        viable=items(analysis.viable),
        minority=items(analysis.minority),
        blocked=items(analysis.blocked),
        viable_count=len(analysis.viable),
        minority_count=len(analysis.minority),
        blocked_count=len(analysis.blocked),
        combinations_analyzed=analysis.combinations_analyzed,
        analysis_time_ms=analysis.analysis_time_ms,
        most_compatible=_coalition_item(analysis.most_compatible, majority_threshold),
        most_stable=_coalition_item(analysis.most_stable, majority_threshold),
        historically_likely=_coalition_item(analysis.historically_likely, majority_threshold),
    )


def get_scenarios(year: int = 2023, name: str | None = None) -> ScenariosResponse:
    """Get named scenarios, optionally a single one by name."""
    result = _result(year)
    scenarios = container.scenarios.scenarios(result)

    if name is not None:
        scenarios = [s for s in scenarios if s.name == name]
        if not scenarios:
            raise NotFoundError(f"Scenario not found: {name}")

    items = [
        ScenarioItem(
            name=s.name,
            note=s.note,
            coalition=_coalition_item(s.coalition, MAJORITY_THRESHOLD),
            has_majority=s.has_majority(),
            missing=list(s.missing),
        )
        for s in scenarios
    ]

    return ScenariosResponse(year=year, items=items)


def get_history_score(year: int = 2023, since: int | None = None) -> HistoryResponse:
    """Get historical validation accuracy against past cabinets."""
    analysis = _analysis(year, MAJORITY_THRESHOLD)
    cabinets = container.repo.get_cabinets(since)
    matched = container.history.matches(analysis, cabinets)

    items = [
        CabinetItem(name=c.name, year=c.year, parties=sorted(c.parties), matched=hit)
        for c, hit in zip(cabinets, matched)
    ]

    return HistoryResponse(
        year=year,
        accuracy=container.history.score(analysis, cabinets),
        items=items,
    )
