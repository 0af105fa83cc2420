"""Engine - single entry point for allocation and coalition analysis."""

from collections.abc import Sequence

from app.container import container
from app.models.coalitions import Coalition, CoalitionAnalysis, HistoricalCoalition
from app.models.elections import ElectionResult
from app.models.parties import Party, PartyRegistry
from app.services.coalitions import ScenarioCatalog
from settings import MAJORITY_THRESHOLD, TOTAL_SEATS


def _services():
    container.init()
    return container


def allocate(votes: dict[str, int], total_seats: int = TOTAL_SEATS) -> dict[str, int]:
    """D'Hondt seats per party; raises InvalidInputError on bad input."""
    return _services().allocator.allocate(votes, total_seats)


def pairwise_score(party_a: Party, party_b: Party) -> float:
    return _services().scorer.pairwise_score(party_a, party_b)


def group_score(parties: Sequence[Party]) -> float:
    return _services().scorer.group_score(parties)


def analyze(
    election_result: ElectionResult,
    registry: PartyRegistry,
    majority_threshold: int = MAJORITY_THRESHOLD,
) -> CoalitionAnalysis:
    return _services().enumerator.analyze(election_result, registry, majority_threshold)


def generate_scenarios(election_result: ElectionResult, registry: PartyRegistry | None = None) -> dict[str, Coalition]:
    """Named scenarios; uses the bundled 2023 party data when no registry is given."""
    services = _services()
    if registry is None:
        return services.scenarios.generate(election_result)
    catalog = ScenarioCatalog(registry, scorer=services.scorer, red_lines=services.red_lines)
    return catalog.generate(election_result)


def validate_history(analysis: CoalitionAnalysis, golden_set: Sequence[HistoricalCoalition]) -> float:
    return _services().history.score(analysis, golden_set)
