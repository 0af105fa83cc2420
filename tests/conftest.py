"""Shared fixtures."""

import pytest

from app.models.elections import ElectionResult
from app.models.parties import Party, PartyRegistry
from app.repositories import DutchPoliticalRepository
from app.services.coalitions import CoalitionEnumerator, PartyCompatibilityScorer
from app.services.elections import SeatAllocator


def make_party(abbreviation: str, **kwargs) -> Party:
    kwargs.setdefault("name", abbreviation)
    return Party(abbreviation=abbreviation, **kwargs)


@pytest.fixture
def party():
    """Factory for ad-hoc parties."""
    return make_party


@pytest.fixture(scope="session")
def repo():
    return DutchPoliticalRepository()


@pytest.fixture(scope="session")
def registry(repo):
    return repo.get_registry()


@pytest.fixture(scope="session")
def votes_2023(repo):
    return repo.get_votes(2023)


@pytest.fixture(scope="session")
def result_2023(votes_2023):
    return SeatAllocator().build_result(votes_2023)


@pytest.fixture(scope="session")
def scorer_2023(repo):
    """Scorer carrying the Dutch partnership record."""
    return PartyCompatibilityScorer(partnerships=repo.get_partnerships())


@pytest.fixture(scope="session")
def analysis_2023(result_2023, registry, scorer_2023):
    return CoalitionEnumerator(scorer=scorer_2023).analyze(result_2023, registry)


@pytest.fixture
def small_registry():
    """Four parties; D refuses to govern with A."""
    return PartyRegistry(
        [
            make_party("A", economic=5, social=-2, flexibility=60),
            make_party("B", economic=2, social=1, flexibility=70, preferred={"A"}),
            make_party("C", economic=-3, social=4, flexibility=50),
            make_party("D", economic=-8, social=8, flexibility=20, excluded={"A"}),
        ]
    )


@pytest.fixture
def small_result():
    votes = {"A": 6000, "B": 4000, "C": 3000, "D": 2000}
    seats = {"A": 60, "B": 40, "C": 30, "D": 20}
    return ElectionResult.from_counts(votes, seats)
