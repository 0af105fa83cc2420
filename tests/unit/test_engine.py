"""Tests for the engine entry points and API views."""

import pytest

from app import engine
from app.errors import InvalidInputError
from web.api.coalitions import get_allocation, get_analysis, get_history_score, get_scenarios
from web.api.errors import NotFoundError, ValidationError


class TestEngine:
    def test_allocate(self, votes_2023):
        seats = engine.allocate(votes_2023, 150)
        assert seats["PVV"] == 37
        assert sum(seats.values()) == 150

    def test_allocate_invalid(self):
        with pytest.raises(InvalidInputError):
            engine.allocate({"A": 1}, -5)

    def test_scores(self, registry):
        assert engine.pairwise_score(registry["CDA"], registry["CU"]) > 0.7
        assert engine.group_score([registry["CDA"]]) == 0.0

    def test_analyze(self, small_result, small_registry):
        analysis = engine.analyze(small_result, small_registry, majority_threshold=76)
        assert len(analysis.viable) == 4

    def test_scenarios_default_registry(self, result_2023):
        assert engine.generate_scenarios(result_2023)["Current Government"].total_seats == 88

    def test_scenarios_custom_registry(self, small_result, small_registry):
        assert engine.generate_scenarios(small_result, small_registry) == {}

    def test_validate_history(self, analysis_2023, repo):
        assert engine.validate_history(analysis_2023, repo.get_cabinets()) == pytest.approx(20.0)


class TestViews:
    def test_allocation_reference_year(self):
        response = get_allocation()
        assert response.year == 2023
        assert response.items[0].party == "PVV"
        assert response.items[0].seats == 37
        assert response.matches_reference is True

    def test_allocation_custom_votes(self):
        response = get_allocation({"A": 300, "B": 100}, total_seats=4)
        assert response.year is None
        assert [(i.party, i.seats) for i in response.items] == [("A", 3), ("B", 1)]
        assert response.matches_reference is None

    def test_allocation_invalid_seats(self):
        with pytest.raises(ValidationError):
            get_allocation(total_seats=0)

    def test_unknown_year(self):
        with pytest.raises(NotFoundError) as exc:
            get_allocation(year=1999)
        assert "1999" in exc.value.message

    def test_analysis(self):
        response = get_analysis(limit=5)
        assert len(response.viable) == 5
        assert response.viable_count + response.minority_count + response.blocked_count == 32752
        assert response.most_compatible is not None
        assert response.most_stable is not None
        assert response.historically_likely.historical_bonus > 0
        assert response.viable[0].seats >= response.viable[-1].seats

    def test_analysis_invalid_threshold(self):
        with pytest.raises(ValidationError):
            get_analysis(majority_threshold=0)

    def test_scenarios(self):
        response = get_scenarios()
        assert len(response.items) == 7
        current = response.items[0]
        assert current.name == "Current Government"
        assert current.has_majority

    def test_single_scenario(self):
        response = get_scenarios(name="Grand Coalition")
        assert len(response.items) == 1
        assert response.items[0].coalition.violations

    def test_unknown_scenario(self):
        with pytest.raises(NotFoundError):
            get_scenarios(name="Unity Government")

    def test_history(self):
        response = get_history_score()
        assert response.accuracy == pytest.approx(20.0)
        assert response.items[0].name == "Schoof"
        assert response.items[0].matched
        assert response.items[0].parties == ["BBB", "NSC", "PVV", "VVD"]
