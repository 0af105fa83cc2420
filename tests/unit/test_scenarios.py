"""Tests for named scenarios and historical validation."""

import pytest

from app.models.coalitions import CoalitionAnalysis, HistoricalCoalition
from app.models.elections import ElectionResult
from app.models.parties import PartyRegistry
from app.services.coalitions import SCENARIOS, HistoricalValidator, ScenarioCatalog


@pytest.fixture
def catalog(registry):
    return ScenarioCatalog(registry)


class TestScenarioCatalog:
    def test_all_present_in_2023(self, catalog, result_2023):
        assert list(catalog.generate(result_2023)) == ScenarioCatalog.names()
        assert len(SCENARIOS) == 7

    def test_current_government(self, catalog, result_2023):
        current = catalog.generate(result_2023)["Current Government"]
        assert current.party_set == {"PVV", "VVD", "NSC", "BBB"}
        assert current.total_seats == 88
        assert not current.violations

    def test_grand_coalition_blocked(self, catalog, result_2023):
        grand = catalog.generate(result_2023)["Grand Coalition"]
        assert grand.total_seats == 106
        assert "PVV excludes GL-PvdA" in grand.violations

    def test_right_coalition_red_line(self, catalog, result_2023):
        assert catalog.generate(result_2023)["Right Coalition"].violations == ("VVD excludes FvD",)

    def test_minority_government(self, catalog, result_2023):
        scenario = next(s for s in catalog.scenarios(result_2023) if s.name == "Minority Government")
        assert scenario.coalition.total_seats == 53
        assert not scenario.has_majority()
        assert not scenario.is_partial

    def test_same_coalition_as_enumeration(self, registry, scorer_2023, result_2023, analysis_2023):
        catalog = ScenarioCatalog(registry, scorer=scorer_2023)
        current = catalog.generate(result_2023)["Current Government"]
        match = next(c for c in analysis_2023.viable if c.parties == current.parties)
        assert current.compatibility == match.compatibility
        assert current.historical_bonus == match.historical_bonus
        assert current == match

    def test_idempotent(self, catalog, result_2023):
        assert catalog.generate(result_2023) == catalog.generate(result_2023)

    def test_partial_scenario_kept(self, catalog):
        # FvD and JA21 lose their seats: 3 of 5 right-wing parties remain
        result = ElectionResult.from_counts(
            {"PVV": 40, "VVD": 30, "BBB": 10, "FvD": 5, "JA21": 5, "GL-PvdA": 60},
            {"PVV": 40, "VVD": 30, "BBB": 10, "FvD": 0, "JA21": 0, "GL-PvdA": 70},
        )
        right = next(s for s in catalog.scenarios(result) if s.name == "Right Coalition")
        assert right.coalition.parties == ("BBB", "PVV", "VVD")
        assert right.missing == ("FvD", "JA21")
        assert right.is_partial
        assert "missing: FvD, JA21" in right.note

    def test_mostly_missing_scenario_omitted(self, catalog):
        # Left Coalition keeps only GL-PvdA and D66
        result = ElectionResult.from_counts(
            {"GL-PvdA": 50, "D66": 30, "VVD": 20},
            {"GL-PvdA": 75, "D66": 45, "VVD": 30},
        )
        scenarios = catalog.generate(result)
        assert "Left Coalition" not in scenarios
        assert scenarios["Purple Coalition"].total_seats == 150

    def test_exactly_half_missing_kept(self, catalog):
        result = ElectionResult.from_counts({"PVV": 50, "VVD": 50}, {"PVV": 75, "VVD": 75})
        assert catalog.generate(result)["Current Government"].parties == ("PVV", "VVD")

    def test_unknown_party_counts_as_missing(self, party):
        registry = PartyRegistry([party("VVD"), party("D66")])
        result = ElectionResult.from_counts({"VVD": 1, "D66": 1, "GL-PvdA": 1}, {"VVD": 50, "D66": 50, "GL-PvdA": 50})
        purple = ScenarioCatalog(registry).scenarios(result)[0]
        assert purple.name == "Purple Coalition"
        assert purple.missing == ("GL-PvdA",)


class TestHistoricalValidator:
    @pytest.fixture
    def validator(self):
        return HistoricalValidator()

    def test_2023_accuracy(self, validator, analysis_2023, repo):
        # only Schoof governs with a majority in the 2023 chamber
        assert validator.score(analysis_2023, repo.get_cabinets()) == pytest.approx(20.0)

    def test_matches(self, validator, analysis_2023, repo):
        assert validator.matches(analysis_2023, repo.get_cabinets()) == [True, False, False, False, False]

    def test_since(self, validator, analysis_2023, repo):
        assert validator.score(analysis_2023, repo.get_cabinets(since=2022)) == pytest.approx(50.0)

    def test_exact_viable_set(self, validator, analysis_2023):
        golden = [HistoricalCoalition(name="Exact", year=2024, parties={"PVV", "VVD", "NSC"})]
        assert validator.score(analysis_2023, golden) == 100.0

    def test_strict_subset_of_viable_does_not_match(self, validator, analysis_2023):
        # PVV-VVD (61 seats) sits inside the viable PVV-VVD-NSC but is not viable itself
        golden = [HistoricalCoalition(name="Subset", year=2024, parties={"PVV", "VVD"})]
        assert validator.score(analysis_2023, golden) == 0.0

    def test_viable_superset_matches_on_its_own(self, validator, analysis_2023):
        golden = [HistoricalCoalition(name="Superset", year=2024, parties={"PVV", "VVD", "NSC", "BBB", "SGP"})]
        assert validator.score(analysis_2023, golden) == 100.0

    def test_blocked_set(self, validator, analysis_2023):
        golden = [HistoricalCoalition(name="Blocked", year=2024, parties={"PVV", "GL-PvdA", "VVD"})]
        assert validator.score(analysis_2023, golden) == 0.0

    def test_empty_golden_set(self, validator, analysis_2023):
        assert validator.score(analysis_2023, []) == 0.0

    def test_empty_analysis(self, validator, repo):
        assert validator.score(CoalitionAnalysis(), repo.get_cabinets()) == 0.0
