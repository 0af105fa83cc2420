"""Tests for party, election and coalition entities."""

import pytest

from app.errors import InvalidInputError
from app.models.coalitions import Coalition, CoalitionAnalysis, HistoricalCoalition
from app.models.elections import ElectionResult
from app.models.parties import PartyRegistry, PartySchema


class TestParty:
    def test_partner_sets_frozen(self, party):
        p = party("A", preferred=["B"], excluded={"C"})
        assert p.preferred == frozenset({"B"})
        assert isinstance(p.excluded, frozenset)

    def test_axis_out_of_range(self, party):
        with pytest.raises(InvalidInputError):
            party("A", economic=11)

    def test_flexibility_out_of_range(self, party):
        with pytest.raises(InvalidInputError):
            party("A", flexibility=101)

    def test_expertise_out_of_range(self, party):
        with pytest.raises(InvalidInputError):
            party("A", expertise=-1)

    def test_missing_abbreviation(self, party):
        with pytest.raises(InvalidInputError):
            party("")

    def test_position_description(self, registry):
        assert registry["PVV"].position_description() == "Center, Conservative, Eurosceptic"
        assert registry["GL-PvdA"].position_description() == "Left, Progressive, Pro-EU"
        assert registry["VVD"].position_description() == "Right, Moderate, Pro-EU"

    def test_to_dict(self, party):
        data = party("A", excluded={"C", "B"}).to_dict()
        assert data["excluded"] == ["B", "C"]
        assert data["abbreviation"] == "A"


class TestRegistry:
    def test_duplicate_abbreviation(self, party):
        with pytest.raises(InvalidInputError):
            PartyRegistry([party("A"), party("A")])

    def test_lookup(self, registry):
        assert len(registry) == 15
        assert "CDA" in registry
        assert registry.get("PvdA") is None
        assert registry["CDA"].flexibility == 90
        assert registry["VVD"].expertise == 90

    def test_select_drops_unknown(self, registry):
        assert [p.abbreviation for p in registry.select(["VVD", "PvdA", "CU"])] == ["VVD", "CU"]

    def test_from_records(self):
        registry = PartyRegistry.from_records(
            [
                {"name": "Alpha", "abbreviation": "A", "economicPosition": 4, "excludedCoalitionPartners": ["B"]},
                {"name": "Beta", "abbreviation": "B", "social": -2},
            ]
        )
        assert registry["A"].economic == 4
        assert registry["A"].excluded == frozenset({"B"})
        assert registry["B"].social == -2

    def test_from_records_out_of_range(self):
        with pytest.raises(InvalidInputError) as exc:
            PartyRegistry.from_records([{"name": "Alpha", "abbreviation": "A", "coalitionFlexibility": 150}])
        assert "#0" in exc.value.message

    def test_schema_defaults(self):
        party = PartySchema(name="Alpha", abbreviation="A").to_party()
        assert party.flexibility == 50
        assert party.position == (0, 0, 0, 0)


class TestElectionResult:
    def test_seats_must_match_total(self):
        with pytest.raises(InvalidInputError):
            ElectionResult.from_counts({"A": 10, "B": 5}, {"A": 100, "B": 40}, total_seats=150)

    def test_seated_order(self):
        result = ElectionResult.from_counts({"A": 10, "B": 30, "C": 20, "D": 1}, {"A": 5, "B": 5, "C": 10, "D": 0})
        assert result.seated() == ["C", "B", "A"]
        assert result.total_seats == 20

    def test_helpers(self, result_2023):
        assert result_2023.seats_of("PVV") == 37
        assert result_2023.seats_of("PvdA") == 0
        assert "BVNL" in result_2023
        assert "BVNL" not in result_2023.seated()
        assert sum(result_2023.seat_map().values()) == 150

    def test_percentages_sum_to_100(self, result_2023):
        assert sum(r.vote_pct for r in result_2023.parties.values()) == pytest.approx(100)


class TestCoalition:
    def test_of_sorts_members(self, party):
        coalition = Coalition.of([party("B"), party("A")], {"A": 50, "B": 30}, 0.8)
        assert coalition.parties == ("A", "B")
        assert coalition.member_seats == (50, 30)
        assert coalition.total_seats == 80
        assert coalition.label() == "A-B"
        assert coalition.kind == "two_party"

    def test_kind_grand(self, party):
        members = [party(x) for x in "ABCDE"]
        assert Coalition.of(members, {}, 0.5).kind == "grand"

    def test_orientation(self, party):
        left = [party("A", economic=-6, social=6), party("B", economic=-4, social=5)]
        right = [party("C", economic=6, social=-6)]
        assert Coalition.of(left, {}, 0.5).orientation == "left"
        assert Coalition.of(right, {}, 0.5).orientation == "right"
        assert Coalition.of(left + right, {}, 0.5).orientation == "center"

    def test_viability_boundary(self, party):
        seats = {"A": 40, "B": 35, "C": 1}
        assert not Coalition.of([party("A"), party("B")], seats, 0.5).is_viable(76)
        assert Coalition.of([party("A"), party("B"), party("C")], seats, 0.5).is_viable(76)

    def test_blocked_not_viable(self, party):
        coalition = Coalition.of([party("A"), party("B")], {"A": 80, "B": 10}, 0.0, ["A excludes B"])
        assert coalition.is_blocked
        assert not coalition.is_viable()

    def test_analysis_most_compatible(self, party):
        low = Coalition.of([party("A"), party("B")], {"A": 80}, 0.4)
        high = Coalition.of([party("A"), party("C")], {"A": 80}, 0.9)
        analysis = CoalitionAnalysis(viable=[low, high])
        assert analysis.most_compatible == high
        assert CoalitionAnalysis().most_compatible is None

    def test_stability_from_members(self, party):
        coalition = Coalition.of([party("A", flexibility=50, expertise=50), party("B", flexibility=50, expertise=50)], {}, 0.5)
        assert coalition.stability == pytest.approx(0.65)
        assert coalition.historical_bonus == 0.0

    def test_historical_bonus_passed_through(self, party):
        assert Coalition.of([party("A"), party("B")], {}, 0.5, historical_bonus=0.8).historical_bonus == 0.8

    def test_analysis_most_stable_and_likely(self, party):
        steady = Coalition.of([party("A", flexibility=90), party("B", flexibility=90)], {"A": 80}, 0.4, historical_bonus=-0.2)
        familiar = Coalition.of([party("A"), party("C")], {"A": 80}, 0.9, historical_bonus=0.7)
        analysis = CoalitionAnalysis(viable=[steady, familiar])
        assert analysis.most_stable == steady
        assert analysis.historically_likely == familiar
        assert analysis.most_compatible == familiar
        assert CoalitionAnalysis().most_stable is None
        assert CoalitionAnalysis().historically_likely is None

    def test_historical_party_set(self):
        record = HistoricalCoalition(name="X", year=2020, parties=["A", "B"])
        assert record.parties == frozenset({"A", "B"})
