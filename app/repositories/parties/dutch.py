"""Dutch reference data - 2023 party registry, vote tally and past cabinets."""

from loguru import logger

from app.models.coalitions import HistoricalCoalition
from app.models.parties import Party, PartyRegistry, parse_parties
from app.repositories.base import BaseRepository

PARTIES_2023 = [
    {
        "name": "Partij voor de Vrijheid",
        "abbreviation": "PVV",
        "leader": "Geert Wilders",
        "economicPosition": 3.0,
        "socialPosition": -8.0,
        "europeanPosition": -6.0,
        "immigrationPosition": -9.0,
        "coalitionFlexibility": 30.0,
        "campaignExpertise": 85.0,
        "preferredCoalitionPartners": ["VVD", "BBB", "NSC"],
        "excludedCoalitionPartners": ["GL-PvdA", "D66", "DENK", "Volt"],
    },
    {
        "name": "GroenLinks-PvdA",
        "abbreviation": "GL-PvdA",
        "leader": "Frans Timmermans",
        "economicPosition": -7.0,
        "socialPosition": 8.0,
        "europeanPosition": 8.0,
        "immigrationPosition": 7.0,
        "coalitionFlexibility": 70.0,
        "campaignExpertise": 80.0,
        "preferredCoalitionPartners": ["D66", "Volt", "CU", "PvdD"],
        "excludedCoalitionPartners": ["PVV", "FvD", "JA21"],
    },
    {
        "name": "Volkspartij voor Vrijheid en Democratie",
        "abbreviation": "VVD",
        "leader": "Dilan Yeşilgöz-Zegerius",
        "economicPosition": 6.0,
        "socialPosition": 3.0,
        "europeanPosition": 6.0,
        "immigrationPosition": -2.0,
        "coalitionFlexibility": 85.0,
        "campaignExpertise": 90.0,
        "preferredCoalitionPartners": ["D66", "CDA", "NSC", "CU"],
        "excludedCoalitionPartners": ["SP", "FvD"],
    },
    {
        "name": "Nieuw Sociaal Contract",
        "abbreviation": "NSC",
        "leader": "Pieter Omtzigt",
        "economicPosition": 4.0,
        "socialPosition": -1.0,
        "europeanPosition": 2.0,
        "immigrationPosition": -3.0,
        "coalitionFlexibility": 60.0,
        "campaignExpertise": 70.0,
        "preferredCoalitionPartners": ["VVD", "CDA", "CU", "D66"],
        "excludedCoalitionPartners": ["FvD", "DENK"],
    },
    {
        "name": "Democraten 66",
        "abbreviation": "D66",
        "leader": "Rob Jetten",
        "economicPosition": 2.0,
        "socialPosition": 7.0,
        "europeanPosition": 9.0,
        "immigrationPosition": 5.0,
        "coalitionFlexibility": 80.0,
        "campaignExpertise": 75.0,
        "preferredCoalitionPartners": ["VVD", "GL-PvdA", "Volt", "CU"],
        "excludedCoalitionPartners": ["PVV", "FvD", "JA21"],
    },
    {
        "name": "BoerBurgerBeweging",
        "abbreviation": "BBB",
        "leader": "Caroline van der Plas",
        "economicPosition": 1.0,
        "socialPosition": -4.0,
        "europeanPosition": -3.0,
        "immigrationPosition": -5.0,
        "coalitionFlexibility": 45.0,
        "campaignExpertise": 60.0,
        "preferredCoalitionPartners": ["PVV", "VVD", "NSC", "CDA"],
        "excludedCoalitionPartners": ["GL-PvdA", "D66", "PvdD"],
    },
    {
        "name": "Christen-Democratisch Appèl",
        "abbreviation": "CDA",
        "leader": "Henri Bontenbal",
        "economicPosition": 3.0,
        "socialPosition": -3.0,
        "europeanPosition": 5.0,
        "immigrationPosition": -2.0,
        "coalitionFlexibility": 90.0,
        "campaignExpertise": 70.0,
        "preferredCoalitionPartners": ["VVD", "D66", "NSC", "CU"],
        "excludedCoalitionPartners": ["FvD", "SP"],
    },
    {
        "name": "Socialistische Partij",
        "abbreviation": "SP",
        "leader": "Lilian Marijnissen",
        "economicPosition": -8.0,
        "socialPosition": 4.0,
        "europeanPosition": -4.0,
        "immigrationPosition": 2.0,
        "coalitionFlexibility": 40.0,
        "campaignExpertise": 65.0,
        "preferredCoalitionPartners": ["GL-PvdA", "PvdD"],
        "excludedCoalitionPartners": ["VVD", "PVV", "FvD", "JA21"],
    },
    {
        "name": "Forum voor Democratie",
        "abbreviation": "FvD",
        "leader": "Thierry Baudet",
        "economicPosition": 4.0,
        "socialPosition": -7.0,
        "europeanPosition": -8.0,
        "immigrationPosition": -8.0,
        "coalitionFlexibility": 20.0,
        "campaignExpertise": 50.0,
        "preferredCoalitionPartners": ["PVV", "JA21"],
        "excludedCoalitionPartners": ["GL-PvdA", "D66", "Volt", "DENK", "CU"],
    },
    {
        "name": "Partij voor de Dieren",
        "abbreviation": "PvdD",
        "leader": "Esther Ouwehand",
        "economicPosition": -3.0,
        "socialPosition": 6.0,
        "europeanPosition": 4.0,
        "immigrationPosition": 4.0,
        "coalitionFlexibility": 35.0,
        "campaignExpertise": 55.0,
        "preferredCoalitionPartners": ["GL-PvdA", "Volt", "SP"],
        "excludedCoalitionPartners": ["PVV", "FvD", "BBB"],
    },
    {
        "name": "ChristenUnie",
        "abbreviation": "CU",
        "leader": "Miriam Bikker",
        "economicPosition": -1.0,
        "socialPosition": -5.0,
        "europeanPosition": 3.0,
        "immigrationPosition": 0.0,
        "coalitionFlexibility": 85.0,
        "campaignExpertise": 60.0,
        "preferredCoalitionPartners": ["VVD", "D66", "CDA", "NSC"],
        "excludedCoalitionPartners": ["FvD", "PVV"],
    },
    {
        "name": "Volt Nederland",
        "abbreviation": "Volt",
        "leader": "Laurens Dassen",
        "economicPosition": 1.0,
        "socialPosition": 8.0,
        "europeanPosition": 10.0,
        "immigrationPosition": 7.0,
        "coalitionFlexibility": 75.0,
        "campaignExpertise": 65.0,
        "preferredCoalitionPartners": ["D66", "GL-PvdA", "VVD"],
        "excludedCoalitionPartners": ["PVV", "FvD", "JA21"],
    },
    {
        "name": "JA21",
        "abbreviation": "JA21",
        "leader": "Joost Eerdmans",
        "economicPosition": 5.0,
        "socialPosition": -6.0,
        "europeanPosition": -4.0,
        "immigrationPosition": -7.0,
        "coalitionFlexibility": 50.0,
        "campaignExpertise": 40.0,
        "preferredCoalitionPartners": ["PVV", "VVD", "FvD"],
        "excludedCoalitionPartners": ["GL-PvdA", "D66", "DENK"],
    },
    {
        "name": "Staatkundig Gereformeerde Partij",
        "abbreviation": "SGP",
        "leader": "Kees van der Staaij",
        "economicPosition": 2.0,
        "socialPosition": -9.0,
        "europeanPosition": -2.0,
        "immigrationPosition": -4.0,
        "coalitionFlexibility": 30.0,
        "campaignExpertise": 55.0,
        "preferredCoalitionPartners": ["CU", "CDA"],
        "excludedCoalitionPartners": ["D66", "GL-PvdA", "PvdD", "DENK"],
    },
    {
        "name": "DENK",
        "abbreviation": "DENK",
        "leader": "Stephan van Baarle",
        "economicPosition": -4.0,
        "socialPosition": 7.0,
        "europeanPosition": 2.0,
        "immigrationPosition": 9.0,
        "coalitionFlexibility": 40.0,
        "campaignExpertise": 60.0,
        "preferredCoalitionPartners": ["GL-PvdA", "SP"],
        "excludedCoalitionPartners": ["PVV", "FvD", "JA21"],
    },
]

# 2023-style tally; every party sits inside its D'Hondt band for divisor 65,000
VOTES = {
    2023: {
        "PVV": 2_450_878,
        "GL-PvdA": 1_643_073,
        "VVD": 1_589_519,
        "NSC": 1_343_287,
        "D66": 620_344,
        "BBB": 485_551,
        "CDA": 345_822,
        "SP": 328_225,
        "DENK": 246_765,
        "PvdD": 235_148,
        "FvD": 232_963,
        "CU": 212_532,
        "Volt": 203_917,
        "SGP": 174_210,
        "JA21": 71_345,
        "BVNL": 52_913,
        "50PLUS": 51_043,
    },
}

EXPECTED_SEATS = {
    2023: {
        "PVV": 37,
        "GL-PvdA": 25,
        "VVD": 24,
        "NSC": 20,
        "D66": 9,
        "BBB": 7,
        "CDA": 5,
        "SP": 5,
        "DENK": 3,
        "PvdD": 3,
        "FvD": 3,
        "CU": 3,
        "Volt": 3,
        "SGP": 2,
        "JA21": 1,
        "BVNL": 0,
        "50PLUS": 0,
    },
}

CABINETS = [
    ("Schoof", 2024, ["PVV", "VVD", "NSC", "BBB"]),
    ("Rutte IV", 2022, ["VVD", "D66", "CDA", "CU"]),
    ("Rutte III", 2017, ["VVD", "CDA", "D66", "CU"]),
    ("Rutte II", 2012, ["VVD", "PvdA"]),
    ("Rutte I", 2010, ["VVD", "CDA"]),
]

# Partnership record of party pairs, -1 (hostile) to 1 (natural partners)
PARTNERSHIPS = {
    ("VVD", "D66"): 0.8,
    ("VVD", "CDA"): 0.7,
    ("CDA", "D66"): 0.6,
    ("VVD", "CU"): 0.5,
    ("CDA", "CU"): 0.9,
    ("GL-PvdA", "D66"): 0.6,
    ("VVD", "NSC"): 0.4,
    ("NSC", "CDA"): 0.5,
    ("BBB", "VVD"): 0.3,
    ("PVV", "D66"): -0.8,
    ("PVV", "GL-PvdA"): -0.9,
    ("FvD", "D66"): -0.7,
    ("SP", "VVD"): -0.6,
    ("PVV", "DENK"): -1.0,
    ("FvD", "CU"): -0.8,
    ("BBB", "PvdD"): -0.7,
}


class DutchPoliticalRepository(BaseRepository):
    """Reference data for the Dutch Tweede Kamer."""

    def get_parties(self) -> list[Party]:
        """All parties of the 2023 cycle."""
        return self._cached("parties", lambda: parse_parties(PARTIES_2023))

    def get_registry(self) -> PartyRegistry:
        return self._cached("registry", lambda: PartyRegistry(self.get_parties()))

    def get_years(self) -> list[int]:
        return sorted(VOTES)

    def get_votes(self, year: int = 2023) -> dict[str, int]:
        """Vote tally for an election year (empty if unknown)."""
        if year not in VOTES:
            logger.warning("No vote data for {}", year)
            return {}
        return dict(VOTES[year])

    def get_expected_seats(self, year: int = 2023) -> dict[str, int]:
        return dict(EXPECTED_SEATS.get(year, {}))

    def get_cabinets(self, since: int | None = None) -> list[HistoricalCoalition]:
        """Past cabinets, newest first."""
        cabinets = self._cached(
            "cabinets",
            lambda: [HistoricalCoalition(name=n, year=y, parties=frozenset(p)) for n, y, p in CABINETS],
        )
        return [c for c in cabinets if since is None or c.year >= since]

    def get_partnerships(self) -> dict[frozenset[str], float]:
        """Historical partnership value per unordered party pair."""
        return self._cached("partnerships", lambda: {frozenset(pair): v for pair, v in PARTNERSHIPS.items()})
