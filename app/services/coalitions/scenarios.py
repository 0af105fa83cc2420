"""Named coalition scenarios evaluated against an election result."""

from loguru import logger

from app.models.coalitions import Coalition, Scenario
from app.models.elections import ElectionResult
from app.models.parties import PartyRegistry
from app.services.coalitions.red_lines import RedLineValidator
from app.services.coalitions.scorer import PartyCompatibilityScorer
from settings import SCENARIO_MIN_COVERAGE

# (name, defining parties, note)
SCENARIOS: list[tuple[str, tuple[str, ...], str]] = [
    ("Current Government", ("PVV", "VVD", "NSC", "BBB"), "Right-leaning cabinet formed after the 2023 election"),
    ("Purple Coalition", ("VVD", "GL-PvdA", "D66"), "Liberals with social democrats, the classic 'paars' formula"),
    ("Left Coalition", ("GL-PvdA", "D66", "Volt", "PvdD", "SP"), "Progressive alternative"),
    ("Right Coalition", ("PVV", "VVD", "FvD", "JA21", "BBB"), "Conservative alternative"),
    ("Center Coalition", ("VVD", "NSC", "D66", "CDA", "CU"), "Traditional centre parties"),
    ("Grand Coalition", ("PVV", "GL-PvdA", "VVD", "NSC"), "The four largest parties"),
    ("Minority Government", ("VVD", "D66", "NSC"), "Depends on external support for a majority"),
]


class ScenarioCatalog:
    """Fixed scenario table intersected with the parties actually seated.

    A scenario that lost more than half of its defining parties is omitted;
    otherwise the partial coalition is returned with the missing parties
    listed, so the caller can flag it as short of seats.
    """

    def __init__(
        self,
        registry: PartyRegistry,
        scorer: PartyCompatibilityScorer | None = None,
        red_lines: RedLineValidator | None = None,
        min_coverage: float = SCENARIO_MIN_COVERAGE,
    ):
        self._registry = registry
        self._scorer = scorer or PartyCompatibilityScorer()
        self._red_lines = red_lines or RedLineValidator()
        self._min_coverage = min_coverage
        logger.debug("ScenarioCatalog initialized with {} scenarios", len(SCENARIOS))

    @staticmethod
    def names() -> list[str]:
        return [name for name, _, _ in SCENARIOS]

    def scenarios(self, result: ElectionResult) -> list[Scenario]:
        seats = result.seat_map()
        found = []

        for name, defining, note in SCENARIOS:
            present = [a for a in defining if seats.get(a, 0) > 0 and a in self._registry]
            missing = tuple(a for a in defining if a not in present)

            if not present or len(present) < self._min_coverage * len(defining):
                logger.debug("Scenario {} omitted, missing {}", name, ", ".join(missing))
                continue

            parties = sorted(self._registry.select(present), key=lambda p: p.abbreviation)
            coalition = Coalition.of(
                parties,
                seats,
                self._scorer.group_score(parties),
                self._red_lines.violations(parties),
                self._scorer.historical_bonus(parties),
            )
            if missing:
                note = f"{note} (missing: {', '.join(missing)})"

            found.append(Scenario(name=name, coalition=coalition, note=note, defining=defining, missing=missing))

        logger.info("Generated {} of {} scenarios", len(found), len(SCENARIOS))
        return found

    def generate(self, result: ElectionResult) -> dict[str, Coalition]:
        """Scenario name -> coalition."""
        return {s.name: s.coalition for s in self.scenarios(result)}
