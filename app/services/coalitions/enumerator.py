"""Coalition enumeration - every multi-party subset, classified."""

import time
from itertools import combinations

from loguru import logger

from app.errors import InvalidInputError
from app.models.coalitions import Coalition, CoalitionAnalysis
from app.models.elections import ElectionResult
from app.models.parties import Party, PartyRegistry
from app.services.coalitions.red_lines import RedLineValidator
from app.services.coalitions.scorer import PartyCompatibilityScorer
from helpers import formulas
from settings import ANALYSIS_BUDGET_MS, MAJORITY_THRESHOLD


class CoalitionEnumerator:
    """Power-set search over seated parties.

    Singletons are skipped: a one-party government needs no compatibility
    check. Each subset lands in exactly one list:
      blocked  - any red-line violation, regardless of seats
      viable   - seats >= majority threshold
      minority - everything else
    """

    def __init__(
        self,
        scorer: PartyCompatibilityScorer | None = None,
        red_lines: RedLineValidator | None = None,
        budget_ms: float = ANALYSIS_BUDGET_MS,
    ):
        self._scorer = scorer or PartyCompatibilityScorer()
        self._red_lines = red_lines or RedLineValidator()
        self._budget_ms = budget_ms
        logger.debug("CoalitionEnumerator initialized")

    @staticmethod
    def candidates(result: ElectionResult, registry: PartyRegistry) -> list[Party]:
        """Seated parties known to the registry, in abbreviation order."""
        parties = []
        for abbr in result.seated():
            party = registry.get(abbr)
            if party is None:
                logger.warning("Seated party {} not in registry, skipped", abbr)
                continue
            parties.append(party)
        return sorted(parties, key=lambda p: p.abbreviation)

    def analyze(
        self,
        result: ElectionResult,
        registry: PartyRegistry,
        majority_threshold: int = MAJORITY_THRESHOLD,
    ) -> CoalitionAnalysis:
        if majority_threshold <= 0:
            raise InvalidInputError(f"Majority threshold must be positive, got {majority_threshold}")

        start = time.perf_counter()
        parties = self.candidates(result, registry)
        seats = result.seat_map()
        n = len(parties)

        scores = self._scorer.matrix(parties).tolist()
        history = self._scorer.history_matrix(parties)
        exclusions = self._red_lines.exclusions(parties)
        excluded_mask = [0] * n
        for i, j in exclusions:
            excluded_mask[i] |= 1 << j

        viable: list[Coalition] = []
        minority: list[Coalition] = []
        blocked: list[Coalition] = []
        analyzed = 0

        for size in range(2, n + 1):
            for members in combinations(range(n), size):
                analyzed += 1
                mask = sum(1 << i for i in members)

                violations = []
                if any(excluded_mask[i] & mask for i in members):
                    violations = [exclusions[i, j] for i in members for j in members if (i, j) in exclusions]

                coalition = Coalition.of(
                    [parties[i] for i in members],
                    seats,
                    formulas.mean_pairwise(scores, members),
                    violations,
                    formulas.mean_known(history, members),
                )

                if violations:
                    blocked.append(coalition)
                elif coalition.total_seats >= majority_threshold:
                    viable.append(coalition)
                else:
                    minority.append(coalition)

        for coalitions in (viable, minority, blocked):
            coalitions.sort(key=Coalition.sort_key)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Analyzed {} combinations in {:.0f}ms: {} viable, {} minority, {} blocked",
            analyzed,
            elapsed,
            len(viable),
            len(minority),
            len(blocked),
        )
        if elapsed > self._budget_ms:
            logger.warning("Coalition analysis took {:.0f}ms (budget {:.0f}ms)", elapsed, self._budget_ms)

        return CoalitionAnalysis(
            viable=viable,
            minority=minority,
            blocked=blocked,
            combinations_analyzed=analyzed,
            analysis_time_ms=elapsed,
            majority_threshold=majority_threshold,
        )
