"""Party compatibility scoring - ideology, flexibility and preferences."""

from collections.abc import Sequence

import numpy as np
from loguru import logger

from app.models.parties import AXES, Party
from helpers import formulas


class PartyCompatibilityScorer:
    """Pairwise and group compatibility in [0, 1].

    score = clamp01(base + flexibility + preference), where
      base        = clamp01((10 - mean axis distance) / 10)
      flexibility = (flex_a + flex_b) / 200
      preference  = 0.2 * (a prefers b + b prefers a) / 2
    An exclusion in either direction forces 0.0.

    The preference bonus is averaged over both directions so the score
    does not depend on argument order.
    """

    PREFERENCE_BONUS = 0.2

    def __init__(self, partnerships: dict[frozenset[str], float] | None = None):
        self._partnerships = partnerships or {}
        logger.debug("PartyCompatibilityScorer initialized with {} partnerships", len(self._partnerships))

    def pairwise_score(self, a: Party, b: Party) -> float:
        if a.excludes(b) or b.excludes(a):
            return 0.0

        distance = formulas.ideological_distance(a.position, b.position)
        base = formulas.clamp01((10 - distance) / 10)
        flexibility = (a.flexibility + b.flexibility) / 200
        preference = self.PREFERENCE_BONUS * (a.prefers(b) + b.prefers(a)) / 2

        return formulas.clamp01(base + flexibility + preference)

    def group_score(self, parties: Sequence[Party]) -> float:
        """Mean pairwise score over all unordered pairs; 0 below two parties. Computed from matrix()."""
        return formulas.mean_pairwise(self.matrix(parties).tolist(), range(len(parties)))

    def history_matrix(self, parties: Sequence[Party]) -> list[list[float | None]]:
        """Partnership value per pair, None where the pair has no record."""
        return [
            [self._partnerships.get(frozenset((a.abbreviation, b.abbreviation))) if a is not b else None for b in parties]
            for a in parties
        ]

    def historical_bonus(self, parties: Sequence[Party]) -> float:
        """Mean partnership value over recorded pairs; 0 when none is recorded."""
        return formulas.mean_known(self.history_matrix(parties), range(len(parties)))

    def matrix(self, parties: Sequence[Party]) -> np.ndarray:
        """n x n pairwise scores (diagonal 1.0), computed in one pass."""
        n = len(parties)
        if not n:
            return np.zeros((0, 0))

        positions = np.array([p.position for p in parties], dtype=float).reshape(n, len(AXES))
        distance = np.abs(positions[:, None, :] - positions[None, :, :]).mean(axis=2)
        base = np.clip((10 - distance) / 10, 0.0, 1.0)

        flex = np.array([p.flexibility for p in parties], dtype=float)
        flexibility = (flex[:, None] + flex[None, :]) / 200

        prefers = np.array([[a.prefers(b) for b in parties] for a in parties], dtype=float)
        excludes = np.array([[a.excludes(b) for b in parties] for a in parties], dtype=bool)
        preference = self.PREFERENCE_BONUS * (prefers + prefers.T) / 2

        scores = np.clip(base + flexibility + preference, 0.0, 1.0)
        scores[excludes | excludes.T] = 0.0
        np.fill_diagonal(scores, 1.0)
        return scores
