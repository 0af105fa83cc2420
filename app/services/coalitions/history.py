"""Historical validation - detected coalitions vs cabinets that governed."""

from collections.abc import Sequence

from loguru import logger

from app.models.coalitions import CoalitionAnalysis, HistoricalCoalition


class HistoricalValidator:
    """Share of historical coalitions found among the viable ones."""

    def matches(self, analysis: CoalitionAnalysis, golden_set: Sequence[HistoricalCoalition]) -> list[bool]:
        """Per record: does an identical party set appear in analysis.viable?"""
        viable = {c.party_set for c in analysis.viable}
        return [record.parties in viable for record in golden_set]

    def score(self, analysis: CoalitionAnalysis, golden_set: Sequence[HistoricalCoalition]) -> float:
        """Accuracy in percent (0-100). An empty golden set scores 0."""
        if not golden_set:
            logger.warning("Empty historical golden set")
            return 0.0

        hits = self.matches(analysis, golden_set)
        accuracy = sum(hits) / len(hits) * 100

        logger.info("Historical validation accuracy: {:.1f}% ({}/{})", accuracy, sum(hits), len(hits))
        return accuracy
