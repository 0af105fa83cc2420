"""Red-line detection - explicit exclusions between coalition members."""

from collections.abc import Sequence

from app.models.parties import Party


class RedLineValidator:
    """Structural exclusion check; independent of compatibility scoring."""

    def exclusions(self, parties: Sequence[Party]) -> dict[tuple[int, int], str]:
        """Ordered index pairs (i, j) where parties[i] excludes parties[j]."""
        return {
            (i, j): f"{p.abbreviation} excludes {q.abbreviation}"
            for i, p in enumerate(parties)
            for j, q in enumerate(parties)
            if p.abbreviation != q.abbreviation and p.excludes(q)
        }

    def violations(self, parties: Sequence[Party]) -> list[str]:
        """'A excludes B' for every ordered pair where A excludes B.

        A mutual exclusion yields two findings; identical strings are collapsed.
        """
        return list(dict.fromkeys(self.exclusions(parties).values()))

    def has_violations(self, parties: Sequence[Party]) -> bool:
        return bool(self.exclusions(parties))
