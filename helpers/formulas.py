"""Pure math formulas - no dependencies, easily testable."""
from collections.abc import Sequence
from fractions import Fraction
from itertools import combinations


def dhondt(votes: dict[str, int], total_seats: int) -> dict[str, int]:
    """D'Hondt seat allocation.

    Each round awards a seat to the largest quotient votes / (seats + 1).
    Quotients are compared exactly; ties go to more raw votes, then to the
    lexicographically smaller party id.
    """
    seats = {p: 0 for p in votes}

    for _ in range(total_seats):
        winner = min(votes, key=lambda p: (-Fraction(votes[p], seats[p] + 1), -votes[p], p))
        seats[winner] += 1

    return seats


def shares(values: dict[str, int], total: int | None = None) -> dict[str, float]:
    """Percentage share of each value (0-100)."""
    total = sum(values.values()) if total is None else total
    return {k: v / total * 100 for k, v in values.items()} if total else {k: 0.0 for k in values}


def votes_from_percentages(percentages: dict[str, float], total_voters: int) -> dict[str, int]:
    """Convert poll percentages into a vote tally."""
    return {p: round(pct / 100 * total_voters) for p, pct in percentages.items()}


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def ideological_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Mean absolute per-axis difference."""
    return sum(abs(x - y) for x, y in zip(a, b)) / len(a)


def mean_pairwise(matrix: list[list[float]], members: Sequence[int]) -> float:
    """Average of matrix[i][j] over all unordered pairs of members."""
    pairs = list(combinations(members, 2))
    if not pairs:
        return 0.0
    return sum(matrix[i][j] for i, j in pairs) / len(pairs)


def is_minimal_winning(seats: Sequence[int], quota: int) -> bool:
    """Winning, and losing any single member drops below quota."""
    total = sum(seats)
    return total >= quota and all(total - s < quota for s in seats)


def mean_known(matrix: list[list[float | None]], members: Sequence[int]) -> float:
    """Average of the known (non-None) matrix[i][j] over member pairs; 0 if none."""
    known = [matrix[i][j] for i, j in combinations(members, 2) if matrix[i][j] is not None]
    return sum(known) / len(known) if known else 0.0


def stability(flexibility: Sequence[float], expertise: Sequence[float]) -> float:
    """Coalition stability in [0, 1].

    0.4 * mean flexibility + 0.3 * size factor + 0.3 * mean expertise, with
    flexibility and expertise on a 0-100 scale and the size factor losing
    0.1 for every party beyond two.
    """
    n = len(flexibility)
    if not n:
        return 0.0
    size = 1.0 - (n - 2) * 0.1
    return clamp01(sum(flexibility) / n / 100 * 0.4 + size * 0.3 + sum(expertise) / n / 100 * 0.3)
