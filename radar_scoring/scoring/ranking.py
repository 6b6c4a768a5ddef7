"""Competition ranking with floating-point tolerance."""

from radar_scoring.consts import RANK_EPSILON


def assign_competition_ranks(totals: list[float], epsilon: float = RANK_EPSILON) -> list[int]:
    """Rank totals descending using competition ranking (1, 1, 3).

    A total's rank is 1 + the number of totals greater than it by more than
    ``epsilon``. Totals within ``epsilon`` of each other share a rank and the
    next distinct total gets its 1-based position.

    Args:
        totals: Total scores, one per vendor
        epsilon: Tie tolerance

    Returns:
        Ranks aligned with ``totals``
    """
    order = sorted(range(len(totals)), key=lambda i: -totals[i])
    descending = [totals[i] for i in order]
    ranks = [0] * len(totals)

    # Totals only decrease along `order`, so the greater-than count only grows
    greater = 0
    for index in order:
        value = totals[index]
        while descending[greater] - value > epsilon:
            greater += 1
        ranks[index] = greater + 1

    return ranks
