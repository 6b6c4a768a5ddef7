"""Numeric helpers shared by the scoring functions.

Every value that reaches the engine's output goes through these helpers, so
out-of-range scores, negative weights and non-finite numbers are resolved here
instead of propagating NaN or Infinity downstream.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Protocol, TypeVar

from radar_scoring.consts import SCORE_MAX, SCORE_MIN, WEIGHT_MAX

logger = logging.getLogger(__name__)


class _Ordered(Protocol):
    order: int


T = TypeVar("T", bound=_Ordered)


def clamp_score(value: float) -> float:
    """Clamp a raw score to [SCORE_MIN, SCORE_MAX].

    NaN is treated as SCORE_MIN; infinities clamp to the nearest bound.
    """
    if math.isnan(value):
        return SCORE_MIN
    return max(SCORE_MIN, min(SCORE_MAX, value))


def effective_weight(weight: float) -> float:
    """Return the weight used in computation.

    Negative or non-finite weights count as 0; finite weights above
    WEIGHT_MAX are capped there.
    """
    if not math.isfinite(weight) or weight < 0:
        return 0.0
    return min(float(weight), WEIGHT_MAX)


def score_for(scores: Mapping[str, float], vendor_id: str) -> float:
    """Look up a vendor's clamped raw score, 0.0 when the entry is missing.

    Args:
        scores: Sparse vendor ID -> raw score mapping
        vendor_id: Vendor to look up

    Returns:
        Score in [SCORE_MIN, SCORE_MAX]
    """
    value = scores.get(vendor_id)
    if value is None:
        return 0.0
    clamped = clamp_score(float(value))
    if clamped != value:
        logger.debug(f"Clamped score {value!r} for vendor '{vendor_id}' to {clamped}")
    return clamped


def by_order(items: Iterable[T]) -> list[T]:
    """Sort items by their ``order`` field, keeping input order on ties."""
    return sorted(items, key=lambda item: item.order)
