"""
phenoadapt.genes
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Tuple


@dataclass(frozen=True)
class GeneticDistanceResult:
    """Marker overlap between a reference individual and a relative.

    ``distance`` and ``correlation_score`` are measured against the first
    operand of :func:`compute_distance`, so the result is not symmetric.
    """

    distance: int
    shared_traits: FrozenSet[str]
    correlation_score: float


def _safe_ratio(value: float, total: float) -> float:

    if total <= 0:
        return 0.0
    return float(value / total)


def compute_distance(a: Iterable[str], b: Iterable[str]) -> GeneticDistanceResult:
    """Near-cousin marker correlation of ``a`` relative to ``b``.

    The distance counts the markers of ``a`` that ``b`` does not carry and
    the correlation score is the shared fraction of ``a``. An empty ``a``
    yields a distance of 0 and a correlation of 0.0.
    """
    own = frozenset(a)
    shared = own & frozenset(b)
    return GeneticDistanceResult(
        distance=len(own) - len(shared),
        shared_traits=shared,
        correlation_score=_safe_ratio(len(shared), len(own)),
    )


# -----------------------------------------------------------------------------
# Trait ladder
# -----------------------------------------------------------------------------

HEIGHTENED_SENSORY_PROCESSING = "heightened_sensory_processing"
PATTERN_RECOGNITION_ENHANCED = "pattern_recognition_enhanced"
DETAIL_ORIENTED_FOCUS = "detail_oriented_focus"
ALTERNATIVE_COMMUNICATION_PREFERENCE = "alternative_communication_preference"

# Evaluated top to bottom; a trait is included when the expression score is
# strictly above its threshold. Every rung that applies is kept.
TRAIT_THRESHOLDS: List[Tuple[float, str]] = [
    (0.8, HEIGHTENED_SENSORY_PROCESSING),
    (0.7, PATTERN_RECOGNITION_ENHANCED),
    (0.6, DETAIL_ORIENTED_FOCUS),
    (0.5, ALTERNATIVE_COMMUNICATION_PREFERENCE),
]


def identify_primary_traits(score: float) -> List[str]:
    """Return the trait tags whose threshold ``score`` exceeds, in ladder order."""
    return [trait for threshold, trait in TRAIT_THRESHOLDS if score > threshold]
