"""
phenoadapt genome module.

This module turns marker overlap across a family network into a
neurodivergence profile: an expression score, a binary classification and an
ordered list of primary traits.

Functions:
    predict_neurodivergence(child_markers, family_network) -> NeurodivergenceProfile
        Score a child's markers against every relative in the network.

Classes:
    NeurodivergenceProfile: Holds the derived profile for one query.

The scoring is a simple heuristic. Only relatives whose distance from the
child falls inside ``DISTANCE_WINDOW`` (inclusive on both ends) contribute,
each adding its correlation score times ``EXPRESSION_WEIGHT``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from .genes import compute_distance, identify_primary_traits

if TYPE_CHECKING:
    from .family import Individual

logger = logging.getLogger(__name__)

DISTANCE_WINDOW: Tuple[int, int] = (2, 3)
EXPRESSION_WEIGHT = 1.5
NEURODIVERGENCE_THRESHOLD = 0.7


@dataclass(frozen=True)
class NeurodivergenceProfile:
    """Container for the derived phenotype of an individual."""

    is_neurodivergent: bool
    spectrum_position: float
    primary_traits: Tuple[str, ...]
    preferred_motion_map: Optional[Dict[str, str]] = field(default=None, compare=False)

    @property
    def expression_score(self) -> float:
        return self.spectrum_position


def _contribution(child_markers: frozenset, relative: "Individual") -> float:
    """Weighted correlation of one relative, or 0.0 outside the distance window."""
    result = compute_distance(child_markers, relative.markers)
    low, high = DISTANCE_WINDOW
    if low <= result.distance <= high:
        return result.correlation_score * EXPRESSION_WEIGHT
    return 0.0


def predict_neurodivergence(
    child_markers: Iterable[str], family_network: Iterable["Individual"]
) -> NeurodivergenceProfile:
    """Build a neurodivergence profile for ``child_markers``.

    Parameters
    ----------
    child_markers : Iterable[str]
        Markers carried by the individual being profiled. This set is the
        reference operand of every distance computation.
    family_network : Iterable[Individual]
        Relatives to compare against, in the network's stored order.

    Returns
    -------
    NeurodivergenceProfile
        Profile with the accumulated expression score as its spectrum
        position. An empty network or marker set yields a zero score and
        no traits.
    """
    child = frozenset(child_markers)
    contributions: List[float] = [_contribution(child, r) for r in family_network]
    score = math.fsum(contributions)
    traits = identify_primary_traits(score)
    logger.debug(
        "Expression score %.4f from %d relatives -> %s", score, len(contributions), traits
    )
    return NeurodivergenceProfile(
        is_neurodivergent=score > NEURODIVERGENCE_THRESHOLD,
        spectrum_position=score,
        primary_traits=tuple(traits),
    )
