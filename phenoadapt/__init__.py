"""
phenoadapt: phenotype-driven interface adaptation.

This package infers a behavioural profile for an individual from marker
overlap across a family network, adapts an interface through a fixed rule
table keyed on the profile's primary traits, and learns which adapted
states keep users satisfied. A small interpreter also maps a 7x7 motion
grid to phenotype-specific actions.

The scoring is a toy heuristic kept for reproducibility. It is not a
medical or diagnostic model.

Top-level usage:

    from phenoadapt import FamilyNetwork, Individual, AdaptationRuleEngine, InMemoryUI

    network = FamilyNetwork()
    network.register_union(
        "MF1",
        Individual.from_markers("M1", ["A1", "A2", "A3"]),
        Individual.from_markers("F1", ["B1", "B2", "B3"]),
    )
    profile = network.predict_neurodivergence(["A1", "B2", "C2", "A3"])

    engine = AdaptationRuleEngine()
    engine.adapt(profile, InMemoryUI())
    print(engine.tracker.analyze_pattern())

See the Streamlit UI in ``app.py`` for an interactive console.
"""

from .adaptation import AdaptationRecord, AdaptationRuleEngine  # noqa: F401
from .family import FamilyNetwork, FamilyUnion, Individual  # noqa: F401
from .genes import GeneticDistanceResult, compute_distance, identify_primary_traits  # noqa: F401
from .genome import NeurodivergenceProfile, predict_neurodivergence  # noqa: F401
from .learning import (  # noqa: F401
    BidirectionalLearningTracker,
    InteractionMetrics,
    Observation,
    canonical_state_key,
)
from .motion import MotionGridInterpreter  # noqa: F401
from .surface import InMemoryUI, UICapabilitySurface  # noqa: F401

__all__ = [
    "AdaptationRecord",
    "AdaptationRuleEngine",
    "BidirectionalLearningTracker",
    "FamilyNetwork",
    "FamilyUnion",
    "GeneticDistanceResult",
    "InMemoryUI",
    "Individual",
    "InteractionMetrics",
    "MotionGridInterpreter",
    "NeurodivergenceProfile",
    "Observation",
    "UICapabilitySurface",
    "canonical_state_key",
    "compute_distance",
    "identify_primary_traits",
    "predict_neurodivergence",
]
