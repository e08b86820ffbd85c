import pytest

from phenoadapt.family import FamilyNetwork, Individual
from phenoadapt.genes import (
    ALTERNATIVE_COMMUNICATION_PREFERENCE,
    DETAIL_ORIENTED_FOCUS,
    HEIGHTENED_SENSORY_PROCESSING,
    PATTERN_RECOGNITION_ENHANCED,
)
from phenoadapt.genome import NeurodivergenceProfile


@pytest.fixture
def demo_network():
    network = FamilyNetwork()
    network.register_union(
        "MF1",
        Individual.from_markers("M1", ["A1", "A2", "A3"]),
        Individual.from_markers("F1", ["B1", "B2", "B3"]),
    )
    network.register_union(
        "MF2",
        Individual.from_markers("M2", ["C1", "C2", "C3"]),
        Individual.from_markers("F2", ["D1", "D2", "D3"]),
    )
    return network


@pytest.fixture
def full_profile():
    return NeurodivergenceProfile(
        is_neurodivergent=True,
        spectrum_position=1.5,
        primary_traits=(
            HEIGHTENED_SENSORY_PROCESSING,
            PATTERN_RECOGNITION_ENHANCED,
            DETAIL_ORIENTED_FOCUS,
            ALTERNATIVE_COMMUNICATION_PREFERENCE,
        ),
    )


@pytest.fixture
def empty_profile():
    return NeurodivergenceProfile(
        is_neurodivergent=False, spectrum_position=0.0, primary_traits=()
    )


class StepClock:
    """Deterministic clock that advances by one second per call."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        self.now += 1.0
        return self.now


@pytest.fixture
def clock():
    return StepClock()
