import itertools

import pytest

from phenoadapt.genes import (
    ALTERNATIVE_COMMUNICATION_PREFERENCE,
    DETAIL_ORIENTED_FOCUS,
    HEIGHTENED_SENSORY_PROCESSING,
    PATTERN_RECOGNITION_ENHANCED,
    compute_distance,
    identify_primary_traits,
)

CHILD = ["A1", "B2", "C2", "A3"]


class TestComputeDistance:
    def test_shared_markers_against_mother(self):
        result = compute_distance(CHILD, ["A1", "A2", "A3"])
        assert result.distance == 2
        assert result.shared_traits == frozenset({"A1", "A3"})
        assert result.correlation_score == pytest.approx(0.5)

    def test_single_shared_marker(self):
        result = compute_distance(CHILD, ["B1", "B2", "B3"])
        assert result.distance == 3
        assert result.shared_traits == frozenset({"B2"})
        assert result.correlation_score == pytest.approx(0.25)

    def test_distance_is_relative_to_first_operand(self):
        forward = compute_distance(CHILD, ["A1", "A2", "A3"])
        backward = compute_distance(["A1", "A2", "A3"], CHILD)
        assert forward.distance == 2
        assert backward.distance == 1
        assert backward.correlation_score == pytest.approx(2 / 3)
        assert forward.shared_traits == backward.shared_traits

    def test_empty_reference_does_not_divide_by_zero(self):
        result = compute_distance([], ["A1", "A2"])
        assert result.distance == 0
        assert result.correlation_score == 0.0
        assert result.shared_traits == frozenset()

    def test_identical_sets_have_zero_distance(self):
        result = compute_distance(["X", "Y", "Z"], ["Z", "Y", "X"])
        assert result.distance == 0
        assert result.correlation_score == 1.0

    def test_disjoint_sets(self):
        result = compute_distance(["X", "Y"], ["A", "B"])
        assert result.distance == 2
        assert result.correlation_score == 0.0

    def test_duplicate_markers_count_once(self):
        result = compute_distance(["A1", "A1", "B1"], ["A1"])
        assert result.distance == 1
        assert result.correlation_score == pytest.approx(0.5)

    def test_correlation_always_in_unit_interval(self):
        pool = ["A", "B", "C", "D"]
        subsets = [
            list(combo)
            for size in range(len(pool) + 1)
            for combo in itertools.combinations(pool, size)
        ]
        for a in subsets:
            for b in subsets:
                result = compute_distance(a, b)
                assert 0.0 <= result.correlation_score <= 1.0
                assert result.distance >= 0


class TestTraitLadder:
    def test_zero_score_has_no_traits(self):
        assert identify_primary_traits(0.0) == []

    def test_all_traits_above_top_threshold(self):
        assert identify_primary_traits(0.81) == [
            HEIGHTENED_SENSORY_PROCESSING,
            PATTERN_RECOGNITION_ENHANCED,
            DETAIL_ORIENTED_FOCUS,
            ALTERNATIVE_COMMUNICATION_PREFERENCE,
        ]

    def test_thresholds_are_strict(self):
        assert identify_primary_traits(0.8) == [
            PATTERN_RECOGNITION_ENHANCED,
            DETAIL_ORIENTED_FOCUS,
            ALTERNATIVE_COMMUNICATION_PREFERENCE,
        ]
        assert identify_primary_traits(0.5) == []

    def test_middle_of_ladder(self):
        assert identify_primary_traits(0.65) == [
            DETAIL_ORIENTED_FOCUS,
            ALTERNATIVE_COMMUNICATION_PREFERENCE,
        ]

    def test_unbounded_score(self):
        assert len(identify_primary_traits(42.0)) == 4
